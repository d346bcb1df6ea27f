import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class PendingOrderPagination(PageNumberPagination):
    """``?page=&limit=`` paging with the totals the back-office table needs."""

    page_size = 10
    page_size_query_param = 'limit'
    max_page_size = 100

    def get_paginated_response(self, data):
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return Response({
            'orders': data,
            'pagination': {
                'page': self.page.number,
                'limit': limit,
                'total': total,
                'total_pages': math.ceil(total / limit) if limit else 0,
            }
        })
