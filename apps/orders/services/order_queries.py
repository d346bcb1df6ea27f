"""Back-office order listings."""

from django.db.models import Prefetch, QuerySet

from apps.products.models import Product, ProductStatus
from ..models import Subscription


def list_pending_orders() -> QuerySet:
    """Products awaiting activation, newest first."""
    return (
        Product.objects
        .filter(status=ProductStatus.PENDING_ACTIVATION)
        .select_related('owner', 'catalog_product')
        .prefetch_related(
            Prefetch('subscriptions', queryset=Subscription.objects.order_by('-created_at'))
        )
        .order_by('-created_at')
    )
