from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole
from apps.products.serializers import AdminProductSerializer
from apps.products.services import list_all_products
from .pagination import PendingOrderPagination
from .serializers import (
    OrderCreateSerializer,
    OrderResultSerializer,
    PendingOrderSerializer,
)
from .services import (
    create_order as create_order_service,
    activate_product as activate_product_service,
    list_pending_orders as list_pending_orders_service,
    OrderValidationError,
    ProductNotFoundError,
    ActivationError,
    ActivationFailedError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class OrderResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    order = OrderResultSerializer()


class ActivationResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    product = AdminProductSerializer()


@extend_schema(
    request=OrderCreateSerializer,
    responses={
        201: OrderResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description=(
        "Place an order. Signed-in users order for themselves; guests are "
        "matched to an existing account by email or get a new one."
    ),
    tags=['orders'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def create_order(request):
    serializer = OrderCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = request.user if request.user.is_authenticated else None

    try:
        result = create_order_service(user=user, **serializer.validated_data)
    except OrderValidationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Order created successfully!',
        'order': OrderResultSerializer(result).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter('page', int, description='Page number (1-based)'),
        OpenApiParameter('limit', int, description='Orders per page (default 10)'),
    ],
    responses={200: PendingOrderSerializer(many=True)},
    description="Products awaiting activation, newest first. Admin only.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def list_pending_orders(request):
    paginator = PendingOrderPagination()
    page = paginator.paginate_queryset(list_pending_orders_service(), request)
    serializer = PendingOrderSerializer(page, many=True)
    return paginator.get_paginated_response(serializer.data)


@extend_schema(
    request=None,
    responses={
        200: ActivationResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Activate a pending product and start its subscription. Admin only.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def activate_product(request, product_id):
    try:
        product = activate_product_service(product_id=product_id)
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ActivationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except ActivationFailedError as e:
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    product = list_all_products().get(id=product.id)
    return Response({
        'message': 'Product activated successfully',
        'product': AdminProductSerializer(product).data,
    })
