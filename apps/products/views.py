import logging

from django.http import HttpResponseRedirect
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .serializers import (
    ProductSerializer,
    AdminProductSerializer,
    PublicCardSerializer,
    BusinessCardProfileSerializer,
    RedirectItemSerializer,
    StaticItemSerializer,
    ProductItemUpdateSerializer,
    BusinessCardProfileUpdateSerializer,
)
from .models import RedirectItem
from .services import (
    list_products_for_owner,
    list_all_products,
    update_product_item,
    update_business_card_profile,
    get_public_card,
    resolve_redirect as resolve_redirect_service,
    ProductNotFoundError,
    ProfileNotFoundError,
    ProductAccessDeniedError,
    ProductNotActiveError,
    InvalidProductDataError,
    RedirectNotConfiguredError,
)

logger = logging.getLogger(__name__)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class ItemUpdateResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    item = serializers.DictField()


class ProfileUpdateResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    profile = BusinessCardProfileSerializer()


@extend_schema(
    responses={200: ProductSerializer(many=True)},
    description="Products owned by the current user, newest first.",
    tags=['products'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_my_products(request):
    products = list_products_for_owner(owner=request.user)
    return Response(ProductSerializer(products, many=True).data)


@extend_schema(
    request=ProductItemUpdateSerializer,
    responses={
        200: ItemUpdateResponseSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update the target URL of a redirect tag or the text of a static tag.",
    tags=['products'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def update_product(request, product_id):
    serializer = ProductItemUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        item = update_product_item(
            product_id=product_id,
            user=request.user,
            **serializer.validated_data
        )
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (ProductAccessDeniedError, ProductNotActiveError) as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except InvalidProductDataError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(item, RedirectItem):
        item_data = RedirectItemSerializer(item).data
    else:
        item_data = StaticItemSerializer(item).data

    return Response({
        'message': 'Product updated successfully',
        'item': item_data,
    })


@extend_schema(
    request=BusinessCardProfileUpdateSerializer,
    responses={
        200: ProfileUpdateResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update a business card profile. Supplied contact and link lists replace the stored ones.",
    tags=['products'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def update_profile(request, profile_id):
    serializer = BusinessCardProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        profile = update_business_card_profile(
            profile_id=profile_id,
            user=request.user,
            **serializer.validated_data
        )
    except ProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (ProductAccessDeniedError, ProductNotActiveError) as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Profile updated successfully',
        'profile': BusinessCardProfileSerializer(profile).data,
    })


@extend_schema(
    responses={
        200: PublicCardSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Public business card by slug. Each call counts as a view.",
    tags=['cards'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def public_card(request, slug):
    try:
        profile = get_public_card(slug=slug)
    except ProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except ProductNotActiveError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(PublicCardSerializer(profile).data)


@extend_schema(
    responses={
        307: None,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Entry point encoded on redirect tags.",
    tags=['cards'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def resolve_redirect(request, product_id):
    try:
        target = resolve_redirect_service(product_id=product_id)
    except ProductNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except RedirectNotConfiguredError as e:
        logger.error("Active redirect product %s has no redirect item", product_id)
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HttpResponseRedirect(target.location, status=target.status)


@extend_schema(
    responses={200: AdminProductSerializer(many=True)},
    description="All products, newest first. Admin only.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_list_products(request):
    return Response(AdminProductSerializer(list_all_products(), many=True).data)
