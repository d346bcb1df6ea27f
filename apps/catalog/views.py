from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole
from .models import CatalogProduct
from .serializers import (
    PublicCatalogProductSerializer,
    MarketplaceProductSerializer,
    CatalogProductSerializer,
    CatalogProductWriteSerializer,
    CatalogProductUpdateSerializer,
)
from .services import (
    get_public_catalog,
    get_marketplace_products,
    list_catalog_products,
    get_catalog_product,
    create_catalog_product,
    update_catalog_product,
    delete_catalog_product,
    CatalogProductNotFoundError,
    CatalogProductInUseError,
)


@extend_schema(
    responses={200: PublicCatalogProductSerializer(many=True)},
    description="Active catalog products ordered by name.",
    tags=['catalog'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def list_catalog(request):
    return Response(get_public_catalog())


@extend_schema(
    responses={200: MarketplaceProductSerializer(many=True)},
    description="Active products for the marketplace page.",
    tags=['catalog'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def list_marketplace_products(request):
    return Response(get_marketplace_products())


class CatalogProductAdminViewSet(viewsets.ModelViewSet):
    """
    Back-office management of catalog products.

    list: Active catalog products (?include_inactive=true for all)
    create: Create a catalog product; the yearly fee is derived
    retrieve: Get a catalog product
    update: Replace a catalog product
    destroy: Delete a catalog product that was never ordered
    """

    queryset = CatalogProduct.objects.all()
    serializer_class = CatalogProductSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_serializer_class(self):
        if self.action == 'create':
            return CatalogProductWriteSerializer
        if self.action == 'update':
            return CatalogProductUpdateSerializer
        return CatalogProductSerializer

    @extend_schema(
        parameters=[OpenApiParameter('include_inactive', bool, description='Include deactivated products')],
        tags=['admin'],
    )
    def list(self, request, *args, **kwargs):
        include_inactive = request.query_params.get('include_inactive', '').lower() in ('1', 'true', 'yes')
        products = list_catalog_products(include_inactive=include_inactive)
        return Response(CatalogProductSerializer(products, many=True).data)

    @extend_schema(tags=['admin'])
    def retrieve(self, request, *args, **kwargs):
        try:
            catalog_product = get_catalog_product(catalog_product_id=kwargs.get('pk'))
        except CatalogProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CatalogProductSerializer(catalog_product).data)

    @extend_schema(responses={201: CatalogProductSerializer}, tags=['admin'])
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        catalog_product = create_catalog_product(**serializer.validated_data)

        return Response(
            CatalogProductSerializer(catalog_product).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(responses={200: CatalogProductSerializer}, tags=['admin'])
    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            catalog_product = update_catalog_product(
                catalog_product_id=kwargs.get('pk'),
                **serializer.validated_data
            )
        except CatalogProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(CatalogProductSerializer(catalog_product).data)

    @extend_schema(tags=['admin'])
    def destroy(self, request, *args, **kwargs):
        try:
            delete_catalog_product(catalog_product_id=kwargs.get('pk'))
        except CatalogProductNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CatalogProductInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(
            {'message': 'Catalog product deleted successfully'},
            status=status.HTTP_200_OK
        )
