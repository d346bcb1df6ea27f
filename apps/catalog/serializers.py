from decimal import Decimal

from rest_framework import serializers

from .models import CatalogProduct, ProductType, BusinessCardPlan


class PublicCatalogProductSerializer(serializers.ModelSerializer):
    """Catalog entry as shown on the public storefront."""

    class Meta:
        model = CatalogProduct
        fields = [
            'id',
            'name',
            'description',
            'image_url',
            'one_time_price',
            'monthly_service_fee',
            'yearly_service_fee',
            'type',
            'plan',
        ]
        read_only_fields = fields


class MarketplaceProductSerializer(PublicCatalogProductSerializer):

    class Meta(PublicCatalogProductSerializer.Meta):
        fields = PublicCatalogProductSerializer.Meta.fields + ['is_active']
        read_only_fields = fields


class CatalogProductSerializer(serializers.ModelSerializer):
    """Full catalog product for the back-office."""

    class Meta:
        model = CatalogProduct
        fields = [
            'id',
            'name',
            'description',
            'image_url',
            'one_time_price',
            'monthly_service_fee',
            'yearly_service_fee',
            'type',
            'plan',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CatalogProductWriteSerializer(serializers.Serializer):
    """Input for creating or replacing a catalog product."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image_url = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    one_time_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    monthly_service_fee = serializers.DecimalField(max_digits=10, decimal_places=2)
    type = serializers.ChoiceField(
        choices=ProductType.choices,
        error_messages={'invalid_choice': 'Invalid product type'}
    )
    plan = serializers.ChoiceField(
        choices=BusinessCardPlan.choices,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={'invalid_choice': 'Invalid business card plan'}
    )

    def validate_one_time_price(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError('One-time price must be a positive number')
        return value

    def validate_monthly_service_fee(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError('Monthly service fee must be a positive number')
        return value


class CatalogProductUpdateSerializer(CatalogProductWriteSerializer):
    is_active = serializers.BooleanField(required=False, default=True)
