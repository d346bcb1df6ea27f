from rest_framework import serializers

from apps.catalog.serializers import PublicCatalogProductSerializer
from apps.orders.models import Subscription
from .models import (
    Product,
    BusinessCardProfile,
    ContactInfo,
    SocialLink,
    AdditionalLink,
    RedirectItem,
    StaticItem,
    ContactType,
)


class ContactInfoSerializer(serializers.ModelSerializer):

    class Meta:
        model = ContactInfo
        fields = ['id', 'type', 'value']


class SocialLinkSerializer(serializers.ModelSerializer):

    class Meta:
        model = SocialLink
        fields = ['id', 'name', 'icon', 'url']


class AdditionalLinkSerializer(serializers.ModelSerializer):

    class Meta:
        model = AdditionalLink
        fields = ['id', 'title', 'icon', 'url']


class BusinessCardProfileSerializer(serializers.ModelSerializer):
    """Profile with its contacts and links, for the owner."""

    contacts = ContactInfoSerializer(many=True, read_only=True)
    social_links = SocialLinkSerializer(many=True, read_only=True)
    additional_links = AdditionalLinkSerializer(many=True, read_only=True)

    class Meta:
        model = BusinessCardProfile
        fields = [
            'id',
            'slug',
            'full_name',
            'title',
            'profile_picture_url',
            'notes',
            'plan',
            'views',
            'contacts',
            'social_links',
            'additional_links',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProfileSummarySerializer(serializers.ModelSerializer):

    class Meta:
        model = BusinessCardProfile
        fields = ['id', 'slug', 'full_name', 'title', 'profile_picture_url']
        read_only_fields = fields


class RedirectItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = RedirectItem
        fields = ['id', 'target_url']


class StaticItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = StaticItem
        fields = ['id', 'description']


class SubscriptionSummarySerializer(serializers.ModelSerializer):

    class Meta:
        model = Subscription
        fields = [
            'id',
            'status',
            'price',
            'billing_cycle',
            'current_period_start',
            'current_period_end',
            'created_at',
        ]
        read_only_fields = fields


class OwnerSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    email = serializers.EmailField(read_only=True)


class ProductSerializer(serializers.ModelSerializer):
    """Product with everything the owner's dashboard shows."""

    catalog_product = PublicCatalogProductSerializer(read_only=True)
    subscription = SubscriptionSummarySerializer(source='latest_subscription', read_only=True, allow_null=True)
    profile = BusinessCardProfileSerializer(source='business_card_profile', read_only=True, allow_null=True)
    redirect_item = RedirectItemSerializer(read_only=True, allow_null=True)
    static_item = StaticItemSerializer(read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'type',
            'status',
            'created_at',
            'updated_at',
            'catalog_product',
            'subscription',
            'profile',
            'redirect_item',
            'static_item',
        ]
        read_only_fields = fields


class AdminProductSerializer(ProductSerializer):
    """Product listing for the back-office, including the owner."""

    user = OwnerSummarySerializer(source='owner', read_only=True)
    profile = ProfileSummarySerializer(source='business_card_profile', read_only=True, allow_null=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ['user']
        read_only_fields = fields


class PublicCardSerializer(serializers.ModelSerializer):
    """What anyone scanning the card gets to see."""

    owner = OwnerSummarySerializer(source='product.owner', read_only=True)
    product_name = serializers.CharField(source='product.catalog_product.name', read_only=True)
    contacts = ContactInfoSerializer(many=True, read_only=True)
    social_links = SocialLinkSerializer(many=True, read_only=True)
    additional_links = AdditionalLinkSerializer(many=True, read_only=True)

    class Meta:
        model = BusinessCardProfile
        fields = [
            'slug',
            'full_name',
            'title',
            'profile_picture_url',
            'notes',
            'plan',
            'views',
            'owner',
            'contacts',
            'social_links',
            'additional_links',
            'product_name',
        ]
        read_only_fields = fields


# Input serializers

class ProductItemUpdateSerializer(serializers.Serializer):
    target_url = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=2048)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ContactInputSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=ContactType.choices)
    value = serializers.CharField(max_length=500)


class SocialLinkInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    icon = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    url = serializers.CharField(max_length=2048)


class AdditionalLinkInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    icon = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    url = serializers.CharField(max_length=2048)


class BusinessCardProfileUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    profile_picture_url = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    contacts = ContactInputSerializer(many=True, required=False, allow_null=True)
    social_links = SocialLinkInputSerializer(many=True, required=False, allow_null=True)
    additional_links = AdditionalLinkInputSerializer(many=True, required=False, allow_null=True)
