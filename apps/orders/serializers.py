from django.core.validators import URLValidator
from rest_framework import serializers

from apps.products.serializers import OwnerSummarySerializer, RedirectItemSerializer
from apps.products.models import Product, BusinessCardProfile
from .models import Subscription, Payment, BillingCycle


class OrderCreateSerializer(serializers.Serializer):
    """Checkout input. ``password`` is required only for guests."""

    email = serializers.EmailField()
    catalog_product_id = serializers.UUIDField()
    billing_cycle = serializers.ChoiceField(
        choices=BillingCycle.choices,
        error_messages={'invalid_choice': 'Invalid billing cycle. Must be MONTHLY or YEARLY'}
    )
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        write_only=True,
        style={'input_type': 'password'}
    )
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=150)
    profile_for = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    profile_name = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    profile_title = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    profile_slug = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=120)
    redirect_url = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=2048,
        validators=[URLValidator(schemes=['http', 'https'], message='Invalid URL format')]
    )

    def validate_email(self, value):
        return value.strip().lower()


class OrderProductSerializer(serializers.ModelSerializer):

    class Meta:
        model = Product
        fields = ['id', 'name', 'type', 'status']


class OrderSubscriptionSerializer(serializers.ModelSerializer):

    class Meta:
        model = Subscription
        fields = ['id', 'price', 'billing_cycle', 'status']


class OrderPaymentSerializer(serializers.ModelSerializer):

    class Meta:
        model = Payment
        fields = ['id', 'amount', 'currency', 'status']


class OrderProfileSerializer(serializers.ModelSerializer):

    class Meta:
        model = BusinessCardProfile
        fields = ['id', 'slug', 'full_name', 'title', 'profile_picture_url', 'notes']


class OrderResultSerializer(serializers.Serializer):
    """Everything created by a checkout."""

    user = OwnerSummarySerializer()
    product = OrderProductSerializer()
    subscription = OrderSubscriptionSerializer()
    payment = OrderPaymentSerializer()
    profile = OrderProfileSerializer(allow_null=True)
    redirect_item = RedirectItemSerializer(allow_null=True)


class PendingOrderCatalogSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    price = serializers.DecimalField(source='one_time_price', max_digits=10, decimal_places=2)
    plan = serializers.SerializerMethodField()
    type = serializers.CharField()

    def get_plan(self, obj):
        return obj.plan or 'STARTER'


class PendingOrderSubscriptionSerializer(serializers.ModelSerializer):

    class Meta:
        model = Subscription
        fields = ['id', 'billing_cycle', 'price']


class PendingOrderSerializer(serializers.ModelSerializer):
    """A product awaiting activation, as listed in the back-office."""

    catalog_product = PendingOrderCatalogSerializer(read_only=True)
    owner = OwnerSummarySerializer(read_only=True)
    subscriptions = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = ['id', 'catalog_product', 'owner', 'status', 'created_at', 'subscriptions']
        read_only_fields = fields

    def get_subscriptions(self, obj):
        latest = obj.latest_subscription
        if latest is None:
            return []
        return [PendingOrderSubscriptionSerializer(latest).data]
