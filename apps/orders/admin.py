from django.contrib import admin

from .models import Subscription, Payment


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    readonly_fields = ['amount', 'currency', 'status', 'payment_gateway_transaction_id', 'created_at']
    can_delete = False


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    """Admin interface for subscriptions."""

    list_display = [
        'product',
        'status',
        'billing_cycle',
        'price',
        'current_period_start',
        'current_period_end',
        'created_at',
    ]
    list_filter = ['status', 'billing_cycle', 'plan']
    search_fields = ['product__name', 'product__owner__email', 'payment_gateway_subscription_id']
    raw_id_fields = ['product']
    readonly_fields = ['payment_gateway_subscription_id', 'created_at', 'updated_at']
    inlines = [PaymentInline]


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin interface for payments."""

    list_display = ['payment_gateway_transaction_id', 'amount', 'currency', 'status', 'created_at']
    list_filter = ['status', 'currency', 'created_at']
    search_fields = ['payment_gateway_transaction_id', 'subscription__product__owner__email']
    raw_id_fields = ['subscription']
    date_hierarchy = 'created_at'
