from django.contrib import admin
from django.db import transaction

from .models import CatalogProduct
from .services import invalidate_catalog_cache, compute_yearly_fee


@admin.register(CatalogProduct)
class CatalogProductAdmin(admin.ModelAdmin):
    """Admin interface for catalog products."""

    list_display = [
        'name',
        'type',
        'plan',
        'one_time_price',
        'monthly_service_fee',
        'yearly_service_fee',
        'is_active',
        'created_at',
    ]
    list_filter = ['type', 'plan', 'is_active']
    search_fields = ['name', 'description']
    readonly_fields = ['yearly_service_fee', 'created_at', 'updated_at']
    ordering = ['name']

    def save_model(self, request, obj, form, change):
        obj.yearly_service_fee = compute_yearly_fee(obj.monthly_service_fee)
        super().save_model(request, obj, form, change)
        transaction.on_commit(invalidate_catalog_cache)

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        transaction.on_commit(invalidate_catalog_cache)
