from django.contrib import admin

from .models import (
    Product,
    BusinessCardProfile,
    ContactInfo,
    SocialLink,
    AdditionalLink,
    RedirectItem,
    StaticItem,
)


class ContactInfoInline(admin.TabularInline):
    model = ContactInfo
    extra = 0


class SocialLinkInline(admin.TabularInline):
    model = SocialLink
    extra = 0


class AdditionalLinkInline(admin.TabularInline):
    model = AdditionalLink
    extra = 0


@admin.register(BusinessCardProfile)
class BusinessCardProfileAdmin(admin.ModelAdmin):
    """Admin interface for business card profiles."""

    list_display = ['slug', 'full_name', 'title', 'plan', 'views', 'created_at']
    list_filter = ['plan', 'created_at']
    search_fields = ['slug', 'full_name', 'title']
    readonly_fields = ['views', 'created_at', 'updated_at']
    inlines = [ContactInfoInline, SocialLinkInline, AdditionalLinkInline]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for purchased products."""

    list_display = ['name', 'owner', 'type', 'status', 'catalog_product', 'created_at']
    list_filter = ['type', 'status', 'created_at']
    search_fields = ['name', 'owner__email', 'business_card_profile__slug']
    raw_id_fields = ['owner', 'business_card_profile', 'redirect_item', 'static_item']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('owner', 'catalog_product')


@admin.register(RedirectItem)
class RedirectItemAdmin(admin.ModelAdmin):
    list_display = ['id', 'target_url', 'updated_at']
    search_fields = ['target_url']


@admin.register(StaticItem)
class StaticItemAdmin(admin.ModelAdmin):
    list_display = ['id', 'description', 'updated_at']
