"""Read-side queries for dashboards."""

from django.db.models import Prefetch, QuerySet

from apps.orders.models import Subscription
from ..models import Product


def _with_related(queryset: QuerySet) -> QuerySet:
    return (
        queryset
        .select_related(
            'owner',
            'catalog_product',
            'business_card_profile',
            'redirect_item',
            'static_item',
        )
        .prefetch_related(
            Prefetch('subscriptions', queryset=Subscription.objects.order_by('-created_at')),
            'business_card_profile__contacts',
            'business_card_profile__social_links',
            'business_card_profile__additional_links',
        )
        .order_by('-created_at')
    )


def list_products_for_owner(*, owner) -> QuerySet:
    """The owner's products, newest first, with everything the dashboard shows."""
    return _with_related(Product.objects.filter(owner=owner))


def list_all_products() -> QuerySet:
    return _with_related(Product.objects.all())
