"""
Cached public catalog listings.

Both the catalog and the marketplace listings are stored serialized under
their own key for CATALOG_CACHE_TTL seconds. Any admin write calls
invalidate_catalog_cache() once its transaction commits.
"""

import logging

from django.conf import settings
from django.core.cache import cache

from ..models import CatalogProduct
from ..serializers import PublicCatalogProductSerializer, MarketplaceProductSerializer

logger = logging.getLogger(__name__)

CATALOG_CACHE_KEY = 'catalog:public'
MARKETPLACE_CACHE_KEY = 'catalog:marketplace'


def _active_products():
    return CatalogProduct.objects.filter(is_active=True).order_by('name')


def _cached_listing(key, serializer_class):
    data = cache.get(key)
    if data is None:
        data = list(serializer_class(_active_products(), many=True).data)
        cache.set(key, data, settings.CATALOG_CACHE_TTL)
    return data


def get_public_catalog():
    """Active catalog products ordered by name, as public dicts."""
    return _cached_listing(CATALOG_CACHE_KEY, PublicCatalogProductSerializer)


def get_marketplace_products():
    """Same as get_public_catalog() but including the is_active flag."""
    return _cached_listing(MARKETPLACE_CACHE_KEY, MarketplaceProductSerializer)


def invalidate_catalog_cache():
    cache.delete_many([CATALOG_CACHE_KEY, MARKETPLACE_CACHE_KEY])
    logger.debug("Catalog cache invalidated")
