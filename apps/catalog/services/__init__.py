"""Services for catalog business logic."""

from .exceptions import (
    CatalogServiceError,
    CatalogProductNotFoundError,
    CatalogProductInUseError,
)
from .pricing import compute_yearly_fee
from .catalog_cache import (
    get_public_catalog,
    get_marketplace_products,
    invalidate_catalog_cache,
)
from .catalog_management import (
    list_catalog_products,
    get_catalog_product,
    create_catalog_product,
    update_catalog_product,
    delete_catalog_product,
)

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'CatalogProductNotFoundError',
    'CatalogProductInUseError',
    # Pricing
    'compute_yearly_fee',
    # Public listings
    'get_public_catalog',
    'get_marketplace_products',
    'invalidate_catalog_cache',
    # Admin CRUD
    'list_catalog_products',
    'get_catalog_product',
    'create_catalog_product',
    'update_catalog_product',
    'delete_catalog_product',
]
