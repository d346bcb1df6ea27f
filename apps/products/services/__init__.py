"""Services for products business logic."""

from .exceptions import (
    ProductsServiceError,
    ProductNotFoundError,
    ProfileNotFoundError,
    ProductAccessDeniedError,
    ProductNotActiveError,
    InvalidProductDataError,
    RedirectNotConfiguredError,
)
from .slugs import generate_slug, ensure_unique_slug
from .item_editing import get_owned_active_product, update_product_item
from .profile_editing import update_business_card_profile
from .public_cards import get_public_card
from .redirects import RedirectTarget, resolve_redirect
from .product_queries import list_products_for_owner, list_all_products

__all__ = [
    # Exceptions
    'ProductsServiceError',
    'ProductNotFoundError',
    'ProfileNotFoundError',
    'ProductAccessDeniedError',
    'ProductNotActiveError',
    'InvalidProductDataError',
    'RedirectNotConfiguredError',
    # Slugs
    'generate_slug',
    'ensure_unique_slug',
    # Owner edits
    'get_owned_active_product',
    'update_product_item',
    'update_business_card_profile',
    # Public
    'get_public_card',
    'RedirectTarget',
    'resolve_redirect',
    # Queries
    'list_products_for_owner',
    'list_all_products',
]
