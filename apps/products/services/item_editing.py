"""Owner edits of redirect and static items."""

import logging

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator
from django.db import transaction
from uuid import UUID
from typing import Optional, Union

from apps.catalog.models import ProductType
from ..models import Product, RedirectItem, StaticItem
from .exceptions import (
    ProductNotFoundError,
    ProductAccessDeniedError,
    ProductNotActiveError,
    InvalidProductDataError,
)

logger = logging.getLogger(__name__)

_validate_url = URLValidator(schemes=['http', 'https'])


def get_owned_active_product(*, product_id: UUID, user, for_update: bool = False) -> Product:
    """
    Load a product the user may edit.

    Raises:
        ProductNotFoundError: If product doesn't exist
        ProductAccessDeniedError: If user is not the owner
        ProductNotActiveError: If product is not ACTIVE
    """
    queryset = Product.objects.all()
    if for_update:
        queryset = queryset.select_for_update()

    try:
        product = queryset.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")

    if product.owner_id != user.id:
        raise ProductAccessDeniedError("Unauthorized - Product does not belong to you")

    if not product.is_active:
        raise ProductNotActiveError("Cannot edit inactive product")

    return product


@transaction.atomic
def update_product_item(
    *,
    product_id: UUID,
    user,
    target_url: Optional[str] = None,
    description: Optional[str] = None
) -> Union[RedirectItem, StaticItem]:
    """
    Set the target of a redirect tag or the text of a static tag.

    A missing item row is created on the fly.

    Raises:
        ProductNotFoundError, ProductAccessDeniedError, ProductNotActiveError
        InvalidProductDataError: Bad URL, or a BUSINESS_CARD product
    """
    product = get_owned_active_product(product_id=product_id, user=user, for_update=True)

    if product.type == ProductType.REDIRECT_ITEM:
        if not target_url:
            raise InvalidProductDataError("Target URL is required for redirect items")
        try:
            _validate_url(target_url)
        except ValidationError:
            raise InvalidProductDataError("Invalid URL format")

        item = product.redirect_item
        if item is None:
            item = RedirectItem.objects.create(target_url=target_url)
            product.redirect_item = item
            product.save(update_fields=['redirect_item', 'updated_at'])
        else:
            item.target_url = target_url
            item.save(update_fields=['target_url', 'updated_at'])

    elif product.type == ProductType.STATIC_ITEM:
        item = product.static_item
        if item is None:
            item = StaticItem.objects.create(description=description or None)
            product.static_item = item
            product.save(update_fields=['static_item', 'updated_at'])
        else:
            item.description = description or None
            item.save(update_fields=['description', 'updated_at'])

    else:
        raise InvalidProductDataError(
            "This endpoint only supports REDIRECT_ITEM and STATIC_ITEM products"
        )

    logger.info("Product %s item updated", product.id)
    return item
