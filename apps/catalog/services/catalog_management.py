"""Catalog product CRUD operations service."""

import logging

from django.db import transaction
from django.db.models import QuerySet
from decimal import Decimal
from uuid import UUID
from typing import Optional

from ..models import CatalogProduct
from .catalog_cache import invalidate_catalog_cache
from .exceptions import CatalogProductNotFoundError, CatalogProductInUseError
from .pricing import compute_yearly_fee

logger = logging.getLogger(__name__)


def list_catalog_products(*, include_inactive: bool = False) -> QuerySet:
    queryset = CatalogProduct.objects.all()
    if not include_inactive:
        queryset = queryset.filter(is_active=True)
    return queryset.order_by('name')


def get_catalog_product(*, catalog_product_id: UUID) -> CatalogProduct:
    try:
        return CatalogProduct.objects.get(id=catalog_product_id)
    except CatalogProduct.DoesNotExist:
        raise CatalogProductNotFoundError("Catalog product not found")


@transaction.atomic
def create_catalog_product(
    *,
    name: str,
    one_time_price: Decimal,
    monthly_service_fee: Decimal,
    type: str,
    description: Optional[str] = None,
    image_url: Optional[str] = None,
    plan: Optional[str] = None,
) -> CatalogProduct:
    """
    Create a catalog product.

    The yearly fee is always derived from the monthly fee, never taken
    from input.

    Returns:
        Created CatalogProduct instance
    """
    catalog_product = CatalogProduct.objects.create(
        name=name,
        description=description or None,
        image_url=image_url or None,
        one_time_price=one_time_price,
        monthly_service_fee=monthly_service_fee,
        yearly_service_fee=compute_yearly_fee(monthly_service_fee),
        type=type,
        plan=plan or None,
        is_active=True,
    )

    transaction.on_commit(invalidate_catalog_cache)
    logger.info("Created catalog product %s (%s)", catalog_product.id, catalog_product.name)
    return catalog_product


@transaction.atomic
def update_catalog_product(
    *,
    catalog_product_id: UUID,
    name: str,
    one_time_price: Decimal,
    monthly_service_fee: Decimal,
    type: str,
    description: Optional[str] = None,
    image_url: Optional[str] = None,
    plan: Optional[str] = None,
    is_active: bool = True,
) -> CatalogProduct:
    """
    Replace all editable fields of a catalog product.

    Raises:
        CatalogProductNotFoundError: If catalog product doesn't exist
    """
    try:
        catalog_product = (
            CatalogProduct.objects
            .select_for_update()
            .get(id=catalog_product_id)
        )
    except CatalogProduct.DoesNotExist:
        raise CatalogProductNotFoundError("Catalog product not found")

    catalog_product.name = name
    catalog_product.description = description or None
    catalog_product.image_url = image_url or None
    catalog_product.one_time_price = one_time_price
    catalog_product.monthly_service_fee = monthly_service_fee
    catalog_product.yearly_service_fee = compute_yearly_fee(monthly_service_fee)
    catalog_product.type = type
    catalog_product.plan = plan or None
    catalog_product.is_active = is_active
    catalog_product.save()

    transaction.on_commit(invalidate_catalog_cache)
    logger.info("Updated catalog product %s", catalog_product.id)
    return catalog_product


@transaction.atomic
def delete_catalog_product(*, catalog_product_id: UUID) -> None:
    """
    Permanently delete a catalog product.

    Raises:
        CatalogProductNotFoundError: If catalog product doesn't exist
        CatalogProductInUseError: If products were already ordered from it
    """
    try:
        catalog_product = (
            CatalogProduct.objects
            .select_for_update()
            .get(id=catalog_product_id)
        )
    except CatalogProduct.DoesNotExist:
        raise CatalogProductNotFoundError("Catalog product not found")

    if catalog_product.products.exists():
        raise CatalogProductInUseError(
            "Catalog product has been ordered and cannot be deleted. Deactivate it instead."
        )

    catalog_product.delete()
    transaction.on_commit(invalidate_catalog_cache)
    logger.info("Deleted catalog product %s", catalog_product_id)
