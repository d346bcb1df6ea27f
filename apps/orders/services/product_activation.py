"""Admin activation of pending products."""

import logging
import re
import time
from uuid import UUID

from django.conf import settings
from django.db import transaction, OperationalError
from django.utils import timezone

from apps.catalog.models import ProductType, BusinessCardPlan
from apps.products.models import (
    Product,
    ProductStatus,
    BusinessCardProfile,
    RedirectItem,
    StaticItem,
)
from apps.products.services import ensure_unique_slug
from ..models import Subscription, SubscriptionStatus
from .billing import billing_period
from .exceptions import ProductNotFoundError, ActivationError, ActivationFailedError

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT_TARGET = 'https://example.com'
DEFAULT_STATIC_DESCRIPTION = 'Static NFC Item'
DEFAULT_CARD_NAME = 'My Business Card'

_NON_ALNUM = re.compile(r'[^a-z0-9]')


def owner_slug_base(owner) -> str:
    """Compact slug from the owner's name, or the local part of the email."""
    source = owner.name or owner.email.split('@')[0]
    return _NON_ALNUM.sub('', source.lower()) or 'card'


def _create_missing_entity(product: Product) -> None:
    if product.type == ProductType.BUSINESS_CARD and product.business_card_profile_id is None:
        owner = product.owner
        product.business_card_profile = BusinessCardProfile.objects.create(
            slug=ensure_unique_slug(owner_slug_base(owner), separator=''),
            plan=product.catalog_product.plan or BusinessCardPlan.STARTER,
            full_name=owner.name or DEFAULT_CARD_NAME,
        )
    elif product.type == ProductType.REDIRECT_ITEM and product.redirect_item_id is None:
        product.redirect_item = RedirectItem.objects.create(target_url=DEFAULT_REDIRECT_TARGET)
    elif product.type == ProductType.STATIC_ITEM and product.static_item_id is None:
        product.static_item = StaticItem.objects.create(description=DEFAULT_STATIC_DESCRIPTION)


@transaction.atomic
def _activate_once(product_id: UUID) -> Product:
    try:
        product = (
            Product.objects
            .select_for_update()
            .select_related('owner', 'catalog_product')
            .get(id=product_id)
        )
    except Product.DoesNotExist:
        raise ProductNotFoundError("Product not found")

    if product.status != ProductStatus.PENDING_ACTIVATION:
        raise ActivationError(f"Product is already {product.status.lower()}")

    subscription = (
        Subscription.objects
        .select_for_update()
        .filter(product=product)
        .order_by('-created_at')
        .first()
    )
    if subscription is None:
        raise ActivationError("No subscription found for this product")

    start, end = billing_period(subscription.billing_cycle, timezone.now())
    subscription.status = SubscriptionStatus.ACTIVE
    subscription.current_period_start = start
    subscription.current_period_end = end
    subscription.save(update_fields=[
        'status', 'current_period_start', 'current_period_end', 'updated_at'
    ])

    _create_missing_entity(product)

    product.status = ProductStatus.ACTIVE
    product.save()

    return product


def activate_product(*, product_id: UUID) -> Product:
    """
    Activate a pending product and start its subscription period.

    Each attempt runs in its own transaction. Database OperationalErrors
    are retried up to ACTIVATION_MAX_RETRIES attempts, sleeping
    ``attempt`` seconds between them.

    Raises:
        ProductNotFoundError: If product doesn't exist
        ActivationError: If product is not pending or has no subscription
        ActivationFailedError: If every attempt failed on the database
    """
    max_attempts = settings.ACTIVATION_MAX_RETRIES
    last_error = None

    for attempt in range(1, max_attempts + 1):
        try:
            product = _activate_once(product_id)
        except OperationalError as e:
            last_error = e
            logger.warning("Activation attempt %s for product %s failed: %s", attempt, product_id, e)
            if attempt < max_attempts:
                time.sleep(attempt)
            continue

        logger.info("Product %s activated", product.id)
        return product

    logger.error("All %s activation attempts failed for product %s", max_attempts, product_id)
    raise ActivationFailedError(f"Activation failed: {last_error}")
