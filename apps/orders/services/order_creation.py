"""Checkout: turns a catalog product into a pending product for a user."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction

from apps.accounts.models import UserRole
from apps.catalog.models import CatalogProduct, ProductType, BusinessCardPlan
from apps.products.models import (
    Product,
    ProductStatus,
    BusinessCardProfile,
    RedirectItem,
)
from apps.products.services import generate_slug, ensure_unique_slug
from ..models import Subscription, SubscriptionStatus, Payment, PaymentStatus
from .billing import (
    subscription_price,
    new_gateway_subscription_id,
    new_gateway_transaction_id,
)
from .exceptions import OrderValidationError

User = get_user_model()
logger = logging.getLogger(__name__)

FALLBACK_SLUG = 'card'


@dataclass
class OrderResult:
    user: User
    product: Product
    subscription: Subscription
    payment: Payment
    profile: Optional[BusinessCardProfile] = None
    redirect_item: Optional[RedirectItem] = None


def _resolve_customer(*, user, email: str, password: Optional[str], name: Optional[str]) -> User:
    if user is not None:
        return user

    existing = User.objects.filter(email__iexact=email).first()
    if existing is not None:
        # Guests ordering with a known email are attached to that account
        return existing

    return User.objects.create_user(
        email=email,
        password=password,
        name=name or None,
        role=UserRole.USER,
    )


def choose_profile_identity(
    *,
    user,
    profile_for: Optional[str],
    profile_name: Optional[str],
    profile_title: Optional[str]
):
    """
    Pick the card's display name and job title for who the card is for.

    Returns:
        (name, title) with title possibly None
    """
    owner_label = user.name or user.email

    if profile_for == 'myself':
        return profile_name or owner_label, None
    if profile_for == 'business':
        return profile_name or f"{owner_label} Business", None
    if profile_for == 'someone-else':
        return profile_name or 'Unknown Person', profile_title or None
    if profile_name:
        return profile_name, profile_title or None
    return owner_label, profile_title or None


def _create_profile(*, catalog_product, user, profile_for, profile_name, profile_title, profile_slug):
    name, title = choose_profile_identity(
        user=user,
        profile_for=profile_for,
        profile_name=profile_name,
        profile_title=profile_title,
    )
    base_slug = generate_slug(profile_slug or name) or FALLBACK_SLUG

    return BusinessCardProfile.objects.create(
        slug=ensure_unique_slug(base_slug),
        full_name=name,
        title=title,
        notes=f"Vəzifə: {title}" if title else None,
        plan=catalog_product.plan or BusinessCardPlan.STARTER,
    )


@transaction.atomic
def create_order(
    *,
    email: str,
    catalog_product_id: UUID,
    billing_cycle: str,
    user=None,
    password: Optional[str] = None,
    name: Optional[str] = None,
    profile_for: Optional[str] = None,
    profile_name: Optional[str] = None,
    profile_title: Optional[str] = None,
    profile_slug: Optional[str] = None,
    redirect_url: Optional[str] = None
) -> OrderResult:
    """
    Place an order in a single transaction.

    Resolves the customer (signed-in user, existing account for the email,
    or a new account), creates the type-specific entity, a
    PENDING_ACTIVATION product, an INACTIVE subscription and a successful
    one-time payment.

    Raises:
        OrderValidationError: Missing password for guests, or the catalog
            product is missing or inactive
    """
    if user is None and not password:
        raise OrderValidationError("Password is required for new accounts")

    catalog_product = CatalogProduct.objects.filter(id=catalog_product_id, is_active=True).first()
    if catalog_product is None:
        raise OrderValidationError("Product not found or not active")

    customer = _resolve_customer(user=user, email=email, password=password, name=name)

    profile = None
    if catalog_product.type == ProductType.BUSINESS_CARD:
        profile = _create_profile(
            catalog_product=catalog_product,
            user=customer,
            profile_for=profile_for,
            profile_name=profile_name,
            profile_title=profile_title,
            profile_slug=profile_slug,
        )

    redirect_item = None
    if catalog_product.type == ProductType.REDIRECT_ITEM:
        redirect_item = RedirectItem.objects.create(target_url=redirect_url or '')

    product = Product.objects.create(
        owner=customer,
        catalog_product=catalog_product,
        name=catalog_product.name,
        type=catalog_product.type,
        status=ProductStatus.PENDING_ACTIVATION,
        business_card_profile=profile,
        redirect_item=redirect_item,
    )

    subscription = Subscription.objects.create(
        product=product,
        status=SubscriptionStatus.INACTIVE,
        plan=catalog_product.plan,
        price=subscription_price(catalog_product, billing_cycle),
        billing_cycle=billing_cycle,
        payment_gateway_subscription_id=new_gateway_subscription_id(),
    )

    payment = Payment.objects.create(
        subscription=subscription,
        amount=catalog_product.one_time_price,
        currency=settings.PAYMENT_CURRENCY,
        status=PaymentStatus.SUCCESSFUL,
        payment_gateway_transaction_id=new_gateway_transaction_id(),
    )

    logger.info(
        "Order placed: product %s (%s) for user %s",
        product.id, catalog_product.name, customer.id
    )

    return OrderResult(
        user=customer,
        product=product,
        subscription=subscription,
        payment=payment,
        profile=profile,
        redirect_item=redirect_item,
    )
