import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.catalog.models import CatalogProduct, ProductType, BusinessCardPlan
from apps.orders.models import Subscription, SubscriptionStatus, BillingCycle
from apps.products.models import (
    Product,
    ProductStatus,
    BusinessCardProfile,
    ContactInfo,
    ContactType,
    RedirectItem,
    StaticItem,
)


@pytest.fixture(autouse=True)
def frontend_url(settings):
    """Redirect tags point at a fixed storefront in tests."""
    settings.FRONTEND_URL = 'https://app.veezet.az'


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        name='Card Owner',
    )


@pytest.fixture
def stranger(db):
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        name='Stranger',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        name='Admin',
        role=UserRole.ADMIN,
        is_staff=True,
    )


@pytest.fixture
def owner_client(owner):
    return _client_for(owner)


@pytest.fixture
def stranger_client(stranger):
    return _client_for(stranger)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


# =============================================================================
# Catalog
# =============================================================================

@pytest.fixture
def card_catalog_product(db):
    return CatalogProduct.objects.create(
        name='Professional Card',
        one_time_price=Decimal('39.99'),
        monthly_service_fee=Decimal('4.00'),
        yearly_service_fee=Decimal('43.20'),
        type=ProductType.BUSINESS_CARD,
        plan=BusinessCardPlan.PROFESSIONAL,
    )


@pytest.fixture
def redirect_catalog_product(db):
    return CatalogProduct.objects.create(
        name='Redirect Sticker',
        one_time_price=Decimal('15.99'),
        monthly_service_fee=Decimal('1.00'),
        yearly_service_fee=Decimal('10.80'),
        type=ProductType.REDIRECT_ITEM,
    )


@pytest.fixture
def static_catalog_product(db):
    return CatalogProduct.objects.create(
        name='Static Tag',
        one_time_price=Decimal('9.99'),
        monthly_service_fee=Decimal('0.50'),
        yearly_service_fee=Decimal('5.40'),
        type=ProductType.STATIC_ITEM,
    )


# =============================================================================
# Products
# =============================================================================

@pytest.fixture
def card_product(owner, card_catalog_product):
    """Active business card with one contact."""
    profile = BusinessCardProfile.objects.create(
        slug='card-owner',
        full_name='Card Owner',
        title='Founder',
        plan=BusinessCardPlan.PROFESSIONAL,
    )
    ContactInfo.objects.create(profile=profile, type=ContactType.PHONE, value='+994501234567')
    product = Product.objects.create(
        owner=owner,
        catalog_product=card_catalog_product,
        name=card_catalog_product.name,
        type=ProductType.BUSINESS_CARD,
        status=ProductStatus.ACTIVE,
        business_card_profile=profile,
    )
    Subscription.objects.create(
        product=product,
        status=SubscriptionStatus.ACTIVE,
        plan=BusinessCardPlan.PROFESSIONAL,
        price=Decimal('4.00'),
        billing_cycle=BillingCycle.MONTHLY,
    )
    return product


@pytest.fixture
def pending_card_product(owner, card_catalog_product):
    profile = BusinessCardProfile.objects.create(slug='pending-card', full_name='Pending')
    return Product.objects.create(
        owner=owner,
        catalog_product=card_catalog_product,
        name=card_catalog_product.name,
        type=ProductType.BUSINESS_CARD,
        status=ProductStatus.PENDING_ACTIVATION,
        business_card_profile=profile,
    )


@pytest.fixture
def redirect_product(owner, redirect_catalog_product):
    return Product.objects.create(
        owner=owner,
        catalog_product=redirect_catalog_product,
        name=redirect_catalog_product.name,
        type=ProductType.REDIRECT_ITEM,
        status=ProductStatus.ACTIVE,
        redirect_item=RedirectItem.objects.create(target_url='https://veezet.az'),
    )


@pytest.fixture
def unconfigured_redirect_product(owner, redirect_catalog_product):
    return Product.objects.create(
        owner=owner,
        catalog_product=redirect_catalog_product,
        name=redirect_catalog_product.name,
        type=ProductType.REDIRECT_ITEM,
        status=ProductStatus.ACTIVE,
        redirect_item=RedirectItem.objects.create(target_url=''),
    )


@pytest.fixture
def pending_redirect_product(owner, redirect_catalog_product):
    return Product.objects.create(
        owner=owner,
        catalog_product=redirect_catalog_product,
        name=redirect_catalog_product.name,
        type=ProductType.REDIRECT_ITEM,
        status=ProductStatus.PENDING_ACTIVATION,
        redirect_item=RedirectItem.objects.create(target_url='https://veezet.az'),
    )


@pytest.fixture
def static_product(owner, static_catalog_product):
    return Product.objects.create(
        owner=owner,
        catalog_product=static_catalog_product,
        name=static_catalog_product.name,
        type=ProductType.STATIC_ITEM,
        status=ProductStatus.ACTIVE,
        static_item=StaticItem.objects.create(description='Hello'),
    )
