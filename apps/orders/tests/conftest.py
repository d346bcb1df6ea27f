import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.catalog.models import CatalogProduct, ProductType, BusinessCardPlan
from apps.orders.models import Subscription, BillingCycle
from apps.products.models import Product, ProductStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    return User.objects.create_user(
        email='customer@example.com',
        password='TestPass123!',
        name='Aysel Mammadova',
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
def customer_client(customer):
    client = APIClient()
    refresh = RefreshToken.for_user(customer)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


# =============================================================================
# Catalog
# =============================================================================

@pytest.fixture
def card_catalog_product(db):
    return CatalogProduct.objects.create(
        name='Business Card',
        description='Premium NFC card',
        one_time_price=Decimal('49.99'),
        monthly_service_fee=Decimal('5.00'),
        yearly_service_fee=Decimal('54.00'),
        type=ProductType.BUSINESS_CARD,
        plan=BusinessCardPlan.BUSINESS,
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


@pytest.fixture
def inactive_catalog_product(db):
    return CatalogProduct.objects.create(
        name='Retired Card',
        one_time_price=Decimal('19.99'),
        monthly_service_fee=Decimal('2.00'),
        yearly_service_fee=Decimal('21.60'),
        type=ProductType.BUSINESS_CARD,
        is_active=False,
    )


# =============================================================================
# Pending products without their type-specific entity
# =============================================================================

@pytest.fixture
def make_pending_product(customer):
    """Factory for a bare pending product with one MONTHLY subscription."""

    def _make(catalog_product, *, with_subscription=True, billing_cycle=BillingCycle.MONTHLY):
        product = Product.objects.create(
            owner=customer,
            catalog_product=catalog_product,
            name=catalog_product.name,
            type=catalog_product.type,
            status=ProductStatus.PENDING_ACTIVATION,
        )
        if with_subscription:
            Subscription.objects.create(
                product=product,
                plan=catalog_product.plan,
                price=catalog_product.monthly_service_fee,
                billing_cycle=billing_cycle,
            )
        return product

    return _make
