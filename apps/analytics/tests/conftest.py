import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.catalog.models import CatalogProduct, ProductType, BusinessCardPlan
from apps.orders.models import Subscription, SubscriptionStatus, Payment, PaymentStatus, BillingCycle
from apps.products.models import Product, ProductStatus, BusinessCardProfile


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def customer(db):
    return User.objects.create_user(
        email='analytics_customer@example.com',
        password='TestPass123!',
        name='Analytics Customer',
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email='analytics_admin@example.com',
        password='AdminPass123!',
        name='Analytics Admin',
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
# Catalog and products
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


def _make_card(*, owner, catalog_product, slug, full_name=None, title=None, views=0,
              status=ProductStatus.ACTIVE, amount=Decimal('39.99')):
    """Business card product with one subscription and one successful payment."""
    profile = BusinessCardProfile.objects.create(
        slug=slug,
        full_name=full_name,
        title=title,
        views=views,
        plan=catalog_product.plan,
    )
    product = Product.objects.create(
        owner=owner,
        catalog_product=catalog_product,
        name=catalog_product.name,
        type=catalog_product.type,
        status=status,
        business_card_profile=profile,
    )
    subscription = Subscription.objects.create(
        product=product,
        status=(
            SubscriptionStatus.ACTIVE if status == ProductStatus.ACTIVE
            else SubscriptionStatus.INACTIVE
        ),
        plan=catalog_product.plan,
        price=catalog_product.monthly_service_fee,
        billing_cycle=BillingCycle.MONTHLY,
    )
    payment = Payment.objects.create(
        subscription=subscription,
        amount=amount,
        status=PaymentStatus.SUCCESSFUL,
    )
    return product, subscription, payment


@pytest.fixture
def make_card(db):
    """Factory for business card products with a subscription and payment."""
    return _make_card


@pytest.fixture
def active_card(customer, card_catalog_product):
    product, _, _ = _make_card(
        owner=customer,
        catalog_product=card_catalog_product,
        slug='popular-card',
        full_name='Popular Person',
        title='Engineer',
        views=42,
    )
    return product


@pytest.fixture
def pending_card(customer, card_catalog_product):
    product, _, _ = _make_card(
        owner=customer,
        catalog_product=card_catalog_product,
        slug='quiet-card',
        views=3,
        status=ProductStatus.PENDING_ACTIVATION,
        amount=Decimal('10.01'),
    )
    return product


@pytest.fixture
def orphan_profile(db):
    """Profile whose product was deleted."""
    return BusinessCardProfile.objects.create(slug='orphan', title='Designer', views=7)
