import pytest
from decimal import Decimal
from django.core.cache import cache
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.catalog.models import CatalogProduct, ProductType, BusinessCardPlan


@pytest.fixture(autouse=True)
def clear_cache():
    """Keep cached listings from leaking between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='customer@example.com',
        password='TestPass123!',
        name='Customer',
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
def authenticated_client(api_client, user):
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def starter_card(db):
    return CatalogProduct.objects.create(
        name='Starter Card',
        description='Entry level card',
        one_time_price=Decimal('25.99'),
        monthly_service_fee=Decimal('2.00'),
        yearly_service_fee=Decimal('21.60'),
        type=ProductType.BUSINESS_CARD,
        plan=BusinessCardPlan.STARTER,
    )


@pytest.fixture
def redirect_sticker(db):
    return CatalogProduct.objects.create(
        name='Redirect Sticker',
        one_time_price=Decimal('15.99'),
        monthly_service_fee=Decimal('1.00'),
        yearly_service_fee=Decimal('10.80'),
        type=ProductType.REDIRECT_ITEM,
    )


@pytest.fixture
def retired_product(db):
    return CatalogProduct.objects.create(
        name='Archived Tag',
        one_time_price=Decimal('5.00'),
        monthly_service_fee=Decimal('1.00'),
        yearly_service_fee=Decimal('10.80'),
        type=ProductType.STATIC_ITEM,
        is_active=False,
    )
