import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.catalog.models import CatalogProduct


# =============================================================================
# Public listings
# =============================================================================

@pytest.mark.django_db
class TestPublicCatalog:
    """Tests for GET /api/catalog/ and /api/marketplace/products/"""

    def test_lists_active_products_by_name(self, api_client, starter_card, redirect_sticker, retired_product):
        response = api_client.get(reverse('catalog:catalog-list'))

        assert response.status_code == status.HTTP_200_OK
        names = [p['name'] for p in response.data]
        assert names == ['Redirect Sticker', 'Starter Card']
        assert 'is_active' not in response.data[0]
        assert response.data[1]['one_time_price'] == '25.99'

    def test_marketplace_includes_active_flag(self, api_client, starter_card):
        response = api_client.get(reverse('catalog:marketplace-products'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['is_active'] is True
        assert response.data[0]['image_url'] is None

    def test_listing_is_cached(self, api_client, starter_card):
        url = reverse('catalog:catalog-list')
        api_client.get(url)

        # Bypasses the service layer, so the cache is not invalidated
        CatalogProduct.objects.filter(id=starter_card.id).update(name='Renamed')
        response = api_client.get(url)

        assert response.data[0]['name'] == 'Starter Card'

    def test_admin_write_invalidates_cache(
        self, api_client, admin_client, starter_card, django_capture_on_commit_callbacks
    ):
        url = reverse('catalog:catalog-list')
        api_client.get(url)

        with django_capture_on_commit_callbacks(execute=True):
            admin_client.post(reverse('catalog:admin-catalog-list'), {
                'name': 'Another Card',
                'one_time_price': '10.00',
                'monthly_service_fee': '1.00',
                'type': 'BUSINESS_CARD',
            })
        response = api_client.get(url)

        assert len(response.data) == 2


# =============================================================================
# Admin CRUD
# =============================================================================

@pytest.mark.django_db
class TestAdminCatalog:

    def test_requires_admin(self, authenticated_client):
        response = authenticated_client.get(reverse('catalog:admin-catalog-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('catalog:admin-catalog-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_hides_inactive_by_default(self, admin_client, starter_card, retired_product):
        url = reverse('catalog:admin-catalog-list')

        response = admin_client.get(url)
        assert [p['name'] for p in response.data] == ['Starter Card']

        response = admin_client.get(url, {'include_inactive': 'true'})
        assert len(response.data) == 2

    def test_create_derives_yearly_fee(self, admin_client):
        response = admin_client.post(reverse('catalog:admin-catalog-list'), {
            'name': 'Pro Card',
            'one_time_price': '45.99',
            'monthly_service_fee': '2.99',
            'type': 'BUSINESS_CARD',
            'plan': 'PROFESSIONAL',
            'yearly_service_fee': '1.00',
        })

        assert response.status_code == status.HTTP_201_CREATED
        # 2.99 * 12 * 0.9 = 32.292
        assert response.data['yearly_service_fee'] == '32.29'
        assert response.data['is_active'] is True

    def test_create_rejects_non_positive_price(self, admin_client):
        response = admin_client.post(reverse('catalog:admin-catalog-list'), {
            'name': 'Free Card',
            'one_time_price': '0',
            'monthly_service_fee': '1.00',
            'type': 'BUSINESS_CARD',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'one_time_price' in response.data

    def test_create_rejects_unknown_type(self, admin_client):
        response = admin_client.post(reverse('catalog:admin-catalog-list'), {
            'name': 'Mystery',
            'one_time_price': '1.00',
            'monthly_service_fee': '1.00',
            'type': 'HOLOGRAM',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'type' in response.data

    def test_create_rejects_unknown_plan(self, admin_client):
        response = admin_client.post(reverse('catalog:admin-catalog-list'), {
            'name': 'Mystery',
            'one_time_price': '1.00',
            'monthly_service_fee': '1.00',
            'type': 'BUSINESS_CARD',
            'plan': 'PLATINUM',
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_missing_fields(self, admin_client):
        response = admin_client.post(reverse('catalog:admin-catalog-list'), {'name': 'Incomplete'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve(self, admin_client, starter_card):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': starter_card.id})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Starter Card'

    def test_retrieve_missing(self, admin_client):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_defaults_to_active(self, admin_client, retired_product):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': retired_product.id})
        response = admin_client.put(url, {
            'name': 'Revived Tag',
            'one_time_price': '6.00',
            'monthly_service_fee': '1.50',
            'type': 'STATIC_ITEM',
        })

        assert response.status_code == status.HTTP_200_OK
        retired_product.refresh_from_db()
        assert retired_product.is_active
        assert retired_product.yearly_service_fee == Decimal('16.20')

    def test_update_can_deactivate(self, admin_client, starter_card):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': starter_card.id})
        response = admin_client.put(url, {
            'name': 'Starter Card',
            'one_time_price': '25.99',
            'monthly_service_fee': '2.00',
            'type': 'BUSINESS_CARD',
            'is_active': False,
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_active'] is False

    def test_update_missing(self, admin_client):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.put(url, {
            'name': 'Ghost',
            'one_time_price': '1.00',
            'monthly_service_fee': '1.00',
            'type': 'STATIC_ITEM',
        })

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, admin_client, starter_card):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': starter_card.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not CatalogProduct.objects.filter(id=starter_card.id).exists()

    def test_delete_missing(self, admin_client):
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_ordered_product_conflicts(self, admin_client, starter_card, user):
        from apps.products.models import Product

        Product.objects.create(
            owner=user,
            catalog_product=starter_card,
            name=starter_card.name,
            type=starter_card.type,
        )
        url = reverse('catalog:admin-catalog-detail', kwargs={'pk': starter_card.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert CatalogProduct.objects.filter(id=starter_card.id).exists()
