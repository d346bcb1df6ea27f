from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'catalog'

router = SimpleRouter()
router.register(r'admin/catalog', views.CatalogProductAdminViewSet, basename='admin-catalog')

urlpatterns = [
    # Public listings
    # GET    /api/catalog/                 - Active catalog products
    # GET    /api/marketplace/products/    - Marketplace listing
    path('catalog/', views.list_catalog, name='catalog-list'),
    path('marketplace/products/', views.list_marketplace_products, name='marketplace-products'),

    # Admin
    # GET    /api/admin/catalog/           - List (?include_inactive=true)
    # POST   /api/admin/catalog/           - Create
    # GET    /api/admin/catalog/{id}/      - Retrieve
    # PUT    /api/admin/catalog/{id}/      - Replace
    # DELETE /api/admin/catalog/{id}/      - Delete
    path('', include(router.urls)),
]
