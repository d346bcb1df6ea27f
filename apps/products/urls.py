from django.urls import path
from . import views

app_name = 'products'

urlpatterns = [
    # Owner dashboard
    path('me/products/', views.list_my_products, name='my-products'),
    path('products/<uuid:product_id>/', views.update_product, name='product-update'),
    path('profiles/business-card/<uuid:profile_id>/', views.update_profile, name='profile-update'),

    # Public
    path('cards/<slug:slug>/', views.public_card, name='public-card'),

    # Admin
    path('admin/products/', views.admin_list_products, name='admin-products'),
]
