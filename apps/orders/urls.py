from django.urls import path
from . import views

app_name = 'orders'

urlpatterns = [
    path('orders/', views.create_order, name='order-create'),

    # Admin
    path('admin/orders/', views.list_pending_orders, name='admin-pending-orders'),
    path('admin/products/<uuid:product_id>/activate/', views.activate_product, name='admin-product-activate'),
]
