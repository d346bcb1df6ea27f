from django.urls import path
from . import views

app_name = 'account'

urlpatterns = [
    path('me/', views.get_current_user, name='me'),
    path('account/change-email/', views.change_email, name='change-email'),
    path('account/change-password/', views.change_password, name='change-password'),

    # Admin
    path('admin/users/', views.list_users, name='admin-users'),
    path('admin/users/role/', views.update_user_role, name='admin-user-role'),
]
