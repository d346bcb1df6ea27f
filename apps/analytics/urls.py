from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('admin/metrics/', views.platform_metrics, name='platform-metrics'),
    path('admin/analytics/profiles/', views.profile_analytics, name='profile-analytics'),
]
