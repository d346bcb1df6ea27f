"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting

Input Serializers:
    MetricsQuerySerializer - Optional reporting month

Response Serializers:
    PlatformMetricsSerializer - Dashboard totals and growth
    ProfileAnalyticsSerializer - Business card profiles ranked by views
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class MetricsQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the platform metrics endpoint.

    Query Parameters:
        period (str): Month to report on in YYYY-MM format. Defaults to
            the current month.
    """

    period = serializers.CharField(
        required=False,
        allow_blank=True,
        help_text='Month period in YYYY-MM format'
    )


# =============================================================================
# Response Serializers
# =============================================================================

class MonthlyGrowthSerializer(serializers.Serializer):
    """Month-over-month growth in percent."""

    users = serializers.FloatField()
    revenue = serializers.FloatField()
    products = serializers.FloatField()
    subscriptions = serializers.FloatField()


class PlatformMetricsSerializer(serializers.Serializer):
    """
    Dashboard metrics.

    Fields:
        monthly_revenue: Sum of successful payments in the month
        monthly_growth: Growth compared to the previous month
        period_start / period_end: Half-open month window used
    """

    total_users = serializers.IntegerField()
    active_products = serializers.IntegerField()
    pending_orders = serializers.IntegerField()
    monthly_revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_products = serializers.IntegerField()
    total_subscriptions = serializers.IntegerField()
    active_subscriptions = serializers.IntegerField()
    total_business_cards = serializers.IntegerField()
    monthly_growth = MonthlyGrowthSerializer()
    period_start = serializers.DateTimeField()
    period_end = serializers.DateTimeField()


class ProfileOwnerSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    email = serializers.EmailField()
    name = serializers.CharField(allow_null=True)


class ProfileAnalyticsEntrySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    slug = serializers.CharField()
    full_name = serializers.CharField()
    title = serializers.CharField()
    views = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    owner = ProfileOwnerSerializer(allow_null=True)


class ProfileAnalyticsSerializer(serializers.Serializer):
    profiles = ProfileAnalyticsEntrySerializer(many=True)
    total_profiles = serializers.IntegerField()
    total_views = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    """Error response."""

    error = serializers.CharField()
