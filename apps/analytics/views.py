from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.accounts.permissions import IsAdminRole
from .analytics import AnalyticsQueries, parse_period
from .serializers import (
    MetricsQuerySerializer,
    PlatformMetricsSerializer,
    ProfileAnalyticsSerializer,
    ErrorSerializer,
)
from .exceptions import AnalyticsServiceError


@extend_schema(
    parameters=[
        OpenApiParameter('period', OpenApiTypes.STR, description='Month period (YYYY-MM), defaults to current month'),
    ],
    responses={
        200: PlatformMetricsSerializer,
        400: ErrorSerializer,
    },
    description="Platform totals, monthly revenue and month-over-month growth. Admin only.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def platform_metrics(request):
    """Dashboard metrics - thin HTTP handler."""
    query_serializer = MetricsQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    period = query_serializer.validated_data.get('period')

    try:
        reference = parse_period(period) if period else None
    except AnalyticsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    data = AnalyticsQueries.platform_metrics(reference=reference)
    return Response(PlatformMetricsSerializer(data).data)


@extend_schema(
    responses={200: ProfileAnalyticsSerializer},
    description="Business card profiles ranked by views. Admin only.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def profile_analytics(request):
    data = AnalyticsQueries.profile_analytics()
    return Response(ProfileAnalyticsSerializer(data).data)
