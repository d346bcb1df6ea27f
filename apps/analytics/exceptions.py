"""
Domain exceptions for analytics app.

Exception Hierarchy:
    AnalyticsServiceError (base)
    └── InvalidPeriodError
"""


class AnalyticsServiceError(Exception):
    """
    Base exception for all analytics service errors.

        try:
            reference = parse_period(value)
        except AnalyticsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidPeriodError(AnalyticsServiceError):
    """
    Raised when period format is invalid.

    Period must be in YYYY-MM format (e.g., '2025-01').
    """

    pass
