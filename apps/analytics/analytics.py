"""
Analytics Module
=================

Read-only aggregate queries behind the back-office dashboard. They count
users, products, subscriptions and business cards, sum revenue, and
compare the current calendar month with the previous one.

Classes:
    AnalyticsQueries: Static methods for the admin analytics endpoints.

Key Features:
    - Platform totals (users, products, subscriptions, business cards)
    - Current-month revenue from successful payments
    - Month-over-month growth percentages
    - Business card profile ranking by views

Example:
    Getting dashboard numbers::

        from apps.analytics.analytics import AnalyticsQueries

        metrics = AnalyticsQueries.platform_metrics()
        print(f"Revenue this month: {metrics['monthly_revenue']}")
        print(f"User growth: {metrics['monthly_growth']['users']}%")

Note:
    Month windows are half-open: ``[first day 00:00, first day of next
    month 00:00)`` in the project time zone.
"""

from datetime import datetime
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db.models import Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.orders.models import Subscription, SubscriptionStatus, Payment, PaymentStatus
from apps.products.models import Product, ProductStatus, BusinessCardProfile
from .exceptions import InvalidPeriodError

User = get_user_model()


def month_start(moment: datetime) -> datetime:
    """Midnight on the first day of ``moment``'s month."""
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def shift_month(start: datetime, months: int) -> datetime:
    """Move a month start by ``months`` (may be negative)."""
    index = start.month - 1 + months
    return start.replace(year=start.year + index // 12, month=index % 12 + 1)


def parse_period(period: str) -> datetime:
    """
    Turn a ``YYYY-MM`` string into an aware datetime inside that month.

    Raises:
        InvalidPeriodError: If the string is not a valid year and month
    """
    try:
        year, month = (int(part) for part in period.split('-'))
        naive = datetime(year, month, 1)
    except (ValueError, TypeError):
        raise InvalidPeriodError("Invalid period format. Use YYYY-MM")
    return timezone.make_aware(naive)


def growth_percentage(current, previous) -> float:
    """
    Percentage change from ``previous`` to ``current``.

    A zero baseline yields 100.0 when there is any current activity and
    0.0 otherwise.

    Example::

        >>> growth_percentage(15, 10)
        50.0
        >>> growth_percentage(3, 0)
        100.0
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round(float((current - previous) / previous * 100), 2)


class AnalyticsQueries:
    """
    Aggregate queries for the admin analytics endpoints.

    Methods:
        platform_metrics: Totals, monthly revenue and month-over-month growth.
        profile_analytics: Business card profiles ranked by views.

    Note:
        All methods return plain dictionaries or lists, not Django objects
        (except nested owners), making them suitable for serialization.
    """

    @staticmethod
    def _revenue_between(start, end):
        return Payment.objects.filter(
            status=PaymentStatus.SUCCESSFUL,
            created_at__gte=start,
            created_at__lt=end,
        ).aggregate(
            total=Coalesce(Sum('amount'), Decimal('0.00'))
        )['total']

    @staticmethod
    def _created_between(queryset, start, end):
        return queryset.filter(created_at__gte=start, created_at__lt=end).count()

    @staticmethod
    def platform_metrics(reference=None):
        """
        Compute the dashboard metrics for the month containing ``reference``.

        Args:
            reference (datetime, optional): Any moment inside the month to
                report on. Defaults to now.

        Returns:
            dict: A dictionary containing:
                - total_users (int): All accounts.
                - active_products (int): Products in ACTIVE status.
                - pending_orders (int): Products awaiting activation.
                - monthly_revenue (Decimal): Successful payments this month.
                - total_products (int): All products.
                - total_subscriptions (int): All subscriptions.
                - active_subscriptions (int): Subscriptions in ACTIVE status.
                - total_business_cards (int): All business card profiles.
                - monthly_growth (dict): ``users``, ``revenue``, ``products``
                  and ``subscriptions`` growth in percent against the
                  previous month, based on rows created in each month.
                - period_start (datetime): First moment of the month.
                - period_end (datetime): First moment of the next month.

        Example:
            Metrics for March 2025::

                metrics = AnalyticsQueries.platform_metrics(
                    reference=datetime(2025, 3, 15, tzinfo=timezone.utc),
                )
        """
        reference = reference or timezone.now()
        current_start = month_start(timezone.localtime(reference))
        next_start = shift_month(current_start, 1)
        previous_start = shift_month(current_start, -1)

        users = User.objects.all()
        products = Product.objects.all()
        subscriptions = Subscription.objects.all()

        current_revenue = AnalyticsQueries._revenue_between(current_start, next_start)
        previous_revenue = AnalyticsQueries._revenue_between(previous_start, current_start)

        def growth(queryset):
            return growth_percentage(
                AnalyticsQueries._created_between(queryset, current_start, next_start),
                AnalyticsQueries._created_between(queryset, previous_start, current_start),
            )

        return {
            'total_users': users.count(),
            'active_products': products.filter(status=ProductStatus.ACTIVE).count(),
            'pending_orders': products.filter(status=ProductStatus.PENDING_ACTIVATION).count(),
            'monthly_revenue': current_revenue,
            'total_products': products.count(),
            'total_subscriptions': subscriptions.count(),
            'active_subscriptions': subscriptions.filter(status=SubscriptionStatus.ACTIVE).count(),
            'total_business_cards': BusinessCardProfile.objects.count(),
            'monthly_growth': {
                'users': growth(users),
                'revenue': growth_percentage(current_revenue, previous_revenue),
                'products': growth(products),
                'subscriptions': growth(subscriptions),
            },
            'period_start': current_start,
            'period_end': next_start,
        }

    @staticmethod
    def profile_analytics():
        """
        Rank business card profiles by views.

        Returns:
            dict: A dictionary containing:
                - profiles (list[dict]): One entry per profile, most viewed
                  first, each with ``id``, ``slug``, ``full_name`` (falling
                  back to the title, then "No name"), ``title`` (or
                  "No title"), ``views``, ``created_at`` (the product's
                  creation time when there is one) and ``owner``
                  (User or None).
                - total_profiles (int): Number of profiles.
                - total_views (int): Sum of all views.
        """
        profiles = (
            BusinessCardProfile.objects
            .select_related('product__owner')
            .order_by('-views', '-created_at')
        )

        entries = []
        for profile in profiles:
            product = profile.get_product()
            entries.append({
                'id': profile.id,
                'slug': profile.slug,
                'full_name': profile.display_name,
                'title': profile.title or 'No title',
                'views': profile.views,
                'created_at': product.created_at if product else profile.created_at,
                'owner': product.owner if product else None,
            })

        return {
            'profiles': entries,
            'total_profiles': len(entries),
            'total_views': sum(entry['views'] for entry in entries),
        }
