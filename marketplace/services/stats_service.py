"""
StatsService - back-office dashboard figures.
"""

from typing import Any, Dict

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models import Count, Sum

from marketplace.catalog.domain.models import Boutique, Product
from marketplace.ordering.domain.models import Order

from .base import BaseService, ServiceResult, service_ok


def format_amount(amount: int) -> str:
    """``12500`` -> ``"12 500 FCFA"``."""
    return f"{amount:,}".replace(",", " ") + f" {settings.MARKETPLACE['CURRENCY']}"


class StatsService(BaseService):
    @BaseService.log_performance
    def dashboard(self) -> ServiceResult[Dict[str, Any]]:
        """
        Aggregate order, revenue and catalog counts.

        Commission revenue only counts orders that were delivered (or whose
        commission was already paid).
        """
        by_status = {choice: 0 for choice, _ in Order.STATUS_CHOICES}
        for row in Order.objects.order_by().values("status").annotate(count=Count("id")):
            by_status[row["status"]] = row["count"]

        revenue = (
            Order.objects.filter(status__in=Order.EARNED_STATUSES).aggregate(total=Sum("commission_amount"))["total"]
            or 0
        )

        boutiques_total = Boutique.objects.count()
        boutiques_verified = Boutique.objects.filter(is_verified=True).count()

        return service_ok(
            {
                "orders": {
                    "total": sum(by_status.values()),
                    "by_status": by_status,
                },
                "commission_revenue": format_amount(revenue),
                "commission_revenue_raw": revenue,
                "products": {
                    "total": Product.objects.filter(is_active=True).count(),
                },
                "boutiques": {
                    "total": boutiques_total,
                    "verified": boutiques_verified,
                    "unverified": boutiques_total - boutiques_verified,
                },
                "admins": {
                    "total": get_user_model().objects.count(),
                },
            }
        )
