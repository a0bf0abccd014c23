from .health_views import WelcomeView
from .stats_views import AdminStatsView


__all__ = ["AdminStatsView", "WelcomeView"]
