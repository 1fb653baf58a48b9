from .models import PAGES, DashboardData
from .service import DashboardService

__all__ = ["DashboardService", "DashboardData", "PAGES"]
