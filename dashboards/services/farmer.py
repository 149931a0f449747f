"""
Farmer Dashboard Service

Provides the figures shown on the farm owner's home screen:
- Today's collection (per period, posture percentage)
- Stock on hand and today's stock in/out
- Cash balance and this month's income/expenses
- Farm settings
"""

import logging

from django.db.models import Q, Sum
from django.utils import timezone

from farms.services import FarmSettingsService
from finances.services import FinanceService
from inventory.models import StockMovement, StockMovementType
from inventory.services import StockService
from production.services import CollectionService

logger = logging.getLogger(__name__)


class FarmerDashboardService:
    """Service for farmer dashboard data"""

    def __init__(self, user):
        self.user = user

    def get_today_collection(self, today):
        summary = CollectionService(self.user).day_summary(today)['summary']
        return {
            'total': summary['total'],
            'morning': summary['morning'],
            'afternoon': summary['afternoon'],
            'posture_percentage': summary['posture_percentage'],
        }

    def get_stock_stats(self, today):
        balance = StockService(self.user).get_balance()

        todays_movements = StockMovement.objects.filter(
            user=self.user,
            movement_date=today
        ).aggregate(
            stock_in=Sum('egg_count', filter=Q(movement_type=StockMovementType.IN)),
            stock_out=Sum('egg_count', filter=Q(movement_type=StockMovementType.OUT)),
        )

        return {
            'current_stock': balance.egg_count,
            'today_in': todays_movements['stock_in'] or 0,
            'today_out': todays_movements['stock_out'] or 0,
        }

    def get_financial_stats(self, today):
        service = FinanceService(self.user)
        monthly = service.monthly_summary(today.year, today.month)

        return {
            'balance': service.get_balance().balance,
            'monthly_income': monthly['incomes'],
            'monthly_expenses': monthly['expenses'],
        }

    def get_stats(self):
        """
        All dashboard blocks in one payload.

        Returns:
            dict: today_collection, stock, financial, farm
        """
        today = timezone.localdate()
        stats = {
            'today_collection': self.get_today_collection(today),
            'stock': self.get_stock_stats(today),
            'financial': self.get_financial_stats(today),
            'farm': FarmSettingsService(self.user).get_farm_info(),
        }
        logger.debug(f"Dashboard stats for {self.user.username}: {stats['today_collection']['total']} eggs today")
        return stats
