"""
Financial Services

Business logic for the farm's cash book: recording income/expense movements
and keeping the FinancialBalance row in step with them.

The balance is never incremented in place. After every write it is
recalculated from the movements while the balance row is locked, so the
invariant

    balance == sum(income amounts) - sum(expense amounts)

holds after any create, edit or delete, and concurrent requests from the
same user are serialised on the balance row.
"""

import calendar
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict

from django.conf import settings
from django.db import transaction
from django.db.models import DecimalField, Q, Sum, Value
from django.db.models.functions import Coalesce

from core.money import CENTS, to_cents

from .models import (
    EGG_SALE_CATEGORY,
    FinancialBalance,
    FinancialMovement,
    FinancialMovementType,
    PaymentMethod,
)

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def egg_sale_amount(egg_count, egg_price) -> Decimal:
    """
    Income for selling ``egg_count`` eggs at ``egg_price`` per dozen.

    >>> egg_sale_amount(30, Decimal('10.00'))
    Decimal('25.00')
    """
    dozens = Decimal(egg_count) / Decimal(settings.EGGS_PER_DOZEN)
    return to_cents(dozens * Decimal(str(egg_price)))


def calculate_balance(user) -> Decimal:
    """Net of all the user's movements: income minus expense."""
    totals = FinancialMovement.objects.filter(user=user).aggregate(
        income=Coalesce(
            Sum('amount', filter=Q(movement_type=FinancialMovementType.INCOME)),
            Value(ZERO),
            output_field=DecimalField(max_digits=14, decimal_places=2),
        ),
        expense=Coalesce(
            Sum('amount', filter=Q(movement_type=FinancialMovementType.EXPENSE)),
            Value(ZERO),
            output_field=DecimalField(max_digits=14, decimal_places=2),
        ),
    )
    return (totals['income'] - totals['expense']).quantize(CENTS)


class FinanceService:
    """
    Cash book operations for one farm (user).

    Example Usage:
        service = FinanceService(request.user)
        movement = service.record_movement(
            movement_type='expense', category='Ração',
            amount=Decimal('250.00'), movement_date=date.today(),
        )
        service.get_balance().balance
    """

    def __init__(self, user):
        self.user = user

    def get_balance(self) -> FinancialBalance:
        """Current balance row, created at zero if it is missing."""
        balance, _ = FinancialBalance.objects.get_or_create(user=self.user)
        return balance

    def _lock_balance(self) -> FinancialBalance:
        # Must run inside transaction.atomic()
        balance, _ = FinancialBalance.objects.select_for_update().get_or_create(user=self.user)
        return balance

    def refresh_balance(self, balance=None) -> FinancialBalance:
        """Rewrite the balance row from the movements."""
        with transaction.atomic():
            if balance is None:
                balance = self._lock_balance()
            balance.balance = calculate_balance(self.user)
            balance.save(update_fields=['balance', 'updated_at'])

        logger.debug(f"Financial balance for {self.user.username}: R$ {balance.balance}")
        return balance

    @transaction.atomic
    def record_movement(self, **data) -> FinancialMovement:
        """Create a movement and refresh the balance."""
        balance = self._lock_balance()
        movement = FinancialMovement.objects.create(user=self.user, **data)
        self.refresh_balance(balance)

        logger.info(
            f"Financial movement {movement.id} recorded for {self.user.username}: "
            f"{movement.movement_type} {movement.category} R$ {movement.amount}"
        )
        return movement

    @transaction.atomic
    def update_movement(self, movement: FinancialMovement, **changes) -> FinancialMovement:
        """Apply ``changes`` to an existing movement; the balance follows."""
        balance = self._lock_balance()
        for field, value in changes.items():
            setattr(movement, field, value)
        movement.save()
        self.refresh_balance(balance)

        logger.info(f"Financial movement {movement.id} updated for {self.user.username}")
        return movement

    @transaction.atomic
    def delete_movement(self, movement: FinancialMovement) -> None:
        """
        Delete a movement. Stock movements linked to it (egg sales) keep
        their eggs but lose the link.
        """
        balance = self._lock_balance()
        movement_id = movement.id
        movement.delete()
        self.refresh_balance(balance)

        logger.info(f"Financial movement {movement_id} deleted for {self.user.username}")

    def record_egg_sale(self, egg_count, movement_date, payment_method='', contact='') -> FinancialMovement:
        """Income entry for eggs sold from stock, priced per dozen."""
        amount = egg_sale_amount(egg_count, self.user.egg_price)
        return self.record_movement(
            movement_type=FinancialMovementType.INCOME,
            category=EGG_SALE_CATEGORY,
            amount=amount,
            movement_date=movement_date,
            payment_method=payment_method or PaymentMethod.CASH,
            contact=contact or '',
            notes=f"Venda de {egg_count} ovos",
        )

    def monthly_summary(self, year: int, month: int) -> Dict[str, Any]:
        """
        Income, expense and egg sale totals for movements dated in the month.

        Returns:
            {
                'incomes': float,
                'expenses': float,
                'egg_sales': {'total': float, 'egg_count': int},
            }
        """
        from inventory.models import StockMovement

        start_date = date(year, month, 1)
        end_date = date(year, month, calendar.monthrange(year, month)[1])

        month_movements = FinancialMovement.objects.filter(
            user=self.user,
            movement_date__gte=start_date,
            movement_date__lte=end_date,
        )

        incomes = month_movements.filter(
            movement_type=FinancialMovementType.INCOME
        ).aggregate(total=Sum('amount'))['total'] or ZERO

        expenses = month_movements.filter(
            movement_type=FinancialMovementType.EXPENSE
        ).aggregate(total=Sum('amount'))['total'] or ZERO

        egg_sales = month_movements.filter(
            movement_type=FinancialMovementType.INCOME,
            category=EGG_SALE_CATEGORY,
        )
        egg_sales_total = egg_sales.aggregate(total=Sum('amount'))['total'] or ZERO
        eggs_sold = StockMovement.objects.filter(
            financial_movement__in=egg_sales
        ).aggregate(total=Sum('egg_count'))['total'] or 0

        return {
            'year': year,
            'month': month,
            'incomes': float(incomes),
            'expenses': float(expenses),
            'egg_sales': {
                'total': float(egg_sales_total),
                'egg_count': eggs_sold,
            },
        }
