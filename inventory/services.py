"""
Stock Services

Keeps StockBalance in step with StockMovement.

ATOMICITY: every public method runs inside ``transaction.atomic`` and locks
the user's StockBalance row with ``select_for_update()`` before touching
movements. When a write also touches the cash book (egg sales) the stock
row is locked first and the financial row second.
"""

import logging

from django.db import transaction
from django.db.models import Q, Sum

from core.exceptions import InsufficientStockError, ProtectedMovementError
from .models import StockBalance, StockMovement, StockMovementType

logger = logging.getLogger(__name__)


def calculate_stock(user) -> int:
    """Signed sum of the user's movements: eggs in minus eggs out."""
    totals = StockMovement.objects.filter(user=user).aggregate(
        added=Sum('egg_count', filter=Q(movement_type=StockMovementType.IN)),
        removed=Sum('egg_count', filter=Q(movement_type=StockMovementType.OUT)),
    )
    return (totals['added'] or 0) - (totals['removed'] or 0)


class StockService:
    """
    Egg stock operations for one farm (user).

    Example Usage:
        service = StockService(request.user)
        service.record_movement('in', 120, date.today(), notes='Coleta de manhã')
        service.record_sale(60, date.today(), payment_method='Pix')
    """

    def __init__(self, user):
        self.user = user

    def get_balance(self) -> StockBalance:
        """Current balance row, created at zero if it is missing."""
        balance, _ = StockBalance.objects.get_or_create(user=self.user)
        return balance

    def _lock_balance(self) -> StockBalance:
        # Must run inside transaction.atomic()
        balance, _ = StockBalance.objects.select_for_update().get_or_create(user=self.user)
        return balance

    def refresh_balance(self, balance=None) -> StockBalance:
        """Rewrite the balance row from the movements."""
        with transaction.atomic():
            if balance is None:
                balance = self._lock_balance()
            balance.egg_count = calculate_stock(self.user)
            balance.save(update_fields=['egg_count', 'updated_at'])

        logger.debug(f"Stock balance for {self.user.username}: {balance.egg_count} eggs")
        return balance

    @transaction.atomic
    def record_movement(self, movement_type, egg_count, movement_date, notes='',
                        source_record=None, financial_movement=None,
                        check_available=False) -> StockMovement:
        """
        Add a movement and refresh the balance.

        Args:
            movement_type: StockMovementType value
            egg_count: Eggs moved (positive)
            movement_date: Date of the movement
            notes: Free text shown in the stock history
            source_record: Record that generated the movement (EggCollection)
            financial_movement: Linked egg-sale income
            check_available: Reject an 'out' larger than the current stock

        Raises:
            InsufficientStockError: check_available and not enough eggs
        """
        balance = self._lock_balance()

        if check_available and movement_type == StockMovementType.OUT:
            available = calculate_stock(self.user)
            if egg_count > available:
                raise InsufficientStockError(
                    f"Estoque insuficiente. Disponível: {available}, solicitado: {egg_count}"
                )

        movement = StockMovement.objects.create(
            user=self.user,
            movement_type=movement_type,
            egg_count=egg_count,
            movement_date=movement_date,
            notes=notes or '',
            financial_movement=financial_movement,
            source_type=source_record.__class__.__name__ if source_record else None,
            source_id=str(source_record.id) if source_record else None,
        )
        self.refresh_balance(balance)

        logger.info(
            f"Stock movement {movement.id} recorded for {self.user.username}: "
            f"{movement_type} {egg_count} eggs"
        )
        return movement

    @transaction.atomic
    def record_sale(self, egg_count, movement_date, notes='', payment_method='',
                    contact='') -> StockMovement:
        """
        Take eggs out of stock and book the matching income.

        Income = egg_count / 12 * egg_price, category "Venda de ovos".
        """
        from finances.services import FinanceService

        balance = self._lock_balance()
        available = calculate_stock(self.user)
        if egg_count > available:
            raise InsufficientStockError(
                f"Estoque insuficiente. Disponível: {available}, solicitado: {egg_count}"
            )

        income = FinanceService(self.user).record_egg_sale(
            egg_count=egg_count,
            movement_date=movement_date,
            payment_method=payment_method,
            contact=contact,
        )

        movement = StockMovement.objects.create(
            user=self.user,
            movement_type=StockMovementType.OUT,
            egg_count=egg_count,
            movement_date=movement_date,
            notes=notes or '',
            financial_movement=income,
        )
        self.refresh_balance(balance)

        logger.info(
            f"Egg sale for {self.user.username}: {egg_count} eggs, "
            f"R$ {income.amount} (movement {movement.id})"
        )
        return movement

    @transaction.atomic
    def delete_movement(self, movement: StockMovement) -> None:
        """
        Delete a manual movement together with its egg-sale income.

        Raises:
            ProtectedMovementError: the movement was generated by an egg collection
        """
        if movement.is_from_collection:
            raise ProtectedMovementError()

        balance = self._lock_balance()
        income = movement.financial_movement
        movement_id = movement.id
        movement.delete()

        if income is not None:
            from finances.services import FinanceService
            FinanceService(self.user).delete_movement(income)

        self.refresh_balance(balance)
        logger.info(f"Stock movement {movement_id} deleted for {self.user.username}")
