"""
Egg Stock Models

Tracks the eggs a farm has on hand:
- StockMovement: every addition (collection, adjustment) or removal (sale,
  loss, collection reversal)
- StockBalance: one running total per user, always equal to the signed sum
  of that user's movements

Flow:
1. EggCollection created/edited/deleted -> StockMovement (in/out) with
   source_type='EggCollection'
2. Manual movement from the stock screen -> StockMovement, optionally linked
   to an egg-sale FinancialMovement
3. Any movement write -> StockBalance recalculated
"""

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class StockMovementType(models.TextChoices):
    IN = 'in', 'Entrada'
    OUT = 'out', 'Saída'


class StockMovement(models.Model):
    """
    Audit trail of egg stock changes.

    egg_count is always positive; movement_type gives the direction.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='stock_movements'
    )

    movement_type = models.CharField(
        max_length=10,
        choices=StockMovementType.choices,
        db_index=True
    )

    egg_count = models.PositiveIntegerField(validators=[MinValueValidator(0)])

    movement_date = models.DateField(db_index=True)

    # Egg sale that produced this movement (if any)
    financial_movement = models.ForeignKey(
        'finances.FinancialMovement',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='stock_movements'
    )

    # Source tracking (polymorphic reference)
    source_type = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        help_text='Model name of source record (EggCollection)'
    )
    source_id = models.CharField(
        max_length=50,
        blank=True,
        null=True,
        help_text='UUID of source record'
    )

    notes = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stock_movements'
        ordering = ['-movement_date', '-created_at']
        indexes = [
            models.Index(fields=['user', '-movement_date'], name='stock_mov_user_date_idx'),
            models.Index(fields=['source_type', 'source_id'], name='stock_mov_source_idx'),
        ]

    def __str__(self):
        action = "Entrada" if self.movement_type == StockMovementType.IN else "Saída"
        return f"{action} de {self.egg_count} ovos em {self.movement_date}"

    @property
    def is_from_collection(self):
        return self.source_type == 'EggCollection'


class StockBalance(models.Model):
    """Eggs currently in stock for one user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='stock_balance'
    )

    egg_count = models.IntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stock_balance'

    def __str__(self):
        return f"{self.user.username}: {self.egg_count} ovos"
