"""
Egg Production Models

An EggCollection is one collection round (morning or afternoon) on a given
day. Its posture percentage is derived from the farm's hen count at the time
the collection is saved:

    posture_percentage = egg_count / hen_count * 100   (2 decimal places)

Every collection also moves eggs into stock (see production.services).
"""

import uuid
from decimal import Decimal, ROUND_HALF_UP
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class CollectionPeriod(models.TextChoices):
    MORNING = 'morning', 'Manhã'
    AFTERNOON = 'afternoon', 'Tarde'


def calculate_posture_percentage(egg_count, hen_count) -> Decimal:
    """
    Eggs collected per hen, as a percentage rounded to two decimals.

    Returns 0 when the farm has no hens registered.
    """
    if not hen_count or hen_count <= 0:
        return Decimal('0.00')
    percentage = Decimal(egg_count) / Decimal(hen_count) * Decimal('100')
    return percentage.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


class EggCollection(models.Model):
    """Eggs collected in one period of one day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='egg_collections'
    )

    collection_date = models.DateField(
        db_index=True,
        help_text="Date of the collection"
    )

    period = models.CharField(
        max_length=10,
        choices=CollectionPeriod.choices
    )

    egg_count = models.PositiveIntegerField(
        validators=[MinValueValidator(0)],
        help_text="Eggs collected in this period"
    )

    # Derived
    posture_percentage = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="(Eggs collected / hen count) × 100"
    )

    notes = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'egg_collections'
        ordering = ['-collection_date', '-period']
        indexes = [
            models.Index(fields=['user', '-collection_date'], name='egg_coll_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.collection_date} ({self.get_period_display()}): {self.egg_count} ovos"

    @property
    def period_label(self):
        """Lower-case Portuguese period name used in stock notes."""
        return 'manhã' if self.period == CollectionPeriod.MORNING else 'tarde'

    def update_posture(self, hen_count):
        self.posture_percentage = calculate_posture_percentage(self.egg_count, hen_count)
        return self.posture_percentage
