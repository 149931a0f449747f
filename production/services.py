"""
Egg Collection Services

Recording, correcting and removing collections. The stock side is never
edited in place: every change produces a new StockMovement so the stock
history shows exactly what happened.

- create  -> 'in' movement of egg_count ("Coleta de manhã")
- update  -> 'in'/'out' movement of the difference ("Ajuste de coleta manhã")
- delete  -> 'out' movement of egg_count ("Exclusão de coleta manhã")
"""

import logging
from typing import Any, Dict

from django.db import transaction
from django.db.models import Sum

from inventory.models import StockMovementType
from inventory.services import StockService
from .models import CollectionPeriod, EggCollection, calculate_posture_percentage

logger = logging.getLogger(__name__)


class CollectionService:
    """Egg collection operations for one farm (user)."""

    def __init__(self, user):
        self.user = user
        self.stock = StockService(user)

    @transaction.atomic
    def create_collection(self, collection_date, period, egg_count, notes='') -> EggCollection:
        collection = EggCollection(
            user=self.user,
            collection_date=collection_date,
            period=period,
            egg_count=egg_count,
            notes=notes or '',
        )
        # Current hen count, not the count on collection_date
        collection.update_posture(self.user.hen_count)
        collection.save()

        self.stock.record_movement(
            movement_type=StockMovementType.IN,
            egg_count=egg_count,
            movement_date=collection_date,
            notes=f"Coleta de {collection.period_label}",
            source_record=collection,
        )

        logger.info(
            f"Collection {collection.id} for {self.user.username}: "
            f"{egg_count} eggs ({period}, {collection_date}), posture {collection.posture_percentage}%"
        )
        return collection

    @transaction.atomic
    def update_collection(self, collection: EggCollection, **changes) -> EggCollection:
        """
        Apply ``changes``; a different egg_count books the difference in stock.

        The adjustment is dated with the collection's original date.
        """
        old_egg_count = collection.egg_count
        original_date = collection.collection_date
        period_label = collection.period_label

        new_egg_count = changes.get('egg_count')
        if new_egg_count is not None and new_egg_count != old_egg_count:
            difference = new_egg_count - old_egg_count
            self.stock.record_movement(
                movement_type=StockMovementType.IN if difference > 0 else StockMovementType.OUT,
                egg_count=abs(difference),
                movement_date=original_date,
                notes=f"Ajuste de coleta {period_label}",
                source_record=collection,
            )

        for field, value in changes.items():
            setattr(collection, field, value)

        if new_egg_count is not None:
            collection.update_posture(self.user.hen_count)

        collection.save()

        logger.info(f"Collection {collection.id} updated for {self.user.username}")
        return collection

    @transaction.atomic
    def delete_collection(self, collection: EggCollection) -> None:
        """Reverse the collection's eggs out of stock, then delete it."""
        self.stock.record_movement(
            movement_type=StockMovementType.OUT,
            egg_count=collection.egg_count,
            movement_date=collection.collection_date,
            notes=f"Exclusão de coleta {collection.period_label}",
            source_record=collection,
        )
        collection_id = collection.id
        collection.delete()

        logger.info(f"Collection {collection_id} deleted for {self.user.username}")

    def collections_for_date(self, day):
        return EggCollection.objects.filter(
            user=self.user,
            collection_date=day,
        ).order_by('-period', 'created_at')

    def day_summary(self, day) -> Dict[str, Any]:
        """
        Totals for one day, split by period, with posture for the whole day.
        """
        collections = self.collections_for_date(day)

        morning = collections.filter(
            period=CollectionPeriod.MORNING
        ).aggregate(total=Sum('egg_count'))['total'] or 0
        afternoon = collections.filter(
            period=CollectionPeriod.AFTERNOON
        ).aggregate(total=Sum('egg_count'))['total'] or 0
        total = morning + afternoon

        return {
            'collections': collections,
            'summary': {
                'date': day.isoformat(),
                'total': total,
                'morning': morning,
                'afternoon': afternoon,
                'posture_percentage': calculate_posture_percentage(total, self.user.hen_count),
            },
        }
