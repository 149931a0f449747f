"""
Farm Settings Service

Hen count, egg price and farm name changes for one farm owner.
"""

import logging
from decimal import Decimal

from django.db import transaction

from core.money import to_cents
from farms.models import HenCountHistory

logger = logging.getLogger(__name__)

DEFAULT_HEN_COUNT_REASON = 'Atualização manual'


class FarmSettingsService:
    """
    Example Usage:
        service = FarmSettingsService(request.user)
        service.update_hen_count(150, reason='Compra de lote')
        service.update_egg_price('12.50')
    """

    def __init__(self, user):
        self.user = user

    def get_farm_info(self):
        return {
            'name': self.user.farm_name,
            'hen_count': self.user.hen_count,
            'egg_price': self.user.egg_price,
            'subscription_status': self.user.subscription_status,
        }

    @transaction.atomic
    def update_hen_count(self, hen_count, reason=None) -> HenCountHistory:
        """
        Set the current hen count and record the change.

        Existing collections keep the posture they were saved with.
        """
        previous = self.user.hen_count
        self.user.hen_count = hen_count
        self.user.save(update_fields=['hen_count', 'updated_at'])

        history = HenCountHistory.objects.create(
            user=self.user,
            hen_count=hen_count,
            reason=reason or DEFAULT_HEN_COUNT_REASON,
        )

        logger.info(f"Hen count for {self.user.username}: {previous} -> {hen_count} ({history.reason})")
        return history

    def update_egg_price(self, egg_price) -> Decimal:
        """Price per dozen; stored with two decimals."""
        self.user.egg_price = to_cents(egg_price)
        self.user.save(update_fields=['egg_price', 'updated_at'])

        logger.info(f"Egg price for {self.user.username}: R$ {self.user.egg_price}/dúzia")
        return self.user.egg_price

    def rename_farm(self, farm_name):
        self.user.farm_name = farm_name
        self.user.save(update_fields=['farm_name', 'updated_at'])
        logger.info(f"Farm renamed for {self.user.username}: {farm_name}")
        return self.user

    def history(self, limit):
        return HenCountHistory.objects.filter(user=self.user).order_by('-change_date')[:limit]
