"""
Account services: farm owner registration.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from farms.services import FarmSettingsService
from finances.models import FinancialBalance
from inventory.models import StockBalance

logger = logging.getLogger(__name__)

User = get_user_model()


class FarmRegistrationService:
    """Create a farm owner account with its zeroed balances."""

    @classmethod
    @transaction.atomic
    def register(cls, username, password, name, farm_name, hen_count=0, egg_price=None, **extra):
        user = User(
            username=username,
            name=name,
            farm_name=farm_name,
            **extra
        )
        if egg_price is not None:
            user.egg_price = egg_price
        user.set_password(password)
        user.save()

        StockBalance.objects.create(user=user)
        FinancialBalance.objects.create(user=user)

        if hen_count:
            FarmSettingsService(user).update_hen_count(hen_count, reason='Cadastro inicial')

        logger.info(f"Registered farm '{farm_name}' for {username} ({hen_count} hens)")
        return user
