"""
Management command to create the demo farm.

Everything is recorded through the service layer, so the demo stock and
cash balances match their movements.

Usage:
    python manage.py seed_demo_data
    python manage.py seed_demo_data --clear  # Remove the demo user and reseed
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.services import FarmRegistrationService
from finances.models import EGG_SALE_CATEGORY, FinancialMovementType, PaymentMethod
from finances.services import FinanceService
from inventory.services import StockService
from production.models import CollectionPeriod
from production.services import CollectionService

User = get_user_model()

DEMO_USERNAME = 'demo'
DEMO_PASSWORD = '123456'


class Command(BaseCommand):
    help = 'Create the demo farm (user "demo", password "123456") with sample data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete the existing demo user before seeding',
        )

    def handle(self, *args, **options):
        existing = User.objects.filter(username=DEMO_USERNAME)
        if existing.exists():
            if not options['clear']:
                self.stdout.write(self.style.WARNING('Demo user already exists, skipping seed.'))
                return
            existing.delete()
            self.stdout.write('Deleted existing demo user')

        with transaction.atomic():
            user = self.seed()

        stock = StockService(user).get_balance()
        finance = FinanceService(user).get_balance()
        self.stdout.write(self.style.SUCCESS(
            f'Demo farm "{user.farm_name}" ready: {stock.egg_count} eggs in stock, '
            f'balance R$ {finance.balance}'
        ))

    def seed(self):
        self.stdout.write('Creating demo user...')
        user = FarmRegistrationService.register(
            username=DEMO_USERNAME,
            password=DEMO_PASSWORD,
            name='João da Silva',
            farm_name='Granja Feliz',
            hen_count=120,
            egg_price=Decimal('10.00'),
        )

        today = timezone.localdate()
        yesterday = today - timedelta(days=1)

        self.stdout.write('Creating egg collections...')
        collections = CollectionService(user)
        for day, period, egg_count in [
            (today, CollectionPeriod.MORNING, 72),
            (today, CollectionPeriod.AFTERNOON, 48),
            (yesterday, CollectionPeriod.MORNING, 75),
            (yesterday, CollectionPeriod.AFTERNOON, 45),
        ]:
            collections.create_collection(day, period, egg_count, notes='Coleta normal')

        self.stdout.write('Creating stock and financial movements...')
        StockService(user).record_sale(
            egg_count=120,
            movement_date=yesterday,
            notes='Venda para cliente local',
            payment_method=PaymentMethod.CASH,
            contact='Cliente Local',
        )

        finance = FinanceService(user)
        finance.record_movement(
            movement_type=FinancialMovementType.EXPENSE,
            category='Ração',
            amount=Decimal('250.00'),
            movement_date=yesterday - timedelta(days=5),
            payment_method=PaymentMethod.TRANSFER,
            contact='Fornecedor de Ração',
            notes='Compra mensal de ração',
        )
        finance.record_movement(
            movement_type=FinancialMovementType.INCOME,
            category=EGG_SALE_CATEGORY,
            amount=Decimal('300.00'),
            movement_date=yesterday - timedelta(days=8),
            payment_method=PaymentMethod.PIX,
            contact='Mercearia Central',
            notes='Venda de 360 ovos',
        )

        return user
