"""
Financial Tracking Models

Every income or expense of the farm is a FinancialMovement. The farm's cash
position is kept in a single FinancialBalance row per user, recalculated
from the movements whenever one of them is created, edited or deleted.

INCOME CATEGORIES:
==================
Venda de ovos, Venda de galinhas, Outras vendas, Investimento, Outros

EXPENSE CATEGORIES:
===================
Ração, Vacinas, Medicamentos, Equipamentos, Manutenção, Funcionários,
Transporte, Impostos, Outros

Egg sales recorded from the stock screen are created automatically with the
"Venda de ovos" category and linked back from the StockMovement.
"""

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


EGG_SALE_CATEGORY = 'Venda de ovos'

INCOME_CATEGORIES = [
    EGG_SALE_CATEGORY,
    'Venda de galinhas',
    'Outras vendas',
    'Investimento',
    'Outros',
]

EXPENSE_CATEGORIES = [
    'Ração',
    'Vacinas',
    'Medicamentos',
    'Equipamentos',
    'Manutenção',
    'Funcionários',
    'Transporte',
    'Impostos',
    'Outros',
]


class FinancialMovementType(models.TextChoices):
    INCOME = 'income', 'Entrada'
    EXPENSE = 'expense', 'Saída'


class PaymentMethod(models.TextChoices):
    CASH = 'Dinheiro', 'Dinheiro'
    CARD = 'Cartão', 'Cartão'
    PIX = 'Pix', 'Pix'
    TRANSFER = 'Transferência', 'Transferência'
    OTHER = 'Outros', 'Outros'


class FinancialMovement(models.Model):
    """
    A single income or expense entry.

    Amounts are always stored positive; the movement type gives the sign
    when the balance is computed.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='financial_movements'
    )

    movement_type = models.CharField(
        max_length=10,
        choices=FinancialMovementType.choices,
        db_index=True
    )

    category = models.CharField(
        max_length=100,
        help_text="Free text category (see INCOME_CATEGORIES / EXPENSE_CATEGORIES)"
    )

    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    movement_date = models.DateField(db_index=True)

    payment_method = models.CharField(max_length=50, blank=True, default='')
    contact = models.CharField(max_length=150, blank=True, default='')
    notes = models.TextField(blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'financial_movements'
        ordering = ['-movement_date', '-created_at']
        indexes = [
            models.Index(fields=['user', '-movement_date'], name='fin_mov_user_date_idx'),
            models.Index(fields=['user', 'movement_type', 'movement_date'], name='fin_mov_user_type_date_idx'),
        ]

    def __str__(self):
        return f"{self.get_movement_type_display()} {self.category} - R$ {self.amount}"


class FinancialBalance(models.Model):
    """Running net balance (income minus expense) for one user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='financial_balance'
    )

    balance = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00')
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'financial_balance'

    def __str__(self):
        return f"{self.user.username}: R$ {self.balance}"
