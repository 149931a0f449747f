"""
Tests for Egg Stock

Manual movements, egg sales linked to income, protected collection
movements, and the stock balance invariant.
"""

import pytest
from decimal import Decimal
from django.utils import timezone
from rest_framework import status

from finances.models import FinancialBalance, FinancialMovement, FinancialMovementType
from finances.services import egg_sale_amount
from inventory.models import StockBalance, StockMovement
from inventory.services import StockService, calculate_stock

pytestmark = pytest.mark.django_db


def post_movement(client, movement_type, egg_count, **extra):
    payload = {
        'movement_type': movement_type,
        'egg_count': egg_count,
        'movement_date': timezone.localdate().isoformat(),
        **extra,
    }
    return client.post('/api/stock/movements/', payload, format='json')


@pytest.fixture
def stocked_farm(farmer_user):
    """Farm with 240 eggs in stock."""
    StockService(farmer_user).record_movement('in', 240, timezone.localdate(), notes='Estoque inicial')
    return farmer_user


# =============================================================================
# EGG SALE PRICING
# =============================================================================

class TestEggSaleAmount:

    def test_priced_per_dozen(self):
        assert egg_sale_amount(120, Decimal('10.00')) == Decimal('100.00')

    def test_partial_dozen(self):
        # 30 eggs = 2.5 dozen
        assert egg_sale_amount(30, Decimal('10.00')) == Decimal('25.00')

    def test_rounds_to_cents(self):
        # 7/12 * 10 = 5.8333...
        assert egg_sale_amount(7, Decimal('10.00')) == Decimal('5.83')


# =============================================================================
# BALANCE
# =============================================================================

class TestStockBalance:

    def test_new_farm_starts_at_zero(self, farmer_client):
        response = farmer_client.get('/api/stock/balance/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['egg_count'] == 0

    def test_missing_balance_row_is_recreated(self, farmer_client, farmer_user):
        StockBalance.objects.filter(user=farmer_user).delete()

        response = farmer_client.get('/api/stock/balance/')

        assert response.data['egg_count'] == 0
        assert StockBalance.objects.filter(user=farmer_user).exists()


# =============================================================================
# MANUAL MOVEMENTS
# =============================================================================

class TestManualMovements:

    def test_manual_in(self, farmer_client, farmer_user):
        response = post_movement(farmer_client, 'in', 30, notes='Compra de ovos')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['movement_type'] == 'in'
        assert response.data['financial_movement'] is None
        assert StockBalance.objects.get(user=farmer_user).egg_count == 30

    def test_manual_out_without_sale(self, farmer_client, stocked_farm):
        response = post_movement(farmer_client, 'out', 12, notes='Ovos quebrados')

        assert response.status_code == status.HTTP_201_CREATED
        assert StockBalance.objects.get(user=stocked_farm).egg_count == 228
        assert not FinancialMovement.objects.filter(user=stocked_farm).exists()

    def test_out_larger_than_stock_rejected(self, farmer_client, stocked_farm):
        response = post_movement(farmer_client, 'out', 241)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Estoque insuficiente' in response.data['message']
        assert StockBalance.objects.get(user=stocked_farm).egg_count == 240
        assert StockMovement.objects.filter(user=stocked_farm).count() == 1

    def test_financial_record_ignored_for_in(self, farmer_client, farmer_user):
        post_movement(farmer_client, 'in', 24, create_financial_record=True)

        assert not FinancialMovement.objects.filter(user=farmer_user).exists()

    def test_invalid_type_rejected(self, farmer_client):
        response = post_movement(farmer_client, 'sideways', 10)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'movement_type' in response.data['errors']


# =============================================================================
# EGG SALES
# =============================================================================

class TestEggSales:

    def test_sale_creates_linked_income(self, farmer_client, stocked_farm):
        response = post_movement(
            farmer_client, 'out', 60,
            create_financial_record=True,
            payment_method='Pix',
            contact='Mercado Central',
        )

        assert response.status_code == status.HTTP_201_CREATED

        income = FinancialMovement.objects.get(user=stocked_farm)
        assert income.movement_type == FinancialMovementType.INCOME
        assert income.category == 'Venda de ovos'
        # 60 eggs = 5 dozen at R$ 12.00
        assert income.amount == Decimal('60.00')
        assert income.payment_method == 'Pix'
        assert income.contact == 'Mercado Central'
        assert income.notes == 'Venda de 60 ovos'

        movement = StockMovement.objects.get(id=response.data['id'])
        assert movement.financial_movement_id == income.id
        assert response.data['financial_movement_amount'] == '60.00'

        assert StockBalance.objects.get(user=stocked_farm).egg_count == 180
        assert FinancialBalance.objects.get(user=stocked_farm).balance == Decimal('60.00')

    def test_sale_defaults_to_cash(self, farmer_client, stocked_farm):
        post_movement(farmer_client, 'out', 12, create_financial_record=True)

        income = FinancialMovement.objects.get(user=stocked_farm)
        assert income.payment_method == 'Dinheiro'
        assert income.contact == ''

    def test_sale_beyond_stock_books_nothing(self, farmer_client, stocked_farm):
        response = post_movement(farmer_client, 'out', 500, create_financial_record=True)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not FinancialMovement.objects.filter(user=stocked_farm).exists()
        assert FinancialBalance.objects.get(user=stocked_farm).balance == Decimal('0.00')


# =============================================================================
# DELETE
# =============================================================================

class TestMovementDeletion:

    def test_delete_manual_movement(self, farmer_client, stocked_farm):
        movement_id = post_movement(farmer_client, 'out', 40).data['id']

        response = farmer_client.delete(f'/api/stock/movements/{movement_id}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert StockBalance.objects.get(user=stocked_farm).egg_count == 240

    def test_delete_sale_removes_income(self, farmer_client, stocked_farm):
        movement_id = post_movement(farmer_client, 'out', 24, create_financial_record=True).data['id']
        assert FinancialBalance.objects.get(user=stocked_farm).balance == Decimal('24.00')

        farmer_client.delete(f'/api/stock/movements/{movement_id}/')

        assert not FinancialMovement.objects.filter(user=stocked_farm).exists()
        assert FinancialBalance.objects.get(user=stocked_farm).balance == Decimal('0.00')
        assert StockBalance.objects.get(user=stocked_farm).egg_count == 240

    def test_collection_movement_is_protected(self, farmer_client, farmer_user):
        farmer_client.post('/api/collections/', {
            'collection_date': timezone.localdate().isoformat(),
            'period': 'morning',
            'egg_count': 50,
        }, format='json')
        movement = StockMovement.objects.get(user=farmer_user)

        response = farmer_client.delete(f'/api/stock/movements/{movement.id}/')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Movimentação gerada por coleta não pode ser excluída diretamente'
        assert StockMovement.objects.filter(id=movement.id).exists()

    def test_other_farm_gets_404(self, farmer_client, other_client, stocked_farm):
        movement = StockMovement.objects.get(user=stocked_farm)

        assert other_client.get(f'/api/stock/movements/{movement.id}/').status_code == status.HTTP_404_NOT_FOUND
        assert other_client.delete(f'/api/stock/movements/{movement.id}/').status_code == status.HTTP_404_NOT_FOUND
        assert other_client.get(f'/api/stock/movements/{movement.id}/').data == {
            'message': 'Movimentação de estoque não encontrada'
        }
        assert StockMovement.objects.filter(id=movement.id).exists()


# =============================================================================
# LISTING
# =============================================================================

class TestMovementListing:

    def test_list_with_limit(self, farmer_client, farmer_user):
        for count in range(1, 6):
            post_movement(farmer_client, 'in', count)

        response = farmer_client.get('/api/stock/movements/?limit=3')

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 3
        # Same date: newest first
        assert [item['egg_count'] for item in response.data] == [5, 4, 3]

    def test_filter_by_type(self, farmer_client, stocked_farm):
        post_movement(farmer_client, 'out', 10)

        response = farmer_client.get('/api/stock/movements/?movement_type=out')

        assert [item['movement_type'] for item in response.data] == ['out']

    def test_only_own_movements(self, farmer_client, other_client, stocked_farm):
        response = other_client.get('/api/stock/movements/')

        assert response.data == []


# =============================================================================
# BALANCE INVARIANT
# =============================================================================

class TestStockInvariant:

    def test_balance_equals_signed_sum(self, farmer_client, stocked_farm):
        post_movement(farmer_client, 'out', 30)
        sale_id = post_movement(farmer_client, 'out', 12, create_financial_record=True).data['id']
        post_movement(farmer_client, 'in', 7)
        farmer_client.delete(f'/api/stock/movements/{sale_id}/')

        balance = StockBalance.objects.get(user=stocked_farm).egg_count
        assert balance == calculate_stock(stocked_farm) == 217
