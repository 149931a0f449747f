"""
Tests for Egg Collections

Every collection change must move eggs in stock:
1. create  -> 'in' movement of egg_count
2. update  -> 'in'/'out' movement of the difference, dated with the collection
3. delete  -> 'out' movement of egg_count

and the stock balance always equals the signed sum of movements.
"""

import pytest
from datetime import timedelta
from decimal import Decimal
from django.conf import settings
from django.utils import timezone
from rest_framework import status

from inventory.models import StockBalance, StockMovement, StockMovementType
from inventory.services import calculate_stock
from production.models import CollectionPeriod, EggCollection, calculate_posture_percentage

pytestmark = pytest.mark.django_db


def create_collection(client, egg_count, period='morning', day=None, **extra):
    payload = {
        'collection_date': (day or timezone.localdate()).isoformat(),
        'period': period,
        'egg_count': egg_count,
        **extra,
    }
    return client.post('/api/collections/', payload, format='json')


def stock_of(user):
    return StockBalance.objects.get(user=user).egg_count


# =============================================================================
# POSTURE PERCENTAGE
# =============================================================================

class TestPosturePercentage:

    def test_rounds_to_two_decimals(self):
        assert calculate_posture_percentage(1, 3) == Decimal('33.33')
        assert calculate_posture_percentage(2, 3) == Decimal('66.67')

    def test_full_flock(self):
        assert calculate_posture_percentage(120, 120) == Decimal('100.00')

    def test_no_hens_gives_zero(self):
        assert calculate_posture_percentage(50, 0) == Decimal('0.00')


# =============================================================================
# CREATE
# =============================================================================

class TestCollectionCreation:

    def test_create_collection(self, farmer_client, farmer_user):
        response = create_collection(farmer_client, 72, notes='Coleta normal')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['egg_count'] == 72
        assert response.data['period'] == 'morning'
        # 72 eggs / 100 hens
        assert response.data['posture_percentage'] == '72.00'
        assert response.data['notes'] == 'Coleta normal'

    def test_create_adds_eggs_to_stock(self, farmer_client, farmer_user):
        response = create_collection(farmer_client, 72, period='afternoon')

        movement = StockMovement.objects.get(user=farmer_user)
        assert movement.movement_type == StockMovementType.IN
        assert movement.egg_count == 72
        assert movement.notes == 'Coleta de tarde'
        assert movement.source_type == 'EggCollection'
        assert movement.source_id == str(response.data['id'])
        assert stock_of(farmer_user) == 72

    def test_stock_movement_dated_with_collection(self, farmer_client, farmer_user):
        last_week = timezone.localdate() - timedelta(days=7)
        create_collection(farmer_client, 40, day=last_week)

        movement = StockMovement.objects.get(user=farmer_user)
        assert movement.movement_date == last_week

    def test_posture_uses_current_hen_count(self, farmer_client, farmer_user):
        farmer_client.put('/api/farm/hen-count/', {'hen_count': 80}, format='json')

        response = create_collection(farmer_client, 60)

        assert response.data['posture_percentage'] == '75.00'

    def test_negative_egg_count_rejected(self, farmer_client, farmer_user):
        response = create_collection(farmer_client, -5)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Dados inválidos'
        assert 'egg_count' in response.data['errors']
        assert not StockMovement.objects.filter(user=farmer_user).exists()

    def test_unknown_period_rejected(self, farmer_client):
        response = create_collection(farmer_client, 10, period='night')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'period' in response.data['errors']

    def test_posture_cannot_be_sent(self, farmer_client):
        response = create_collection(farmer_client, 50, posture_percentage='99.00')

        assert response.data['posture_percentage'] == '50.00'

    def test_high_posture_is_saved(self, farmer_client, farmer_user):
        # Miscounts or a stale hen count can push posture far past 100%
        farmer_client.put('/api/farm/hen-count/', {'hen_count': 1}, format='json')

        response = create_collection(farmer_client, settings.MAX_EGG_COUNT)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['posture_percentage'] == '100000000.00'

        today = farmer_client.get('/api/collections/today/')
        assert today.status_code == status.HTTP_200_OK
        assert today.data['summary']['posture_percentage'] == '100000000.00'

        dashboard = farmer_client.get('/api/dashboard/stats/')
        assert dashboard.status_code == status.HTTP_200_OK
        assert dashboard.data['today_collection']['posture_percentage'] == '100000000.00'

    def test_egg_count_above_limit_rejected(self, farmer_client, farmer_user):
        response = create_collection(farmer_client, settings.MAX_EGG_COUNT + 1)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'egg_count' in response.data['errors']
        assert not EggCollection.objects.filter(user=farmer_user).exists()
        assert not StockMovement.objects.filter(user=farmer_user).exists()


# =============================================================================
# UPDATE
# =============================================================================

class TestCollectionUpdate:

    def test_increase_books_difference_in(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 70).data['id']

        response = farmer_client.patch(
            f'/api/collections/{collection_id}/', {'egg_count': 80}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['egg_count'] == 80
        assert response.data['posture_percentage'] == '80.00'

        adjustment = StockMovement.objects.get(user=farmer_user, notes='Ajuste de coleta manhã')
        assert adjustment.movement_type == StockMovementType.IN
        assert adjustment.egg_count == 10
        assert stock_of(farmer_user) == 80

    def test_decrease_books_difference_out(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 70, period='afternoon').data['id']

        farmer_client.patch(f'/api/collections/{collection_id}/', {'egg_count': 55}, format='json')

        adjustment = StockMovement.objects.get(user=farmer_user, notes='Ajuste de coleta tarde')
        assert adjustment.movement_type == StockMovementType.OUT
        assert adjustment.egg_count == 15
        assert stock_of(farmer_user) == 55

    def test_adjustment_dated_with_original_collection(self, farmer_client, farmer_user):
        three_days_ago = timezone.localdate() - timedelta(days=3)
        collection_id = create_collection(farmer_client, 30, day=three_days_ago).data['id']

        farmer_client.patch(
            f'/api/collections/{collection_id}/',
            {'egg_count': 35, 'collection_date': timezone.localdate().isoformat()},
            format='json'
        )

        adjustment = StockMovement.objects.get(user=farmer_user, notes__startswith='Ajuste')
        assert adjustment.movement_date == three_days_ago

    def test_same_count_books_nothing(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 30).data['id']

        farmer_client.patch(
            f'/api/collections/{collection_id}/', {'egg_count': 30, 'notes': 'Revisado'}, format='json'
        )

        assert StockMovement.objects.filter(user=farmer_user).count() == 1

    def test_notes_only_keeps_posture(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 50).data['id']
        farmer_client.put('/api/farm/hen-count/', {'hen_count': 200}, format='json')

        response = farmer_client.patch(
            f'/api/collections/{collection_id}/', {'notes': 'Ovos sujos'}, format='json'
        )

        assert response.data['posture_percentage'] == '50.00'
        assert response.data['notes'] == 'Ovos sujos'

    def test_new_egg_count_recomputes_with_current_hens(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 50).data['id']
        farmer_client.put('/api/farm/hen-count/', {'hen_count': 200}, format='json')

        response = farmer_client.patch(
            f'/api/collections/{collection_id}/', {'egg_count': 100}, format='json'
        )

        assert response.data['posture_percentage'] == '50.00'

    def test_put_replaces_collection(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 50).data['id']

        response = farmer_client.put(
            f'/api/collections/{collection_id}/',
            {
                'collection_date': timezone.localdate().isoformat(),
                'period': 'afternoon',
                'egg_count': 45,
            },
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['period'] == 'afternoon'
        assert stock_of(farmer_user) == 45

    def test_put_requires_all_fields(self, farmer_client):
        collection_id = create_collection(farmer_client, 50).data['id']

        response = farmer_client.put(
            f'/api/collections/{collection_id}/', {'egg_count': 45}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# DELETE
# =============================================================================

class TestCollectionDeletion:

    def test_delete_restores_stock(self, farmer_client, farmer_user):
        create_collection(farmer_client, 20, period='afternoon')
        collection_id = create_collection(farmer_client, 60).data['id']
        assert stock_of(farmer_user) == 80

        response = farmer_client.delete(f'/api/collections/{collection_id}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not EggCollection.objects.filter(id=collection_id).exists()
        assert stock_of(farmer_user) == 20

        reversal = StockMovement.objects.get(user=farmer_user, notes='Exclusão de coleta manhã')
        assert reversal.movement_type == StockMovementType.OUT
        assert reversal.egg_count == 60

    def test_delete_after_sale_lets_stock_go_negative(self, farmer_client, farmer_user):
        collection_id = create_collection(farmer_client, 24).data['id']
        farmer_client.post('/api/stock/movements/', {
            'movement_type': 'out',
            'egg_count': 24,
            'movement_date': timezone.localdate().isoformat(),
        }, format='json')

        farmer_client.delete(f'/api/collections/{collection_id}/')

        assert stock_of(farmer_user) == -24

    def test_delete_missing_collection(self, farmer_client):
        response = farmer_client.delete('/api/collections/00000000-0000-0000-0000-000000000000/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'message': 'Coleta não encontrada'}


# =============================================================================
# LISTING AND TODAY SUMMARY
# =============================================================================

class TestCollectionListing:

    def test_list_most_recent_first(self, farmer_client):
        today = timezone.localdate()
        create_collection(farmer_client, 10, day=today - timedelta(days=2))
        create_collection(farmer_client, 20, day=today)
        create_collection(farmer_client, 30, day=today - timedelta(days=1))

        response = farmer_client.get('/api/collections/')

        assert response.status_code == status.HTTP_200_OK
        assert [item['egg_count'] for item in response.data] == [20, 30, 10]

    def test_same_day_ordered_by_period_descending(self, farmer_client):
        create_collection(farmer_client, 20, period='afternoon')
        create_collection(farmer_client, 10, period='morning')

        response = farmer_client.get('/api/collections/')

        assert [item['period'] for item in response.data] == ['morning', 'afternoon']

    def test_limit(self, farmer_client):
        today = timezone.localdate()
        for days_ago in range(5):
            create_collection(farmer_client, 10 + days_ago, day=today - timedelta(days=days_ago))

        response = farmer_client.get('/api/collections/?limit=2')

        assert len(response.data) == 2

    def test_default_limit_is_ten(self, farmer_client):
        today = timezone.localdate()
        for days_ago in range(12):
            create_collection(farmer_client, 5, day=today - timedelta(days=days_ago))

        response = farmer_client.get('/api/collections/')

        assert len(response.data) == 10

    def test_filter_by_date_range(self, farmer_client):
        today = timezone.localdate()
        for days_ago in range(4):
            create_collection(farmer_client, 5, day=today - timedelta(days=days_ago))

        since = (today - timedelta(days=1)).isoformat()
        response = farmer_client.get(f'/api/collections/?collection_date__gte={since}')

        assert len(response.data) == 2

    def test_today_summary(self, farmer_client):
        create_collection(farmer_client, 40, period='morning')
        create_collection(farmer_client, 12, period='morning')
        create_collection(farmer_client, 30, period='afternoon')
        create_collection(farmer_client, 99, day=timezone.localdate() - timedelta(days=1))

        response = farmer_client.get('/api/collections/today/')

        assert response.status_code == status.HTTP_200_OK
        summary = response.data['summary']
        assert summary['date'] == timezone.localdate().isoformat()
        assert summary['morning'] == 52
        assert summary['afternoon'] == 30
        assert summary['total'] == 82
        assert summary['posture_percentage'] == '82.00'
        assert len(response.data['collections']) == 3

    def test_today_summary_without_collections(self, farmer_client):
        response = farmer_client.get('/api/collections/today/')

        assert response.data['collections'] == []
        assert response.data['summary']['total'] == 0
        assert response.data['summary']['posture_percentage'] == '0.00'


# =============================================================================
# DATA ISOLATION
# =============================================================================

class TestCollectionIsolation:

    def test_other_farm_cannot_see_collection(self, farmer_client, other_client):
        collection_id = create_collection(farmer_client, 40).data['id']

        assert other_client.get(f'/api/collections/{collection_id}/').status_code == status.HTTP_404_NOT_FOUND
        assert other_client.get('/api/collections/').data == []

    def test_other_farm_cannot_change_collection(self, farmer_client, other_client, farmer_user, other_farmer):
        collection_id = create_collection(farmer_client, 40).data['id']

        patch = other_client.patch(f'/api/collections/{collection_id}/', {'egg_count': 1}, format='json')
        delete = other_client.delete(f'/api/collections/{collection_id}/')

        assert patch.status_code == status.HTTP_404_NOT_FOUND
        assert delete.status_code == status.HTTP_404_NOT_FOUND
        assert EggCollection.objects.get(id=collection_id).egg_count == 40
        assert stock_of(farmer_user) == 40
        assert stock_of(other_farmer) == 0

    def test_requires_login(self, api_client):
        response = api_client.get('/api/collections/')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Não autorizado'


# =============================================================================
# BALANCE INVARIANT
# =============================================================================

class TestStockFollowsCollections:

    def test_balance_equals_signed_sum_after_mixed_operations(self, farmer_client, farmer_user):
        today = timezone.localdate()
        first = create_collection(farmer_client, 72, day=today).data['id']
        second = create_collection(farmer_client, 48, period='afternoon', day=today).data['id']
        third = create_collection(farmer_client, 75, day=today - timedelta(days=1)).data['id']

        farmer_client.patch(f'/api/collections/{first}/', {'egg_count': 70}, format='json')
        farmer_client.patch(f'/api/collections/{second}/', {'egg_count': 60}, format='json')
        farmer_client.delete(f'/api/collections/{third}/')

        assert stock_of(farmer_user) == calculate_stock(farmer_user) == 130
        assert EggCollection.objects.filter(user=farmer_user, period=CollectionPeriod.MORNING).count() == 1
