"""
Shared pytest fixtures.
"""
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from accounts.services import FarmRegistrationService


@pytest.fixture
def api_client():
    """Anonymous API client."""
    return APIClient()


@pytest.fixture
def farmer_user(db):
    """Farm owner with 100 hens selling eggs at R$ 12.00 a dozen."""
    return FarmRegistrationService.register(
        username='farmer_one',
        password='senha123',
        name='Maria Souza',
        farm_name='Granja Boa Vista',
        hen_count=100,
        egg_price=Decimal('12.00'),
    )


@pytest.fixture
def other_farmer(db):
    """A second, unrelated farm."""
    return FarmRegistrationService.register(
        username='farmer_two',
        password='senha123',
        name='Pedro Lima',
        farm_name='Sítio Esperança',
        hen_count=50,
        egg_price=Decimal('9.00'),
    )


@pytest.fixture
def farmer_client(api_client, farmer_user):
    """API client logged in as farmer_user."""
    api_client.force_authenticate(user=farmer_user)
    return api_client


@pytest.fixture
def other_client(other_farmer):
    client = APIClient()
    client.force_authenticate(user=other_farmer)
    return client
