"""
URL configuration for egg stock.

All endpoints are prefixed with /api/stock/
"""

from django.urls import path

from .views import (
    StockBalanceView,
    StockMovementDetailView,
    StockMovementListCreateView,
)

app_name = 'inventory'

urlpatterns = [
    path('balance/', StockBalanceView.as_view(), name='stock-balance'),
    path('movements/', StockMovementListCreateView.as_view(), name='movement-list'),
    path('movements/<uuid:pk>/', StockMovementDetailView.as_view(), name='movement-detail'),
]
