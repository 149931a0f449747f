"""
URL configuration for the cash book.

All endpoints are prefixed with /api/financial/
"""

from django.urls import path

from .views import (
    FinancialBalanceView,
    FinancialCategoryListView,
    FinancialMovementDetailView,
    FinancialMovementListCreateView,
    MonthlySummaryView,
)

app_name = 'finances'

urlpatterns = [
    path('balance/', FinancialBalanceView.as_view(), name='financial-balance'),
    path('movements/', FinancialMovementListCreateView.as_view(), name='movement-list'),
    path('movements/<uuid:pk>/', FinancialMovementDetailView.as_view(), name='movement-detail'),
    path('summary/', MonthlySummaryView.as_view(), name='monthly-summary'),
    path('categories/', FinancialCategoryListView.as_view(), name='category-list'),
]
