"""
URL configuration for farm settings.

Included under /api/
"""

from django.urls import path

from .views import (
    EggPriceUpdateView,
    FarmInfoView,
    HenCountHistoryListView,
    HenCountUpdateView,
)

app_name = 'farms'

urlpatterns = [
    path('farm/', FarmInfoView.as_view(), name='farm-info'),
    path('farm/hen-count/', HenCountUpdateView.as_view(), name='hen-count-update'),
    path('farm/egg-price/', EggPriceUpdateView.as_view(), name='egg-price-update'),
    path('hen-count-history/', HenCountHistoryListView.as_view(), name='hen-count-history'),
]
