"""
URL configuration for egg collections.

All endpoints are prefixed with /api/collections/
"""

from django.urls import path

from .views import (
    EggCollectionDetailView,
    EggCollectionListCreateView,
    TodayCollectionsView,
)

app_name = 'production'

urlpatterns = [
    path('', EggCollectionListCreateView.as_view(), name='collection-list'),
    path('today/', TodayCollectionsView.as_view(), name='collection-today'),
    path('<uuid:pk>/', EggCollectionDetailView.as_view(), name='collection-detail'),
]
