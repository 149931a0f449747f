"""
Dashboard URL Configuration
"""

from django.urls import path
from .views import FarmerDashboardStatsView

app_name = 'dashboards'

urlpatterns = [
    path('stats/', FarmerDashboardStatsView.as_view(), name='dashboard-stats'),
]
