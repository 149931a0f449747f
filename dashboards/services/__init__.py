"""
Dashboard services module
"""

from .farmer import FarmerDashboardService

__all__ = [
    'FarmerDashboardService',
]
