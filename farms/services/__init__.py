"""
Farm Services

Service layer for farm settings (hen count, egg price, farm name).
"""

from .farm_settings import DEFAULT_HEN_COUNT_REASON, FarmSettingsService

__all__ = [
    'DEFAULT_HEN_COUNT_REASON',
    'FarmSettingsService',
]
