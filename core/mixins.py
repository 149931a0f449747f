"""
Shared view mixins.

Every farm owns its data through the user account, so every queryset is
filtered by ``request.user`` before it reaches a view.
"""

from django.conf import settings
from rest_framework import permissions


class UserScopedMixin:
    """
    Mixin that filters querysets to only include data belonging to the
    authenticated farmer.

    SECURITY: records owned by another farm resolve to 404, never 403.
    """
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()
        return queryset.filter(user=self.request.user)


class LimitMixin:
    """
    List views return the most recent ``?limit=`` rows (default from settings).

    Only for list endpoints: the sliced queryset cannot be filtered again by
    ``get_object``.
    """
    max_limit = 500

    def get_limit(self):
        raw = self.request.query_params.get('limit')
        if not raw:
            return settings.DEFAULT_LIST_LIMIT
        try:
            limit = int(raw)
        except (TypeError, ValueError):
            return settings.DEFAULT_LIST_LIMIT
        if limit <= 0:
            return settings.DEFAULT_LIST_LIMIT
        return min(limit, self.max_limit)

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)
        if self.request.method == 'GET':
            return queryset[:self.get_limit()]
        return queryset
