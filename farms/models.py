"""
Farm Settings Models

The farm itself lives on the user account (farm_name, hen_count, egg_price).
This module keeps the history of hen count changes so posture figures can be
read against the flock size at the time.
"""

import uuid
from django.conf import settings
from django.db import models
from django.utils import timezone


class HenCountHistory(models.Model):
    """Point-in-time snapshot of the farm's hen count."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='hen_count_history'
    )

    hen_count = models.PositiveIntegerField(help_text="Hen count from this moment on")

    change_date = models.DateTimeField(default=timezone.now, db_index=True)

    reason = models.CharField(max_length=255, blank=True, default='')

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'hen_count_history'
        ordering = ['-change_date']
        verbose_name = 'Hen Count History'
        verbose_name_plural = 'Hen Count History'

    def __str__(self):
        return f"{self.user.username}: {self.hen_count} galinhas ({self.change_date:%Y-%m-%d})"
