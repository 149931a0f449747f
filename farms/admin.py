"""
Admin configuration for farm settings.
"""

from django.contrib import admin

from .models import HenCountHistory


@admin.register(HenCountHistory)
class HenCountHistoryAdmin(admin.ModelAdmin):
    list_display = ['user', 'hen_count', 'change_date', 'reason']
    list_filter = ['change_date']
    search_fields = ['user__username', 'user__farm_name', 'reason']
    date_hierarchy = 'change_date'
    readonly_fields = ['id', 'created_at']
    ordering = ['-change_date']
