"""
Admin configuration for egg stock.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import StockBalance, StockMovement, StockMovementType


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = [
        'movement_date', 'user', 'direction_badge', 'egg_count',
        'source_type', 'financial_movement', 'notes'
    ]
    list_filter = ['movement_type', 'source_type', 'movement_date']
    search_fields = ['user__username', 'notes']
    date_hierarchy = 'movement_date'
    readonly_fields = [
        'id', 'user', 'movement_type', 'egg_count', 'movement_date',
        'financial_movement', 'source_type', 'source_id', 'created_at'
    ]

    def direction_badge(self, obj):
        color = '#28a745' if obj.movement_type == StockMovementType.IN else '#dc3545'
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.get_movement_type_display()
        )
    direction_badge.short_description = 'Type'

    def has_add_permission(self, request):
        return False


@admin.register(StockBalance)
class StockBalanceAdmin(admin.ModelAdmin):
    list_display = ['user', 'egg_count', 'updated_at']
    search_fields = ['user__username', 'user__farm_name']
    readonly_fields = ['id', 'user', 'egg_count', 'updated_at']

    def has_add_permission(self, request):
        return False
