"""
Admin configuration for the cash book.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import FinancialBalance, FinancialMovement, FinancialMovementType


@admin.register(FinancialMovement)
class FinancialMovementAdmin(admin.ModelAdmin):
    list_display = [
        'movement_date', 'user', 'type_badge', 'category', 'amount_display',
        'payment_method', 'contact'
    ]
    list_filter = ['movement_type', 'category', 'payment_method', 'movement_date']
    search_fields = ['user__username', 'category', 'contact', 'notes']
    date_hierarchy = 'movement_date'
    readonly_fields = ['id', 'user', 'movement_type', 'amount', 'created_at', 'updated_at']

    fieldsets = (
        ('Movement', {
            'fields': ('id', 'user', 'movement_type', 'category', 'amount', 'movement_date')
        }),
        ('Payment', {
            'fields': ('payment_method', 'contact', 'notes')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def type_badge(self, obj):
        color = '#28a745' if obj.movement_type == FinancialMovementType.INCOME else '#dc3545'
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.get_movement_type_display()
        )
    type_badge.short_description = 'Type'

    def amount_display(self, obj):
        return f"R$ {obj.amount:,.2f}"
    amount_display.short_description = 'Amount'
    amount_display.admin_order_field = 'amount'

    def has_add_permission(self, request):
        return False


@admin.register(FinancialBalance)
class FinancialBalanceAdmin(admin.ModelAdmin):
    list_display = ['user', 'balance', 'updated_at']
    search_fields = ['user__username', 'user__farm_name']
    readonly_fields = ['id', 'user', 'balance', 'updated_at']

    def has_add_permission(self, request):
        return False
