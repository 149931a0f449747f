"""
Admin configuration for egg collections.
"""

from django.contrib import admin

from .models import EggCollection


@admin.register(EggCollection)
class EggCollectionAdmin(admin.ModelAdmin):
    """
    Read-mostly admin: editing here would bypass the stock movements that
    CollectionService books, so egg counts are read-only.
    """
    list_display = ['collection_date', 'period', 'user', 'egg_count', 'posture_percentage', 'created_at']
    list_filter = ['period', 'collection_date']
    search_fields = ['user__username', 'user__farm_name', 'notes']
    date_hierarchy = 'collection_date'
    ordering = ['-collection_date', '-period']
    readonly_fields = ['id', 'egg_count', 'posture_percentage', 'created_at', 'updated_at']

    fieldsets = (
        ('Collection', {
            'fields': ('id', 'user', 'collection_date', 'period', 'egg_count', 'posture_percentage')
        }),
        ('Notes', {
            'fields': ('notes',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return False
