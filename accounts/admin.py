from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth import get_user_model
from django.contrib import admin

User = get_user_model()


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for farm owner accounts."""

    list_display = (
        'username', 'name', 'farm_name', 'hen_count', 'egg_price',
        'subscription_status', 'is_active', 'date_joined'
    )
    list_filter = ('subscription_status', 'is_active', 'is_staff', 'date_joined')
    search_fields = ('username', 'name', 'farm_name', 'email')
    ordering = ('-date_joined',)

    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        ('Owner', {
            'fields': ('name', 'email')
        }),
        ('Farm', {
            'fields': ('farm_name', 'hen_count', 'egg_price', 'subscription_status')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')
        }),
        ('Important Dates', {
            'fields': ('last_login', 'date_joined')
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': (
                'username', 'password1', 'password2', 'name', 'farm_name', 'egg_price'
            ),
        }),
    )

    # Hen count changes go through the API so they land in the history
    readonly_fields = ('hen_count', 'date_joined', 'last_login')
