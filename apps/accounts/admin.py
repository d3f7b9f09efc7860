from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User, UserRole


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for back-office users.

    Provides:
    - User listing with role badge
    - Filtering by role and status
    - Bulk activation/deactivation
    """

    list_display = [
        'username',
        'full_name',
        'role_badge',
        'is_active',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'created_at',
    ]

    search_fields = [
        'username',
        'full_name',
    ]

    ordering = ['username']

    fieldsets = (
        ('Basic Information', {
            'fields': ('username', 'full_name', 'password')
        }),
        ('Permissions', {
            'fields': ('role', 'is_active', 'is_staff', 'is_superuser'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('username', 'full_name', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = []

    def role_badge(self, obj):
        """Display role as colored badge."""
        colors = {
            UserRole.STAFF: ('#ccc', '#666'),
            UserRole.ADMIN: ('#A47449', 'white'),
            UserRole.SUPER_ADMIN: ('#2C1810', 'white'),
        }
        bg, fg = colors.get(obj.role, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_role_display()
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    actions = ['activate_users', 'deactivate_users']

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        """Activate selected users."""
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (excludes super admins for safety)."""
        safe_queryset = queryset.exclude(role=UserRole.SUPER_ADMIN)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} super admin(s) for safety.'
        self.message_user(request, msg)
