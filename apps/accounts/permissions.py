"""
Role-based permission classes.

Permission Classes:
    IsAdminRole - admin or super_admin (back-office management)
    IsSuperAdminRole - super_admin only (editing/deleting ledger entries)
"""

from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    """
    Permission: User must have the admin or super_admin role.
    """

    message = 'Administrator access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsSuperAdminRole(BasePermission):
    """
    Permission: User must have the super_admin role.
    """

    message = 'Super administrator access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_super_admin)
