# api/permissions.py

from rest_framework import permissions


class IsConsoleAdmin(permissions.BasePermission):
    """Only admins (or superusers) can access"""

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_admin_user)


class IsSuperAdmin(permissions.BasePermission):
    """Only superusers can access"""

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_superuser)
