# apps/admin_dashboard/admin.py
"""
Admin interface for Admin Dashboard models
"""

from django.contrib import admin
from .models import AdminAuditLog


@admin.register(AdminAuditLog)
class AdminAuditLogAdmin(admin.ModelAdmin):
    list_display = ['admin_user', 'action_type', 'target_user', 'ip_address', 'created_at']
    list_filter = ['action_type', 'created_at']
    search_fields = ['admin_user__email', 'description', 'target_user__email']
    readonly_fields = ['admin_user', 'action_type', 'description', 'target_user',
                      'target_object_type', 'target_object_id', 'metadata',
                      'ip_address', 'created_at']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False
