# apps/admin_dashboard/apps.py
"""
Admin Dashboard App Configuration
"""

from django.apps import AppConfig


class AdminDashboardConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.admin_dashboard'
    verbose_name = 'Admin Dashboard'
