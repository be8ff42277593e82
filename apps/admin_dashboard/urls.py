# apps/admin_dashboard/urls.py
"""
Admin Dashboard URL Configuration
"""

from django.urls import path
from . import views

urlpatterns = [
    path('', views.admin_dashboard, name='admin_dashboard'),
    path('audit-logs/', views.audit_logs, name='audit_logs'),
]
