# apps/admin_dashboard/views.py
"""
Console landing page and audit trail
"""

from django.shortcuts import render
from django.core.paginator import Paginator
from django.conf import settings

from apps.accounts.utils import user_filter_counts
from apps.reports.utils import open_report_counts
from apps.songs.utils import status_counts
from utils.decorators import admin_required
from .context_processors import get_console_counters
from .models import AdminAuditLog
from .utils import recent_activity, activity_since


@admin_required
def admin_dashboard(request):
    """Counters for every queue plus the latest admin activity"""
    context = {
        'counters': get_console_counters(),
        'report_counts': open_report_counts(),
        'song_counts': status_counts(),
        'user_counts': user_filter_counts(),
        'recent_activity': recent_activity(),
        'actions_this_week': activity_since(days=7),
        'session': request.admin_session,
    }
    return render(request, 'admin_dashboard/dashboard.html', context)


@admin_required
def audit_logs(request):
    """View audit logs"""
    logs = AdminAuditLog.objects.select_related('admin_user', 'target_user')

    action_type = request.GET.get('action', '')
    if action_type:
        logs = logs.filter(action_type=action_type)

    paginator = Paginator(logs, settings.NADA_SETTINGS['ITEMS_PER_PAGE'])

    context = {
        'logs': paginator.get_page(request.GET.get('page')),
        'action_type': action_type,
        'action_types': AdminAuditLog.ACTION_TYPES,
    }
    return render(request, 'admin_dashboard/audit_logs.html', context)
