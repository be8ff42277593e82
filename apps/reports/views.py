# apps/reports/views.py

import logging

from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.views.decorators.http import require_POST
from django.core.paginator import Paginator
from django.conf import settings
from django.db import DatabaseError

from algorithms import suspension as rules
from apps.accounts.models import User
from apps.accounts.utils import filter_users, unsuspend_user
from utils.decorators import admin_required
from .models import Report
from .utils import (
    GUILTY_FILTERS, ReportAlreadyProcessed, resolve_target, mark_innocent, mark_guilty,
    open_reports, open_report_counts, guilty_reports, guilty_counts,
    delete_guilty_record, ban_user_permanently
)

logger = logging.getLogger('nada')

REPORT_TABS = [key for key, _ in Report.REPORT_TYPES]


@admin_required
def report_list(request):
    """Open reports of one type, oldest first, with the live content beside each"""
    tab = request.GET.get('type', 'post')
    if tab not in REPORT_TABS:
        tab = 'post'

    paginator = Paginator(open_reports(tab), settings.NADA_SETTINGS['ITEMS_PER_PAGE'])
    page = paginator.get_page(request.GET.get('page'))

    counts = open_report_counts()

    context = {
        'page': page,
        'rows': [(report, resolve_target(report)) for report in page],
        'tab': tab,
        'tabs': [(key, label, counts[key]) for key, label in Report.REPORT_TYPES],
        'counts': counts,
        'durations': [(key, rules.DURATION_LABELS[key]) for key in rules.VERDICT_DURATIONS],
    }
    return render(request, 'reports/report_list.html', context)


@admin_required
@require_POST
def report_innocent(request, report_id):
    try:
        mark_innocent(report_id, request.admin_session.user)
        messages.success(request, 'Report dismissed.')
    except ReportAlreadyProcessed:
        messages.warning(request, 'This report was already processed.')
    except DatabaseError:
        logger.exception(f"Dismissing report {report_id} failed")
        messages.error(request, 'Something went wrong. Please try again.')

    return redirect(request.POST.get('next') or 'report_list')


@admin_required
@require_POST
def report_guilty(request, report_id):
    duration = request.POST.get('duration', '')

    try:
        mark_guilty(report_id, duration, request.admin_session.user)
        messages.success(request, f'Report upheld. User suspended ({rules.DURATION_LABELS[duration]}).')
    except ReportAlreadyProcessed:
        messages.warning(request, 'This report was already processed.')
    except ValueError:
        messages.error(request, 'Choose a valid suspension duration.')
    except DatabaseError:
        logger.exception(f"Upholding report {report_id} failed")
        messages.error(request, 'Something went wrong. Please try again.')

    return redirect(request.POST.get('next') or 'report_list')


@admin_required
def guilty_list(request):
    """Guilty records, or suspended users when filter=user"""
    guilty_filter = request.GET.get('filter', 'all')
    search = request.GET.get('q', '').strip()

    if guilty_filter == 'user':
        users = filter_users('suspended', search=search)
        paginator = Paginator(users, settings.NADA_SETTINGS['USERS_PER_PAGE'])
        page = paginator.get_page(request.GET.get('page'))
        counts = guilty_counts([user.id for user in page])
        rows = [(user, counts.get(user.id, 0)) for user in page]
    else:
        if guilty_filter not in GUILTY_FILTERS:
            guilty_filter = 'all'
        paginator = Paginator(guilty_reports(guilty_filter, search), settings.NADA_SETTINGS['ITEMS_PER_PAGE'])
        page = paginator.get_page(request.GET.get('page'))
        rows = list(page)

    context = {
        'page': page,
        'rows': rows,
        'filter': guilty_filter,
        'filters': GUILTY_FILTERS + ('user',),
        'search': search,
    }
    return render(request, 'reports/guilty_list.html', context)


@admin_required
@require_POST
def guilty_delete(request, guilty_id):
    if delete_guilty_record(guilty_id, request.admin_session.user):
        messages.success(request, 'Guilty record deleted.')
    else:
        messages.warning(request, 'Record not found.')
    return redirect(request.POST.get('next') or 'guilty_list')


@admin_required
@require_POST
def guilty_unban(request, user_id):
    user = get_object_or_404(User, id=user_id)
    try:
        unsuspend_user(user, request.admin_session.user)
        messages.success(request, f'Suspension lifted for {user.display_name}.')
    except DatabaseError:
        logger.exception(f"Lifting suspension of {user.email} failed")
        messages.error(request, 'Something went wrong. Please try again.')
    return redirect(request.POST.get('next') or 'guilty_list')


@admin_required
@require_POST
def guilty_ban_permanently(request, user_id):
    user = get_object_or_404(User, id=user_id)
    try:
        ban_user_permanently(user, request.admin_session.user)
        messages.success(request, f'{user.display_name} is now permanently banned.')
    except DatabaseError:
        logger.exception(f"Permanent ban of {user.email} failed")
        messages.error(request, 'Something went wrong. Please try again.')
    return redirect(request.POST.get('next') or 'guilty_list')
