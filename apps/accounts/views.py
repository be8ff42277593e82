# apps/accounts/views.py

import logging

from django.shortcuts import render, redirect, get_object_or_404
from django.contrib.auth import login, logout
from django.contrib import messages
from django.views.generic import View
from django.views.decorators.http import require_POST
from django.core.paginator import Paginator
from django.conf import settings

from algorithms import suspension as rules
from utils.decorators import admin_required, superuser_required
from .models import User
from .forms import AdminLoginForm, SuspendUserForm, ArtistLevelForm
from .utils import (
    USER_FILTERS, AdminRoleError, filter_users, user_filter_counts,
    suspend_user, unsuspend_user, change_artist_level, set_admin_role
)

logger = logging.getLogger('nada')


class AdminLoginView(View):
    """Console sign-in; only admin accounts get through"""

    def get(self, request):
        if request.admin_session.is_admin:
            return redirect('admin_dashboard')

        form = AdminLoginForm(request=request)
        return render(request, 'accounts/login.html', {'form': form})

    def post(self, request):
        form = AdminLoginForm(request.POST, request=request)

        if form.is_valid():
            user = form.cleaned_data['user']
            # The user_logged_in receiver opens the LoginHistory row and session context
            login(request, user)
            messages.success(request, f'Welcome back, {user.display_name}!')
            return redirect(request.GET.get('next') or 'admin_dashboard')

        return render(request, 'accounts/login.html', {'form': form})


def logout_view(request):
    """Sign out; the user_logged_out receiver closes the session"""
    logout(request)
    messages.success(request, 'You have been logged out.')
    return redirect('console_login')


@admin_required
def user_list(request):
    """User management list with filters, search and per-filter counts"""
    user_filter = request.GET.get('filter', 'all')
    if user_filter not in USER_FILTERS:
        user_filter = 'all'
    level = request.GET.get('level', '')
    search = request.GET.get('q', '').strip()

    users = filter_users(user_filter, level=level, search=search)

    paginator = Paginator(users, settings.NADA_SETTINGS['USERS_PER_PAGE'])
    page = paginator.get_page(request.GET.get('page'))

    context = {
        'users': page,
        'filter': user_filter,
        'level': level,
        'search': search,
        'counts': user_filter_counts(),
        'artist_levels': User.ARTIST_LEVELS,
        'durations': [(key, rules.DURATION_LABELS[key]) for key in rules.USER_DURATIONS],
    }
    return render(request, 'accounts/user_list.html', context)


@admin_required
@require_POST
def user_suspend(request, user_id):
    user = get_object_or_404(User, id=user_id)
    form = SuspendUserForm(request.POST)

    if not form.is_valid():
        messages.error(request, 'Choose a valid suspension duration.')
        return redirect('user_list')

    duration = form.cleaned_data['duration']
    suspend_user(user, duration, request.admin_session.user)
    messages.success(request, f'{user.display_name} suspended ({rules.DURATION_LABELS[duration]}).')
    return redirect(request.POST.get('next') or 'user_list')


@admin_required
@require_POST
def user_unsuspend(request, user_id):
    user = get_object_or_404(User, id=user_id)
    unsuspend_user(user, request.admin_session.user)
    messages.success(request, f'Suspension lifted for {user.display_name}.')
    return redirect(request.POST.get('next') or 'user_list')


@admin_required
@require_POST
def user_change_level(request, user_id):
    user = get_object_or_404(User, id=user_id)
    form = ArtistLevelForm(request.POST)

    if not form.is_valid():
        messages.error(request, 'Choose a valid artist tier.')
        return redirect('user_list')

    try:
        change_artist_level(user, form.cleaned_data['level'], request.admin_session.user)
        messages.success(request, f'Tier updated for {user.display_name}.')
    except ValueError as e:
        messages.error(request, str(e))

    return redirect(request.POST.get('next') or 'user_list')


@superuser_required
@require_POST
def user_toggle_admin(request, user_id):
    user = get_object_or_404(User, id=user_id)

    try:
        set_admin_role(user, not user.is_admin, request.admin_session.user)
        state = 'granted' if user.is_admin else 'revoked'
        messages.success(request, f'Admin role {state} for {user.display_name}.')
    except AdminRoleError as e:
        messages.error(request, str(e))

    return redirect(request.POST.get('next') or 'user_list')
