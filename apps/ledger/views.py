# apps/ledger/views.py

import logging
from urllib.parse import urlencode

from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.views.decorators.http import require_POST
from django.urls import reverse
from django.db import DatabaseError

from apps.accounts.models import User
from utils.decorators import admin_required
from .forms import AdjustBalanceForm
from .utils import InvalidAdjustment, find_user_by_nickname, balance_history, adjust_balance

logger = logging.getLogger('nada')


@admin_required
def np_console(request):
    """Look a user up by nickname and show their NP history with running balances"""
    nickname = request.GET.get('nickname', '').strip()
    target = None
    history = []

    if nickname:
        target = find_user_by_nickname(nickname)
        if target is None:
            messages.warning(request, f'No user with nickname "{nickname}".')
        else:
            history = balance_history(target)

    context = {
        'nickname': nickname,
        'target': target,
        'history': history,
        'form': AdjustBalanceForm(),
    }
    return render(request, 'ledger/np_console.html', context)


@admin_required
@require_POST
def np_adjust(request, user_id):
    user = get_object_or_404(User, id=user_id)
    form = AdjustBalanceForm(request.POST)

    if form.is_valid():
        try:
            record = adjust_balance(
                user,
                form.cleaned_data['kind'],
                form.cleaned_data['amount'],
                request.admin_session.user
            )
            messages.success(request, f'{record.context}: {record.amount:+d} NP applied to {user.display_name}.')
        except InvalidAdjustment as e:
            messages.error(request, str(e))
        except DatabaseError:
            logger.exception(f"NP adjustment for {user.email} failed")
            messages.error(request, 'Something went wrong. Please try again.')
    else:
        messages.error(request, 'Enter a positive NP amount.')

    return redirect(f"{reverse('np_console')}?{urlencode({'nickname': user.nickname})}")
