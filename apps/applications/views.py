# apps/applications/views.py

import logging

from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.views.decorators.http import require_POST
from django.db import DatabaseError

from utils.decorators import admin_required
from .models import ArtistApplication
from .utils import (
    ApplicationStateError, pending_count,
    approve_application, reject_application, reapply, discard_application
)

logger = logging.getLogger('nada')

ACTIONS = {
    'approve': (approve_application, 'Application approved.'),
    'reject': (reject_application, 'Application rejected.'),
    'reapply': (reapply, 'Application moved back to pending.'),
    'discard': (discard_application, 'Application deleted.'),
}


@admin_required
def application_list(request):
    tab = request.GET.get('tab', 'pending')
    if tab not in ('pending', 'rejected'):
        tab = 'pending'

    applications = ArtistApplication.objects.filter(status=tab).select_related('applicant')

    context = {
        'applications': applications,
        'tab': tab,
        'pending_count': pending_count(),
    }
    return render(request, 'applications/application_list.html', context)


@admin_required
@require_POST
def application_action(request, application_id, action):
    application = get_object_or_404(ArtistApplication, id=application_id)

    if action not in ACTIONS:
        messages.error(request, 'Unknown action.')
        return redirect('application_list')

    handler, success_message = ACTIONS[action]
    try:
        handler(application, request.admin_session.user)
        messages.success(request, success_message)
    except ApplicationStateError as e:
        messages.warning(request, str(e))
    except DatabaseError:
        logger.exception(f"Application {application_id} {action} failed")
        messages.error(request, 'Something went wrong. Please try again.')

    return redirect(request.POST.get('next') or 'application_list')
