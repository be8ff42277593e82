# apps/contact/views.py

from django.shortcuts import render, redirect, get_object_or_404
from django.contrib import messages
from django.views.decorators.http import require_POST
from django.core.paginator import Paginator
from django.conf import settings

from apps.admin_dashboard.utils import record_audit
from utils.decorators import admin_required
from .models import ContactMessage


@admin_required
def message_list(request):
    status = request.GET.get('status', 'open')

    contact_messages = ContactMessage.objects.select_related('sender', 'resolved_by')
    if status == 'open':
        contact_messages = contact_messages.filter(is_resolved=False)
    elif status == 'resolved':
        contact_messages = contact_messages.filter(is_resolved=True)
    else:
        status = 'all'

    paginator = Paginator(contact_messages, settings.NADA_SETTINGS['ITEMS_PER_PAGE'])

    context = {
        'contact_messages': paginator.get_page(request.GET.get('page')),
        'status': status,
        'open_count': ContactMessage.objects.filter(is_resolved=False).count(),
    }
    return render(request, 'contact/message_list.html', context)


@admin_required
@require_POST
def message_resolve(request, message_id):
    contact_message = get_object_or_404(ContactMessage, id=message_id)

    if not contact_message.is_resolved:
        contact_message.resolve(request.admin_session.user)
        record_audit(
            request.admin_session.user, 'contact_resolve',
            f"Resolved contact message from {contact_message.display_nickname}",
            target_user=contact_message.sender,
            target=contact_message
        )
        messages.success(request, 'Message marked as resolved.')

    return redirect(request.POST.get('next') or 'contact_list')


@admin_required
@require_POST
def message_delete(request, message_id):
    contact_message = get_object_or_404(ContactMessage, id=message_id)
    nickname = contact_message.display_nickname
    sender = contact_message.sender
    contact_message.delete()

    record_audit(
        request.admin_session.user, 'contact_delete',
        f"Deleted contact message from {nickname}",
        target_user=sender
    )
    messages.success(request, 'Message deleted.')
    return redirect(request.POST.get('next') or 'contact_list')
