# apps/applications/utils.py

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.admin_dashboard.utils import record_audit
from apps.notifications.utils import notify_on_commit
from utils.storage import delete_stored_files
from .models import ArtistApplication

logger = logging.getLogger('nada')


class ApplicationStateError(ValueError):
    pass


def _lock(application, expected_status):
    try:
        application = ArtistApplication.objects.select_for_update().get(pk=application.pk)
    except ArtistApplication.DoesNotExist:
        raise ApplicationStateError("Application was already processed")

    if application.status != expected_status:
        raise ApplicationStateError(f"Application is {application.status}, expected {expected_status}")
    return application


def _discard_demos_on_commit(application):
    urls = list(application.music_urls or [])
    if urls:
        transaction.on_commit(lambda: delete_stored_files(urls))


def pending_count():
    return ArtistApplication.objects.filter(status='pending').count()


def approve_application(application, actor):
    """Applicant becomes a rookie artist; the application and its demos go away"""
    with transaction.atomic():
        application = _lock(application, 'pending')
        applicant = User.objects.select_for_update().get(pk=application.applicant_id)

        applicant.is_artist = True
        applicant.artist_level = 'rookie'
        applicant.artist_application_status = ''
        applicant.save(update_fields=['is_artist', 'artist_level', 'artist_application_status'])

        _discard_demos_on_commit(application)
        application.delete()

        record_audit(actor, 'application_approve', f"Approved artist application of {applicant.display_name}",
                     target_user=applicant)
        notify_on_commit(applicant, 'Your artist application has been approved!', 'application')

    logger.info(f"Artist application of {applicant.email} approved by {actor.email}")
    return applicant


def reject_application(application, actor):
    """Mark rejected with a reapply cooldown; demos are removed"""
    now = timezone.now()
    cooldown = timedelta(hours=settings.NADA_SETTINGS['REAPPLY_COOLDOWN_HOURS'])

    with transaction.atomic():
        application = _lock(application, 'pending')
        applicant = User.objects.select_for_update().get(pk=application.applicant_id)

        # One rejected application per applicant
        ArtistApplication.objects.filter(
            applicant=applicant, status='rejected'
        ).exclude(pk=application.pk).delete()

        application.status = 'rejected'
        application.rejected_at = now
        application.can_reapply_after = now + cooldown
        application.save(update_fields=['status', 'rejected_at', 'can_reapply_after'])

        applicant.artist_application_status = 'rejected'
        applicant.application_rejected_at = now
        applicant.save(update_fields=['artist_application_status', 'application_rejected_at'])

        _discard_demos_on_commit(application)

        record_audit(actor, 'application_reject', f"Rejected artist application of {applicant.display_name}",
                     target_user=applicant, target=application)
        notify_on_commit(applicant, 'Your artist application was not approved.', 'application', application.pk)

    logger.info(f"Artist application of {applicant.email} rejected by {actor.email}")
    return application


def reapply(application, actor):
    """Return a rejected application to the pending queue as a fresh submission"""
    with transaction.atomic():
        application = _lock(application, 'rejected')
        if application.in_cooldown:
            raise ApplicationStateError(
                f"Application can be reopened after {application.can_reapply_after:%Y-%m-%d %H:%M}"
            )

        application.status = 'pending'
        application.created_at = timezone.now()
        application.rejected_at = None
        application.can_reapply_after = None
        application.save(update_fields=['status', 'created_at', 'rejected_at', 'can_reapply_after'])

        User.objects.filter(pk=application.applicant_id).update(artist_application_status='pending')

        record_audit(actor, 'application_reapply', f"Reopened artist application of {application.nickname}",
                     target_user=application.applicant, target=application)

    return application


def discard_application(application, actor):
    with transaction.atomic():
        try:
            application = ArtistApplication.objects.select_for_update().get(pk=application.pk)
        except ArtistApplication.DoesNotExist:
            raise ApplicationStateError("Application was already processed")

        _discard_demos_on_commit(application)
        nickname = application.nickname
        applicant = application.applicant
        application.delete()

        record_audit(actor, 'application_discard', f"Discarded artist application of {nickname}",
                     target_user=applicant)
