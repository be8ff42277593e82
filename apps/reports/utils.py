# apps/reports/utils.py

"""
Report verdicts

A report is open until an admin rules on it. Innocent drops the report.
Guilty suspends the reported user, files the report in the guilty set,
removes the content and drops the report. Each verdict runs in one
transaction with the report row locked, so a report is processed once.
"""

import logging
import uuid

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count, Q
from django.forms.models import model_to_dict
from django.utils import timezone

from algorithms import song_lifecycle as lifecycle
from algorithms import suspension as rules
from apps.accounts.models import User
from apps.admin_dashboard.utils import record_audit
from apps.notifications.utils import notify_on_commit
from apps.posts.models import Post, Comment
from apps.songs.models import Song
from .models import Report, GuiltyReport

logger = logging.getLogger('nada')

GUILTY_FILTERS = ('all', 'post', 'comment', 'song')


class ReportAlreadyProcessed(Exception):
    """The report was already ruled on (or never existed)"""


def _as_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


def resolve_target(report):
    """
    Live content a report points at, or None when it is gone

    Posts cover fan posts too. Comments are looked up inside the container
    the report names: a song, a song comment (for replies) or a post.
    """
    if report.report_type == 'song':
        song_id = _as_uuid(report.song_id) or _as_uuid(report.target_id)
        return Song.objects.filter(id=song_id).first() if song_id else None

    target_id = _as_uuid(report.target_id)
    if target_id is None:
        return None

    if report.report_type == 'post':
        queryset = Post.objects.filter(id=target_id)
        if report.board_owner_id:
            queryset = queryset.filter(board_owner_id=_as_uuid(report.board_owner_id))
        return queryset.first()

    if report.report_type == 'comment':
        queryset = Comment.objects.filter(id=target_id)
        if report.song_id:
            queryset = queryset.filter(song_id=_as_uuid(report.song_id))
            if report.parent_comment_id:
                queryset = queryset.filter(parent_id=_as_uuid(report.parent_comment_id))
        elif report.post_id:
            queryset = queryset.filter(post_id=_as_uuid(report.post_id))
        else:
            return None
        return queryset.first()

    return None


def capture_snapshot(report, target):
    """Copy the content into the report's evidence fields if they are empty"""
    if report.has_snapshot or target is None:
        return

    if report.report_type == 'post':
        report.content_snapshot = target.content
        report.image_snapshot = target.image_url
    elif report.report_type == 'comment':
        report.content_snapshot = target.content
        report.nickname_snapshot = target.nickname
    elif report.report_type == 'song':
        report.content_snapshot = target.title
        report.image_snapshot = target.image_url
        report.nickname_snapshot = target.nickname


def remove_target(report, target):
    """Posts and comments are deleted; songs go to the deleted state"""
    if target is None:
        logger.info(f"Report {report.id}: content already gone")
        return False

    if report.report_type == 'song':
        if target.status != lifecycle.DELETED:
            target.apply_status(lifecycle.DELETED)
    else:
        target.delete()
    return True


def _lock_report(report_id):
    try:
        return Report.objects.select_for_update().get(id=report_id)
    except (Report.DoesNotExist, ValidationError, ValueError):
        raise ReportAlreadyProcessed(f"Report {report_id} was already processed")


def mark_innocent(report_id, actor):
    """Dismiss a report; nothing else changes"""
    with transaction.atomic():
        report = _lock_report(report_id)
        report_type = report.report_type
        reported_user = report.reported_user
        report.delete()

        record_audit(
            actor, 'report_innocent',
            f"Dismissed {report_type} report {report_id}",
            target_user=reported_user,
            metadata={'report_id': str(report_id)}
        )

    logger.info(f"Report {report_id} dismissed by {actor.email}")


def mark_guilty(report_id, duration, actor):
    """
    Uphold a report

    Args:
        report_id: open report id
        duration: suspension key such as '1m', '3d' or 'permanent'
        actor: acting admin

    Returns:
        GuiltyReport: the filed record

    Raises:
        ReportAlreadyProcessed: the report is no longer open
        ValueError: unknown duration
    """
    if not rules.is_valid_duration(duration):
        raise ValueError(f"Unknown suspension duration: {duration!r}")

    with transaction.atomic():
        report = _lock_report(report_id)

        reported_user = None
        if report.reported_user_id:
            reported_user = User.objects.select_for_update().filter(pk=report.reported_user_id).first()
        if reported_user is not None:
            reported_user.suspend(duration)

        target = resolve_target(report)
        capture_snapshot(report, target)

        fields = model_to_dict(report, exclude=['id', 'reporter', 'reported_user'])
        guilty, _ = GuiltyReport.objects.update_or_create(
            id=report.id,
            defaults={
                **fields,
                'reporter_id': report.reporter_id,
                'reported_user_id': report.reported_user_id,
                'adjudicated_at': timezone.now(),
                'adjudicated_by': actor,
                'suspension': duration,
            }
        )

        removed = remove_target(report, target)
        report.delete()

        record_audit(
            actor, 'report_guilty',
            f"Upheld {report.report_type} report {report_id}; suspension {rules.DURATION_LABELS[duration]}",
            target_user=reported_user,
            metadata={
                'report_id': str(report_id),
                'duration': duration,
                'content_removed': removed,
            }
        )

        if reported_user is not None:
            notify_on_commit(
                reported_user,
                f"Your {report.report_type} was removed after a report. "
                f"Account suspended: {rules.DURATION_LABELS[duration]}.",
                'moderation',
                report_id
            )

    logger.info(f"Report {report_id} upheld ({duration}) by {actor.email}")
    return guilty


def open_reports(report_type):
    return Report.objects.filter(report_type=report_type).select_related('reporter', 'reported_user')


def open_report_counts():
    rows = Report.objects.order_by().values('report_type').annotate(total=Count('id'))
    counts = {row['report_type']: row['total'] for row in rows}
    return {key: counts.get(key, 0) for key, _ in Report.REPORT_TYPES}


def guilty_reports(report_type='all', search=None):
    queryset = GuiltyReport.objects.select_related('adjudicated_by')

    if report_type in ('post', 'comment', 'song'):
        queryset = queryset.filter(report_type=report_type)

    if search:
        queryset = queryset.filter(
            Q(reported_user_nickname__icontains=search) | Q(reporter_nickname__icontains=search)
        )

    return queryset


def guilty_counts(user_ids=None):
    """Guilty verdicts per reported user id"""
    queryset = GuiltyReport.objects.exclude(reported_user=None)
    if user_ids is not None:
        queryset = queryset.filter(reported_user_id__in=user_ids)

    rows = queryset.order_by().values('reported_user_id').annotate(total=Count('id'))
    return {row['reported_user_id']: row['total'] for row in rows}


def delete_guilty_record(guilty_id, actor):
    deleted, _ = GuiltyReport.objects.filter(id=guilty_id).delete()
    if deleted:
        record_audit(
            actor, 'guilty_delete',
            f"Deleted guilty record {guilty_id}",
            metadata={'report_id': str(guilty_id)}
        )
    return bool(deleted)


def ban_user_permanently(user, actor):
    """Escalate a suspended user to a permanent ban"""
    with transaction.atomic():
        user = User.objects.select_for_update().get(pk=user.pk)
        user.ban_permanently()
        record_audit(actor, 'user_ban', f"Permanently banned {user.display_name}", target_user=user)

    logger.warning(f"User {user.email} permanently banned by {actor.email}")
    return user
