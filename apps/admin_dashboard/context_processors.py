# apps/admin_dashboard/context_processors.py

from django.core.cache import cache

COUNTERS_CACHE_KEY = 'console_counters'


def get_console_counters():
    """Badge counts for the console navigation"""
    from algorithms import song_lifecycle as lifecycle
    from apps.applications.utils import pending_count
    from apps.contact.models import ContactMessage
    from apps.reports.models import Report
    from apps.songs.models import Song

    return {
        'pending_reports': Report.objects.count(),
        'pending_songs': Song.objects.with_status(lifecycle.PENDING).count(),
        'pending_applications': pending_count(),
        'open_contact_messages': ContactMessage.objects.filter(is_resolved=False).count(),
    }


def console_counters(request):
    """
    Add navigation badge counts for signed-in admins

    Cached for 30 seconds to keep every page render from running the counts.
    """
    session = getattr(request, 'admin_session', None)
    if session is None or not session.is_admin:
        return {}

    counters = cache.get(COUNTERS_CACHE_KEY)
    if counters is None:
        counters = get_console_counters()
        cache.set(COUNTERS_CACHE_KEY, counters, 30)

    return {'console_counters': counters}
