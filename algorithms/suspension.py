# algorithms/suspension.py

"""
Account suspension rules
Durations offered to admins and how a stored suspension reads at a given time.
"""

from datetime import timedelta

PERMANENT = 'permanent'

SUSPENSION_DURATIONS = {
    '1m': timedelta(minutes=1),
    '1d': timedelta(days=1),
    '2d': timedelta(days=2),
    '3d': timedelta(days=3),
    '5d': timedelta(days=5),
}

DURATION_LABELS = {
    '1m': '1 minute',
    '1d': '1 day',
    '2d': '2 days',
    '3d': '3 days',
    '5d': '5 days',
    PERMANENT: 'Permanent',
}

# Offered on report verdicts and on the user list respectively
VERDICT_DURATIONS = ('1m', '1d', '2d', '3d', PERMANENT)
USER_DURATIONS = ('1d', '3d', '5d', PERMANENT)

STATUS_NORMAL = 'normal'
STATUS_SUSPENDED = 'suspended'
STATUS_EXPIRED = 'expired'
STATUS_BANNED = 'banned'


def is_valid_duration(duration):
    return duration == PERMANENT or duration in SUSPENSION_DURATIONS


def suspension_expiry(duration, now):
    """
    Expiry instant for a suspension starting at `now`

    Returns None for a permanent suspension.
    """
    if duration == PERMANENT:
        return None
    try:
        return now + SUSPENSION_DURATIONS[duration]
    except KeyError:
        raise ValueError(f"Unknown suspension duration: {duration!r}")


def suspension_status(suspended_until, permanently_banned, now):
    """
    Read a stored suspension at time `now`

    A timed suspension lapses on its own once its expiry has passed; nothing
    has to clear the stored value for the account to read as expired.
    """
    if permanently_banned:
        return STATUS_BANNED

    if suspended_until is not None:
        if now < suspended_until:
            return STATUS_SUSPENDED
        return STATUS_EXPIRED

    return STATUS_NORMAL


def is_restricted(status):
    """True while the account may not use the platform"""
    return status in (STATUS_SUSPENDED, STATUS_BANNED)
