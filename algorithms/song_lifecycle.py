# algorithms/song_lifecycle.py

"""
Song review lifecycle
pending -> approved <-> paused -> deleted -> purged
"""

PENDING = 'pending'
APPROVED = 'approved'
PAUSED = 'paused'
DELETED = 'deleted'
PURGED = 'purged'

STATUSES = (PENDING, APPROVED, PAUSED, DELETED)

# (from_status, action) -> to_status
TRANSITIONS = {
    (PENDING, 'approve'): APPROVED,
    (PENDING, 'reject'): DELETED,
    (APPROVED, 'pause'): PAUSED,
    (APPROVED, 'delete'): DELETED,
    (PAUSED, 'resume'): APPROVED,
    (PAUSED, 'delete'): DELETED,
    (DELETED, 'restore'): APPROVED,
    (DELETED, 'purge'): PURGED,
}

# Storage flags for each live status: (is_pending, is_visible, is_deleted)
STATUS_FLAGS = {
    PENDING: (True, False, False),
    APPROVED: (False, True, False),
    PAUSED: (False, False, False),
    DELETED: (False, False, True),
}


class InvalidSongTransition(ValueError):
    pass


def status_from_flags(is_pending, is_visible, is_deleted):
    """Deleted wins over everything, then pending, then visibility"""
    if is_deleted:
        return DELETED
    if is_pending:
        return PENDING
    if is_visible:
        return APPROVED
    return PAUSED


def next_status(current, action):
    try:
        return TRANSITIONS[(current, action)]
    except KeyError:
        raise InvalidSongTransition(f"Cannot {action} a song that is {current}")


def allowed_actions(current):
    return [action for (status, action) in TRANSITIONS if status == current]
