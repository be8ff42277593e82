# apps/accounts/session.py

"""
Admin session context

Every console request carries an AdminSession describing who is acting. It is
opened when an admin signs in, rebuilt on each request from the Django session
and closed when the admin signs out. Handlers read the acting admin from here
and pass it down explicitly.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from django.utils.dateparse import parse_datetime

SESSION_KEY = 'console_session'


@dataclass
class AdminSession:
    user: Any
    started_at: Optional[datetime] = None
    ip_address: Optional[str] = None
    login_record_id: Optional[int] = None

    @property
    def is_authenticated(self):
        return bool(self.user is not None and self.user.is_authenticated)

    @property
    def is_admin(self):
        return self.is_authenticated and self.user.is_admin_user

    @property
    def is_superuser(self):
        return self.is_authenticated and self.user.is_superuser

    @classmethod
    def from_request(cls, request):
        """Rebuild the context from the Django session"""
        data = request.session.get(SESSION_KEY) or {}
        started_at = data.get('started_at')
        return cls(
            user=getattr(request, 'user', None),
            started_at=parse_datetime(started_at) if started_at else None,
            ip_address=data.get('ip_address'),
            login_record_id=data.get('login_record_id'),
        )

    def store(self, request):
        request.session[SESSION_KEY] = {
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'ip_address': self.ip_address,
            'login_record_id': self.login_record_id,
        }

    @staticmethod
    def clear(request):
        request.session.pop(SESSION_KEY, None)
