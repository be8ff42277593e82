# utils/decorators.py

from functools import wraps
from django.shortcuts import redirect
from django.core.exceptions import PermissionDenied
from django.http import JsonResponse

from apps.accounts.session import AdminSession


def _admin_session(request):
    session = getattr(request, 'admin_session', None)
    if session is None:
        session = AdminSession.from_request(request)
        request.admin_session = session
    return session


def admin_required(view_func):
    """Decorator to ensure the acting user holds console access"""
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        session = _admin_session(request)

        if not session.is_authenticated:
            if request.headers.get('X-Requested-With') == 'XMLHttpRequest':
                return JsonResponse({'error': 'Authentication required'}, status=401)
            return redirect('console_login')

        if not session.is_admin:
            raise PermissionDenied

        return view_func(request, *args, **kwargs)
    return _wrapped_view


def superuser_required(view_func):
    """Decorator for actions reserved to superusers (admin role changes)"""
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        session = _admin_session(request)

        if not session.is_authenticated:
            return redirect('console_login')

        if not session.is_superuser:
            raise PermissionDenied

        return view_func(request, *args, **kwargs)
    return _wrapped_view
