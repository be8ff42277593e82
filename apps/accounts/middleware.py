# apps/accounts/middleware.py

from .session import AdminSession


class AdminSessionMiddleware:
    """Attach the acting admin's session context to every request"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.admin_session = AdminSession.from_request(request)
        return self.get_response(request)
