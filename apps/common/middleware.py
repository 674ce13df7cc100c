"""
Middleware for error logging and the staff audit trail
"""

import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


class ErrorHandlingMiddleware(MiddlewareMixin):
    """
    Log exceptions that escaped the views and answer API callers with the
    standard envelope instead of an HTML error page.
    """

    def process_exception(self, request, exception):
        logger.error(f"Exception in {request.path}: {str(exception)}", exc_info=True)

        if request.path.startswith('/api/'):
            error_response = {
                'code': 500,
                'msg': f"Server error: {str(exception)}",
                'data': None
            }
            return JsonResponse(error_response, status=500)

        return None  # Let Django handle non-API errors normally


class AuditLogMiddleware(MiddlewareMixin):
    """Record every mutating API call with the acting staff user and the outcome."""

    MUTATING_METHODS = ('POST', 'PUT', 'PATCH', 'DELETE')

    def process_response(self, request, response):
        if request.method in self.MUTATING_METHODS and request.path.startswith('/api/'):
            user = getattr(request, 'user', None)
            actor = user.get_username() if user is not None and user.is_authenticated else 'anonymous'
            audit_logger.info(
                "%s %s by %s -> %s", request.method, request.path, actor, response.status_code
            )
        return response
