"""
Custom exception handlers for consistent API responses
"""
from rest_framework.views import exception_handler
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """
    Raised by the service layer when a request cannot be fulfilled.

    Carries the HTTP status the view should answer with and, for validation
    failures that collect several problems, the list of messages.
    """

    def __init__(self, message, status_code=status.HTTP_400_BAD_REQUEST, errors=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors

    def __str__(self):
        return self.message


class NotFoundError(ServiceError):
    def __init__(self, message="Resource not found"):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        logger.warning(f"API Exception: {exc}")

        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'
        elif response.status_code == status.HTTP_415_UNSUPPORTED_MEDIA_TYPE:
            custom_response_data['msg'] = 'Unsupported media type'

        response.data = custom_response_data

    return response
