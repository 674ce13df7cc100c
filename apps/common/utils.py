"""
Common utility functions for API responses
"""
from django.conf import settings
from rest_framework.response import Response
from rest_framework import status


def success_response(data=None, message="Success", status_code=status.HTTP_200_OK):
    """
    Standard success response format
    """
    response_data = {
        "code": status_code,
        "msg": message,
        "data": data
    }
    return Response(response_data, status=status_code)


def error_response(message="Error", errors=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Standard error response format
    """
    response_data = {
        "code": status_code,
        "msg": message
    }
    if errors:
        response_data["errors"] = errors
    return Response(response_data, status=status_code)


def get_page_params(request, default_size=None):
    """
    Read ``page`` and ``pageSize`` (or ``limit``) from the query string.

    Invalid or non-positive values fall back to the defaults.
    """
    default_size = default_size or settings.DEFAULT_PAGE_SIZE
    try:
        page = int(request.GET.get('page', 1))
    except (TypeError, ValueError):
        page = 1
    raw_size = request.GET.get('pageSize', request.GET.get('limit', default_size))
    try:
        page_size = int(raw_size)
    except (TypeError, ValueError):
        page_size = default_size

    page = max(page, 1)
    if page_size < 1:
        page_size = default_size
    return page, min(page_size, settings.MAX_PAGE_SIZE)


def paginate_queryset(queryset, page, page_size):
    """
    Offset pagination: skip ``(page - 1) * page_size`` rows and take ``page_size``.

    Returns the page slice and the page metadata block.
    """
    total = queryset.count()
    start = (page - 1) * page_size
    items = queryset[start:start + page_size]
    meta = {
        "pageNum": page,
        "pageSize": page_size,
        "total": total,
        "totalPages": (total + page_size - 1) // page_size,
        "hasNextPage": start + page_size < total,
        "hasPrevPage": page > 1,
    }
    return items, meta


def paginated_response(queryset, serializer_class, request, message="Success", context=None):
    """
    Standard paginated response format
    """
    page, page_size = get_page_params(request)
    items, meta = paginate_queryset(queryset, page, page_size)
    serializer = serializer_class(items, many=True, context=context or {'request': request})
    return success_response({
        "list": serializer.data,
        "page": meta,
    }, message)


def server_error(exc):
    """Echo the underlying failure as a 500 response."""
    return error_response(f"Server error: {str(exc)}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def service_error_response(exc):
    """Translate a ``ServiceError`` raised by the service layer."""
    return error_response(exc.message, errors=exc.errors, status_code=exc.status_code)


def list_response(queryset, serializer_class, request, message="Success", context=None):
    """
    Paginate only when the client asks for a page; otherwise return every row.
    """
    if 'page' in request.GET or 'pageSize' in request.GET or 'limit' in request.GET:
        return paginated_response(queryset, serializer_class, request, message, context)
    serializer = serializer_class(queryset, many=True, context=context or {'request': request})
    return success_response({
        "list": serializer.data,
        "total": len(serializer.data),
    }, message)


def get_export_type(request):
    """Export format from the body or the query string (``csv`` or ``excel``)."""
    value = None
    if hasattr(request.data, 'get'):
        value = request.data.get('type')
    return (value or request.GET.get('type') or '').strip().lower()


def parse_bool(value, default=False):
    """Interpret form and spreadsheet booleans (``true``, ``1``, ``yes``, ``Active``)."""
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in ('true', '1', 'yes', 'y', 'active')
