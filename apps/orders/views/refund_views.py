"""
Refund request views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.exports import export_response
from apps.common.utils import (
    success_response, error_response, get_page_params, paginate_queryset, get_export_type,
    server_error, service_error_response
)
from ..serializers import RefundSerializer
from ..services import RefundService
from ..services.refund_service import REFUND_EXPORT_COLUMNS

logger = logging.getLogger(__name__)


def _refund_status(request):
    status_value = request.GET.get('refundStatus') or request.GET.get('status')
    if not status_value and hasattr(request.data, 'get'):
        status_value = request.data.get('refundStatus')
    return (status_value or '').strip()


class RefundListCreateView(APIView):
    """
    GET  - refunds in ``refundStatus`` with optional ``search``
    POST - request a refund; reason images are sent as ``images`` files
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            refunds = RefundService.list_refunds(_refund_status(request), request.GET.get('search', '').strip())
            page, page_size = get_page_params(request)
            items, meta = paginate_queryset(refunds, page, page_size)
            items = list(items)
            serializer = RefundSerializer(
                items, many=True, context={'request': request, 'products_by_id': RefundService.products_by_id(items)}
            )
            return success_response(
                {'list': serializer.data, 'page': meta}, 'Refund requests fetched successfully'
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error fetching refund requests: {e}")
            return server_error(e)

    def post(self, request):
        try:
            refund = RefundService.create_refund(request.data, request.FILES.getlist('images'))
            refund = RefundService.get_refund(refund.pk)
            return success_response(
                RefundSerializer(refund).data, 'Refund request created successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating refund: {e}")
            return server_error(e)


class RefundDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            refund = RefundService.get_refund(pk)
            return success_response(RefundSerializer(refund).data, 'Refund retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class RefundExportView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            refund_status = _refund_status(request)
            if not refund_status:
                return error_response('Refund status is required')

            export_type = get_export_type(request) or request.GET.get('format', '').lower()
            if export_type not in ('csv', 'excel'):
                return error_response("Invalid format. Choose 'csv' or 'excel'")

            rows = RefundService.export_rows(refund_status)
            if not rows:
                return error_response('No refunds found for this status', status_code=status.HTTP_404_NOT_FOUND)
            return export_response(
                rows, REFUND_EXPORT_COLUMNS, export_type, f'refunds-{refund_status.lower()}', 'Refunds'
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error exporting refunds: {e}")
            return server_error(e)


class RefundDecisionView(APIView):
    """
    Approve or reject a refund.

    No decision workflow exists yet; the endpoint answers 501 and changes nothing.
    """
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            RefundService.get_refund(pk)
            return error_response(
                'Refund approval and rejection are not implemented',
                status_code=status.HTTP_501_NOT_IMPLEMENTED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    post = patch
