"""
Withdrawal method views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import success_response, error_response, server_error, service_error_response
from ..serializers import WithdrawalMethodSerializer, WithdrawalMethodStatusSerializer
from ..services import WithdrawalMethodService

logger = logging.getLogger(__name__)


class WithdrawalMethodListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            methods = WithdrawalMethodService.list_methods()
            return success_response(
                WithdrawalMethodSerializer(methods, many=True).data, 'Withdrawal methods retrieved successfully'
            )
        except Exception as e:
            logger.error(f"Failed to get withdrawal methods: {e}")
            return server_error(e)

    def post(self, request):
        try:
            serializer = WithdrawalMethodSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid withdrawal method data', serializer.errors)
            method = serializer.save()
            return success_response(
                WithdrawalMethodSerializer(method).data,
                'Withdrawal method added successfully.',
                status.HTTP_201_CREATED
            )
        except Exception as e:
            logger.error(f"Error adding withdrawal method: {e}")
            return server_error(e)


class WithdrawalMethodDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            method = WithdrawalMethodService.get_method(pk)
            return success_response(WithdrawalMethodSerializer(method).data, 'Withdrawal method retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def put(self, request, pk):
        try:
            method = WithdrawalMethodService.get_method(pk)
            serializer = WithdrawalMethodSerializer(method, data=request.data)
            if not serializer.is_valid():
                return error_response('Method name and fields are required', serializer.errors)
            method = serializer.save()
            return success_response(WithdrawalMethodSerializer(method).data, 'Withdrawal method updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Failed to update withdrawal method {pk}: {e}")
            return server_error(e)

    patch = put

    def delete(self, request, pk):
        try:
            WithdrawalMethodService.delete_method(WithdrawalMethodService.get_method(pk))
            return success_response(None, 'Withdrawal method deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class WithdrawalMethodStatusView(APIView):
    """Toggle ``isActive`` or make the method the default"""
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = WithdrawalMethodStatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid field specified', serializer.errors)
            method = WithdrawalMethodService.get_method(pk)
            method = WithdrawalMethodService.update_status(method, serializer.validated_data['field'])
            return success_response(WithdrawalMethodSerializer(method).data, 'Withdrawal method status updated')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
