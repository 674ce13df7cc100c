"""
Admin customer management views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, paginated_response, server_error, service_error_response
)
from ..serializers import CustomerSerializer, CustomerUpdateSerializer, CustomerBlockSerializer
from ..services import CustomerService

logger = logging.getLogger(__name__)


class CustomerListView(APIView):
    """List customers with their total order counts"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            customers = CustomerService.list_customers(request.GET.get('search', '').strip())
            return paginated_response(customers, CustomerSerializer, request, 'Customers retrieved successfully')
        except Exception as e:
            logger.error(f"Error fetching customers: {e}")
            return server_error(e)


class CustomerDetailView(APIView):
    """Get or update one customer"""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            customer = CustomerService.get_customer(pk)
            return success_response(CustomerSerializer(customer).data, 'Customer retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            customer = CustomerService.get_customer(pk)
            serializer = CustomerUpdateSerializer(customer, data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid customer data', serializer.errors)
            customer = serializer.save()
            return success_response(CustomerSerializer(customer).data, 'Customer updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating customer {pk}: {e}")
            return server_error(e)

    put = patch


class CustomerBlockStatusView(APIView):
    """Block or unblock a customer"""
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = CustomerBlockSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('isBlock must be Block or Unblock', serializer.errors)

            customer = CustomerService.get_customer(pk)
            is_block = serializer.validated_data['isBlock']
            customer = CustomerService.set_block_status(customer, is_block)
            action = 'blocked' if is_block == 'Block' else 'unblocked'
            return success_response(CustomerSerializer(customer).data, f'Customer {action} successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
