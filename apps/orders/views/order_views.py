"""
Order views: creation, filtered listings, detail, status updates and exports.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.exports import export_response
from apps.common.utils import (
    success_response, error_response, paginated_response, get_export_type,
    server_error, service_error_response
)
from apps.users.serializers import SellerSummarySerializer
from ..models import Order
from ..serializers import (
    OrderSerializer, OrderStatusUpdateSerializer, OrderFilterSerializer, STATUS_VALUES
)
from ..services import OrderService
from ..services.order_service import ORDER_EXPORT_COLUMNS

logger = logging.getLogger(__name__)


class OrderListCreateView(APIView):
    """
    GET  - orders filtered by ``status``, ``store``, ``customer`` and ``date_filter``
    POST - create an order from customer, seller, address, payment method and items
    """
    permission_classes = [IsAuthenticated]
    default_status = None

    def get(self, request):
        try:
            filters = OrderFilterSerializer(data=request.GET)
            if not filters.is_valid():
                return error_response('Invalid order filters', filters.errors)

            order_status = self.default_status or request.GET.get('status') or None
            if order_status and order_status not in STATUS_VALUES:
                return error_response(f'Invalid status. Use one of: {", ".join(STATUS_VALUES)}')

            orders = OrderService.list_orders(
                status=order_status,
                store=filters.validated_data.get('store', '').strip(),
                customer=filters.validated_data.get('customer', '').strip(),
                date_filter=filters.validated_data.get('date_filter', ''),
            )
            return paginated_response(orders, OrderSerializer, request, 'Orders retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error fetching orders: {e}")
            return server_error(e)

    def post(self, request):
        try:
            order = OrderService.create_order(request.data)
            order = OrderService.get_order(order.pk)
            return success_response(OrderSerializer(order).data, 'Order created successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating order: {e}")
            return server_error(e)


class StatusOrderListView(OrderListCreateView):
    """Listing pinned to one order status"""
    http_method_names = ['get', 'head', 'options']


class PendingOrderListView(StatusOrderListView):
    default_status = Order.STATUS_PENDING


class ConfirmedOrderListView(StatusOrderListView):
    default_status = Order.STATUS_CONFIRMED


class PackagingOrderListView(StatusOrderListView):
    default_status = Order.STATUS_PACKAGING


class CanceledOrderListView(StatusOrderListView):
    default_status = Order.STATUS_CANCELED


class ReturnedOrderListView(StatusOrderListView):
    default_status = Order.STATUS_RETURNED


class DeliveredOrderListView(StatusOrderListView):
    default_status = Order.STATUS_DELIVERED


class OrderDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            order = OrderService.get_order(pk)
            return success_response(OrderSerializer(order).data, 'Order retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class OrderStatusUpdateView(APIView):
    """Set order status, payment status or delivery details"""
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = OrderStatusUpdateSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid order status data', serializer.errors)

            order = OrderService.update_status(OrderService.get_order(pk), serializer.validated_data)
            return success_response(OrderSerializer(order).data, 'Order updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating order {pk}: {e}")
            return server_error(e)


class CustomerOrderListView(APIView):
    """All orders of one customer with their count"""
    permission_classes = [IsAuthenticated]

    def get(self, request, customer_id):
        try:
            orders = OrderService.list_customer_orders(customer_id)
            return success_response({
                'totalOrdersByCustomer': orders.count(),
                'orders': OrderSerializer(orders, many=True).data,
            }, 'Orders retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class StoreListView(APIView):
    """Shops that have received orders"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            stores = OrderService.list_stores()
            return success_response(SellerSummarySerializer(stores, many=True).data, 'Stores retrieved successfully')
        except Exception as e:
            return server_error(e)


class OrderExportView(APIView):
    """Export the orders of one status as csv or excel"""
    permission_classes = [IsAuthenticated]
    default_status = None

    def get(self, request):
        try:
            order_status = self.default_status or request.GET.get('status')
            if order_status not in STATUS_VALUES:
                return error_response('A valid order status is required')

            export_type = get_export_type(request)
            if export_type not in ('csv', 'excel'):
                return error_response('Invalid export type')

            rows = OrderService.export_rows(order_status)
            if not rows:
                return error_response(
                    f'No {order_status.lower()} orders found', status_code=status.HTTP_404_NOT_FOUND
                )
            return export_response(
                rows, ORDER_EXPORT_COLUMNS, export_type, f'{order_status.lower()}-orders', f'{order_status} Orders'
            )
        except Exception as e:
            logger.error(f"Error exporting orders: {e}")
            return server_error(e)

    post = get


class PendingOrderExportView(OrderExportView):
    default_status = Order.STATUS_PENDING


class ConfirmedOrderExportView(OrderExportView):
    default_status = Order.STATUS_CONFIRMED


class PackagingOrderExportView(OrderExportView):
    default_status = Order.STATUS_PACKAGING


class CanceledOrderExportView(OrderExportView):
    default_status = Order.STATUS_CANCELED


class ReturnedOrderExportView(OrderExportView):
    default_status = Order.STATUS_RETURNED


class DeliveredOrderExportView(OrderExportView):
    default_status = Order.STATUS_DELIVERED
