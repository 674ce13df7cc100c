"""
Core order service for order creation, filtered listings and status updates.
"""
import logging
from datetime import timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from django.db.models import F, Q
from django.utils import timezone

from apps.common.exceptions import NotFoundError, ServiceError
from apps.products.models import Product
from apps.users.models import Customer, Seller, CustomerAddress
from ..models import Order, OrderItem
from ..serializers import OrderItemInputSerializer

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

ORDER_REQUIRED_FIELDS = ('customerId', 'sellerId', 'addressId', 'paymentMethod')

DATE_FILTERS = ('thisWeek', 'thisMonth', 'thisYear')

ORDER_EXPORT_COLUMNS = [
    ('Order ID', 'order_id'),
    ('Order Date', 'date'),
    ('Customer Name', 'customer_name'),
    ('Customer Phone', 'customer_phone'),
    ('Store', 'store'),
    ('Items', 'items'),
    ('Total', 'total'),
    ('Payment Method', 'payment_method'),
    ('Payment Status', 'payment_status'),
    ('Order Status', 'status'),
]


def period_start(date_filter, now=None):
    """
    Start of the calendar week (Monday), month or year containing ``now``,
    in the current time zone.
    """
    now = timezone.localtime(now or timezone.now())
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if date_filter == 'thisWeek':
        return midnight - timedelta(days=midnight.weekday())
    if date_filter == 'thisMonth':
        return midnight.replace(day=1)
    if date_filter == 'thisYear':
        return midnight.replace(month=1, day=1)
    return None


class OrderService:
    """Service class for core order business logic"""

    @staticmethod
    def calculate_order_total(order_items: List[Dict]) -> Decimal:
        """Sum of the submitted line totals, taken as-is"""
        return sum((Decimal(str(item['totalPrice'])) for item in order_items), Decimal('0'))

    @staticmethod
    def create_order(data) -> Order:
        """
        Create an order and its lines, then bump product sales counters.

        The counter updates run after the order is saved and outside any
        transaction; a failed update is logged and the order stands.

        Raises:
            ServiceError: missing fields or malformed lines (400)
            NotFoundError: customer, seller, address or product missing (404)
        """
        order_items = data.get('orderItems') or []
        if any(not data.get(field) for field in ORDER_REQUIRED_FIELDS) or not order_items:
            raise ServiceError('All fields are required.')

        items_serializer = OrderItemInputSerializer(data=order_items, many=True)
        if not items_serializer.is_valid():
            raise ServiceError('Invalid order items', errors=items_serializer.errors)
        items = items_serializer.validated_data

        customer = Customer.objects.filter(pk=data['customerId']).first()
        seller = Seller.objects.filter(pk=data['sellerId']).first()
        if customer is None or seller is None:
            raise NotFoundError('Customer or Seller not found.')
        address = CustomerAddress.objects.filter(pk=data['addressId']).first()
        if address is None:
            raise NotFoundError('Customer address not found.')

        product_ids = {item['productId'] for item in items}
        products = Product.objects.in_bulk(product_ids)
        missing = sorted(product_ids - set(products))
        if missing:
            raise NotFoundError(f"Product not found: {', '.join(str(pk) for pk in missing)}")

        order = Order.objects.create(
            total=OrderService.calculate_order_total(items),
            customer=customer,
            seller=seller,
            customer_address=address,
            payment_method=data['paymentMethod'],
        )
        OrderItem.objects.bulk_create([
            OrderItem(
                order=order,
                product=products[item['productId']],
                quantity=item['quantity'],
                unit_price=item['unitPrice'],
                tax=item.get('tax', Decimal('0')),
                item_discount=item.get('itemDiscount', Decimal('0')),
                total_price=item['totalPrice'],
            )
            for item in items
        ])
        logger.info(f"Order {order.order_id} created for customer {customer.id}, total {order.total}")

        for item in items:
            OrderService.update_product_sales(item['productId'], item['quantity'], item['unitPrice'])
        return order

    @staticmethod
    def update_product_sales(product_id, quantity, unit_price) -> bool:
        """Best-effort increment of ``total_sold`` and ``total_sold_amount``"""
        try:
            updated = Product.objects.filter(pk=product_id).update(
                total_sold=F('total_sold') + quantity,
                total_sold_amount=F('total_sold_amount') + Decimal(quantity) * Decimal(str(unit_price)),
            )
            if not updated:
                logger.warning(f"Product {product_id} not found while updating sales")
            return bool(updated)
        except Exception as e:
            logger.error(f"Error updating product sales for {product_id}: {e}")
            return False

    @staticmethod
    def base_queryset():
        return Order.objects.select_related(
            'customer', 'seller', 'customer_address'
        ).prefetch_related('items__product__seller')

    @staticmethod
    def list_orders(status: Optional[str] = None, store='', customer='', date_filter=''):
        """
        One parametrized order query used by the general and status listings.

        ``store`` matches the seller's shop name (case-insensitive, partial);
        ``customer`` matches first name, last name or phone exactly (case-insensitive);
        ``date_filter`` is one of thisWeek, thisMonth, thisYear.
        """
        queryset = OrderService.base_queryset()
        if status:
            queryset = queryset.filter(status=status)
        if store:
            queryset = queryset.filter(seller__shop_name__icontains=store)
        if customer:
            queryset = queryset.filter(
                Q(customer__first_name__iexact=customer) |
                Q(customer__last_name__iexact=customer) |
                Q(customer__phone_number__iexact=customer)
            )
        if date_filter:
            start = period_start(date_filter)
            if start is None:
                raise ServiceError(f"Invalid date filter. Use one of: {', '.join(DATE_FILTERS)}")
            queryset = queryset.filter(created_at__gte=start)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def get_order(order_pk) -> Order:
        try:
            return OrderService.base_queryset().get(pk=order_pk)
        except (Order.DoesNotExist, ValueError):
            raise NotFoundError('Order not found')

    @staticmethod
    def list_customer_orders(customer_id):
        orders = OrderService.base_queryset().filter(customer_id=customer_id).order_by('-created_at', '-id')
        if not orders.exists():
            raise NotFoundError('No orders found for this customer ID')
        return orders

    @staticmethod
    def update_status(order: Order, data) -> Order:
        """Apply any status/payment status value; there is no transition table"""
        field_map = {
            'status': 'status',
            'paymentStatus': 'payment_status',
            'deliveryManName': 'delivery_man_name',
            'deliveryManContact': 'delivery_man_contact',
            'expectedDeliveryDate': 'expected_delivery_date',
        }
        previous = (order.status, order.payment_status)
        for key, attr in field_map.items():
            if key in data:
                setattr(order, attr, data[key])
        order.save()
        audit_logger.info(
            f"Order {order.order_id} status {previous[0]} -> {order.status}, "
            f"payment {previous[1]} -> {order.payment_status}"
        )
        return order

    @staticmethod
    def list_stores():
        """Sellers that have received at least one order"""
        return Seller.objects.filter(orders__isnull=False).distinct().order_by('shop_name', 'id')

    @staticmethod
    def export_rows(status):
        """Rows for the status export, ordered by id; items flattened into one string"""
        orders = OrderService.base_queryset().filter(status=status).order_by('id')
        rows = []
        for order in orders:
            items = '; '.join(
                f"{item.product.title if item.product else 'Deleted product'} x{item.quantity} @ {item.unit_price}"
                for item in order.items.all()
            )
            rows.append({
                'order_id': order.order_id,
                'date': order.date.isoformat() if order.date else '',
                'customer_name': order.customer.full_name,
                'customer_phone': order.customer.phone_number,
                'store': order.seller.shop_name,
                'items': items,
                'total': str(order.total),
                'payment_method': order.payment_method,
                'payment_status': order.payment_status,
                'status': order.status,
            })
        return rows
