"""
Refund service for refund requests on delivered, paid orders.
"""
import logging
from decimal import Decimal

from django.db.models import Q

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image
from apps.products.models import Product
from ..models import Order, Refund, RefundLog

logger = logging.getLogger(__name__)

REFUND_IMAGE_FOLDER = 'refunds'

REFUND_EXPORT_COLUMNS = [
    ('Refund ID', 'refund_id'),
    ('Order ID', 'order_id'),
    ('Payment Method', 'payment_method'),
    ('Refund Status', 'status'),
    ('Refundable Amount', 'refundable_amount'),
    ('Refund Reason', 'reason'),
    ('Images', 'images'),
    ('Customer Name', 'customer_name'),
    ('Customer Email', 'customer_email'),
    ('Customer Phone', 'customer_phone'),
    ('Refund Requested Date', 'requested_date'),
    ('Refund Logs', 'logs'),
    ('Created At', 'created_at'),
    ('Updated At', 'updated_at'),
]


class RefundService:
    """Service class for refund operations"""

    @staticmethod
    def snapshot_items(order: Order):
        """Copy every order line; line total is quantity x price + tax - discount"""
        lines = []
        for item in order.items.all():
            product = item.product
            total = item.quantity * item.unit_price + item.tax - item.item_discount
            lines.append({
                'productId': item.product_id,
                'title': product.title if product else '',
                'description': product.description if product else '',
                'quantity': item.quantity,
                'unitPrice': str(item.unit_price),
                'tax': str(item.tax),
                'itemDiscount': str(item.item_discount),
                'totalPrice': str(total),
            })
        return lines

    @staticmethod
    def check_eligibility(order: Order):
        """
        Raise ``ServiceError`` unless the order is paid, delivered and has no
        refund already covering one of its products.
        """
        if order.payment_status != Order.PAYMENT_PAID:
            raise ServiceError('Refunds can only be requested for paid orders.')
        if order.status != Order.STATUS_DELIVERED:
            raise ServiceError('Refunds can only be requested for delivered orders.')

        requested = set()
        for refund in Refund.objects.filter(order=order):
            requested |= refund.product_ids
        for item in order.items.all():
            if item.product_id in requested:
                raise ServiceError(f'Refund already requested for product: {item.product_id}')

    @staticmethod
    def create_refund(data, image_files=None) -> Refund:
        """
        Create a refund request seeded with a customer log entry.

        Eligibility is checked and the refund saved without a lock, so two
        concurrent requests for the same order can both pass the check.
        """
        order_pk = data.get('orderId')
        description = data.get('description') or data.get('refundReason')
        if isinstance(description, dict):
            description = description.get('description')
        if not order_pk or not description:
            raise ServiceError('Missing required fields')

        try:
            order = Order.objects.select_related('customer', 'seller').prefetch_related(
                'items__product'
            ).get(pk=order_pk)
        except (Order.DoesNotExist, ValueError):
            raise NotFoundError('Order not found')

        RefundService.check_eligibility(order)

        images = []
        for image_file in image_files or []:
            uploaded = upload_image(image_file, REFUND_IMAGE_FOLDER)
            images.append(uploaded.get('secure_url', ''))

        lines = RefundService.snapshot_items(order)
        customer = order.customer
        refund = Refund.objects.create(
            payment_method=order.payment_method,
            order=order,
            products=lines,
            refundable_amount=sum((Decimal(line['totalPrice']) for line in lines), Decimal('0')),
            reason={'description': description, 'images': images},
            seller=order.seller,
            customer_details={
                'name': customer.full_name,
                'email': customer.email or '',
                'phone': customer.phone_number,
            },
        )
        RefundLog.objects.create(
            refund=refund,
            actor_type=RefundLog.ACTOR_CUSTOMER,
            actor_id=customer.id,
            actor_name=customer.full_name,
            status=Refund.STATUS_PENDING,
            note='Refund initiated by customer',
        )
        logger.info(f"Refund {refund.refund_id} created for order {order.order_id}")
        return refund

    @staticmethod
    def base_queryset():
        return Refund.objects.select_related('order', 'seller').prefetch_related('logs')

    @staticmethod
    def list_refunds(status, search=''):
        """
        Refunds in one status, newest first.

        ``search`` matches refund id or customer name (case-insensitive,
        partial), the order number, or an order primary key exactly.
        """
        if not status:
            raise ServiceError('Refund status is required')

        queryset = RefundService.base_queryset().filter(status=status)
        if search:
            condition = (
                Q(refund_id__icontains=search) |
                Q(customer_details__name__icontains=search) |
                Q(order__order_id__iexact=search)
            )
            if search.isascii() and search.isdigit():
                condition |= Q(order_id=int(search))
            queryset = queryset.filter(condition)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def get_refund(refund_pk) -> Refund:
        try:
            return RefundService.base_queryset().get(pk=refund_pk)
        except (Refund.DoesNotExist, ValueError):
            raise NotFoundError('Refund not found')

    @staticmethod
    def products_by_id(refunds):
        """One lookup for every product referenced by the snapshots of ``refunds``"""
        product_ids = {item.get('productId') for refund in refunds for item in refund.products or []}
        product_ids.discard(None)
        return Product.objects.in_bulk(product_ids)

    @staticmethod
    def export_rows(status):
        if not status:
            raise ServiceError('Refund status is required')

        rows = []
        for refund in RefundService.base_queryset().filter(status=status).order_by('id'):
            reason = refund.reason or {}
            details = refund.customer_details or {}
            images = reason.get('images')
            rows.append({
                'refund_id': refund.refund_id,
                'order_id': refund.order.order_id,
                'payment_method': refund.payment_method,
                'status': refund.status,
                'refundable_amount': str(refund.refundable_amount),
                'reason': reason.get('description') or 'N/A',
                'images': '; '.join(images) if isinstance(images, list) and images else 'N/A',
                'customer_name': details.get('name') or 'N/A',
                'customer_email': details.get('email') or 'N/A',
                'customer_phone': details.get('phone') or 'N/A',
                'requested_date': refund.requested_date.isoformat(),
                'logs': '; '.join(f"{log.actor_name} ({log.status})" for log in refund.logs.all()),
                'created_at': refund.created_at.isoformat(),
                'updated_at': refund.updated_at.isoformat(),
            })
        return rows
