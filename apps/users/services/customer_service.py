"""
Customer registry service: lookup, search and block status.
"""
import logging
from django.db.models import Count, Q

from apps.common.exceptions import NotFoundError
from ..models import Customer

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')


class CustomerService:
    """Service class for customer management"""

    @staticmethod
    def get_customer(customer_id) -> Customer:
        try:
            return Customer.objects.get(pk=customer_id)
        except (Customer.DoesNotExist, ValueError):
            raise NotFoundError('Customer not found')

    @staticmethod
    def list_customers(keyword=''):
        """Customers with their order counts, newest first"""
        queryset = Customer.objects.annotate(total_orders=Count('orders'))
        if keyword:
            queryset = queryset.filter(
                Q(first_name__icontains=keyword) |
                Q(last_name__icontains=keyword) |
                Q(phone_number__icontains=keyword) |
                Q(email__icontains=keyword)
            )
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def set_block_status(customer: Customer, is_block: str) -> Customer:
        customer.is_block = is_block
        customer.save(update_fields=['is_block', 'updated_at'])
        audit_logger.info(f"Customer {customer.id} set to {is_block}")
        return customer
