"""
Seller registry service.
"""
import logging
from django.db.models import Q

from apps.common.exceptions import NotFoundError, ServiceError
from ..models import Seller

audit_logger = logging.getLogger('audit')


class SellerService:
    """Service class for seller registration and status"""

    @staticmethod
    def get_seller(seller_id) -> Seller:
        try:
            return Seller.objects.get(pk=seller_id)
        except (Seller.DoesNotExist, ValueError):
            raise NotFoundError('Seller not found')

    @staticmethod
    def ensure_unique_contact(email, phone_number):
        if Seller.objects.filter(Q(email=email) | Q(phone_number=phone_number)).exists():
            raise ServiceError('Seller with this email or phone number already exists')

    @staticmethod
    def list_sellers(keyword='', status=None):
        queryset = Seller.objects.all()
        if keyword:
            queryset = queryset.filter(
                Q(shop_name__icontains=keyword) |
                Q(first_name__icontains=keyword) |
                Q(last_name__icontains=keyword) |
                Q(phone_number__icontains=keyword) |
                Q(email__icontains=keyword)
            )
        if status:
            queryset = queryset.filter(status=status)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def set_status(seller: Seller, status: str) -> Seller:
        seller.status = status
        seller.save(update_fields=['status', 'updated_at'])
        audit_logger.info(f"Seller {seller.id} status set to {status}")
        return seller
