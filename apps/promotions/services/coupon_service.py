"""
Coupon service: creation with collected validation errors, listing, editing.
"""
import json
import logging
from decimal import Decimal, InvalidOperation

from django.utils import timezone

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.utils import parse_bool
from apps.common.validators import parse_datetime_value
from apps.products.models import Product, Category
from apps.users.models import Customer
from ..models import Coupon, generate_coupon_code
from ..serializers import CouponUpdateSerializer

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

COUPON_TYPES = [choice for choice, _ in Coupon.COUPON_TYPE_CHOICES]
CREATOR_TYPES = [choice for choice, _ in Coupon.CREATOR_TYPE_CHOICES]
CUSTOMER_VALUES = [choice for choice, _ in Coupon.CUSTOMER_CHOICES]
DISCOUNT_TYPES = [choice for choice, _ in Coupon.DISCOUNT_TYPE_CHOICES]


def _decimal(value, default=None):
    if value is None or value == '':
        return default
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def _int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_id_list(data, key):
    """IDs from a JSON list, a JSON-encoded string, a comma list or repeated form keys"""
    if hasattr(data, 'getlist'):
        values = data.getlist(key)
        value = values[0] if len(values) == 1 else values
    else:
        value = data.get(key)

    if isinstance(value, str):
        value = value.strip()
        if value.startswith('['):
            try:
                value = json.loads(value)
            except ValueError:
                value = []
        else:
            value = [part for part in value.split(',') if part.strip()]
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        value = [value]
    return [number for number in (_int(item) for item in value) if number is not None]


class CouponService:
    """Service class for coupons"""

    @staticmethod
    def validate(data, now=None):
        """
        Collect every problem with a coupon payload instead of stopping at
        the first one. Returns the list of messages (empty when valid).
        """
        now = now or timezone.now()
        errors = []

        if data.get('couponType') not in COUPON_TYPES:
            errors.append('Invalid couponType')

        title = data.get('title') or ''
        if len(str(title).strip()) < 3:
            errors.append('Title must be at least 3 characters long')

        code = data.get('code')
        if code and len(str(code)) < 6:
            errors.append('Code must be at least 6 characters long')

        if data.get('creatorType') not in CREATOR_TYPES:
            errors.append('Invalid creatorType')

        if not _int(data.get('creatorId')):
            errors.append('creatorId is required')

        if not parse_bool(data.get('applyToAllProducts')) and not parse_id_list(data, 'applicableProducts'):
            errors.append('Specify products or select applyToAllProducts')

        customer = data.get('customer', Coupon.CUSTOMER_ALL)
        if customer not in CUSTOMER_VALUES:
            errors.append('Invalid customer value')
        elif customer == Coupon.CUSTOMER_SPECIFIC and not parse_id_list(data, 'specificCustomers'):
            errors.append('Specify customer IDs if selecting specific customers')

        limit = _int(data.get('limitPerUser', 1))
        if limit is None or limit < 1:
            errors.append('Limit must be at least 1')

        if data.get('discountType') not in DISCOUNT_TYPES:
            errors.append('Invalid discountType')

        discount = _decimal(data.get('discountAmount'))
        if discount is None or discount < 1:
            errors.append('Discount must be at least 1')

        min_purchase = _decimal(data.get('minPurchase'), Decimal('0'))
        if min_purchase is None or min_purchase < 0:
            errors.append('Minimum purchase must be at least 0')

        start = parse_datetime_value(data.get('startDate'))
        if start is None or start < now:
            errors.append('Start date cannot be in the past')

        expire = parse_datetime_value(data.get('expireDate'))
        if expire is None or start is None or expire <= start:
            errors.append('Expiration date must be after the start date')

        if not parse_bool(data.get('applyToAllCategories'), default=True):
            category_id = _int(data.get('categoryId'))
            if not category_id:
                errors.append('Category is required when applyToAllCategories is false')
            elif not Category.objects.filter(pk=category_id).exists():
                errors.append('Category not found')

        return errors

    @staticmethod
    def create_coupon(data, now=None) -> Coupon:
        code = data.get('code') or generate_coupon_code()
        if Coupon.objects.filter(code=code).exists():
            raise ServiceError('Coupon code already exists')

        errors = CouponService.validate(data, now)
        if errors:
            raise ServiceError('Validation errors', errors=errors)

        apply_to_all_products = parse_bool(data.get('applyToAllProducts'))
        apply_to_all_categories = parse_bool(data.get('applyToAllCategories'), default=True)
        creator_id = _int(data.get('creatorId'))
        category_id = None if apply_to_all_categories else _int(data.get('categoryId'))
        customer = data.get('customer', Coupon.CUSTOMER_ALL)

        if apply_to_all_products:
            products = Product.objects.filter(seller_id=creator_id)
            if category_id:
                products = products.filter(category_id=category_id)
        else:
            products = Product.objects.filter(pk__in=parse_id_list(data, 'applicableProducts'))

        coupon = Coupon.objects.create(
            coupon_type=data.get('couponType'),
            title=str(data.get('title')).strip(),
            code=code,
            creator_type=data.get('creatorType'),
            creator_id=creator_id,
            apply_to_all_products=apply_to_all_products,
            customer=customer,
            limit_per_user=_int(data.get('limitPerUser', 1)),
            discount_type=data.get('discountType'),
            discount_amount=_decimal(data.get('discountAmount')),
            min_purchase=_decimal(data.get('minPurchase'), Decimal('0')),
            start_date=parse_datetime_value(data.get('startDate')),
            expire_date=parse_datetime_value(data.get('expireDate')),
            apply_to_all_categories=apply_to_all_categories,
            category_id=category_id,
        )
        coupon.applicable_products.set(products)
        if customer == Coupon.CUSTOMER_SPECIFIC:
            coupon.specific_customers.set(Customer.objects.filter(pk__in=parse_id_list(data, 'specificCustomers')))

        logger.info(f"Coupon {coupon.code} created by {coupon.creator_type} {coupon.creator_id}")
        return coupon

    @staticmethod
    def get_coupon(coupon_id) -> Coupon:
        try:
            return Coupon.objects.prefetch_related('applicable_products', 'specific_customers').get(pk=coupon_id)
        except (Coupon.DoesNotExist, ValueError):
            raise NotFoundError('Coupon not found')

    @staticmethod
    def list_coupons(creator_type=None, apply_to_all_products=None, category_id=None):
        queryset = Coupon.objects.prefetch_related('applicable_products', 'specific_customers')
        if creator_type:
            queryset = queryset.filter(creator_type=creator_type)
        if apply_to_all_products is not None:
            queryset = queryset.filter(apply_to_all_products=apply_to_all_products)
        if category_id:
            queryset = queryset.filter(category_id=category_id)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def update_status(coupon: Coupon, status: bool) -> Coupon:
        coupon.status = status
        coupon.save(update_fields=['status', 'updated_at'])
        audit_logger.info(f"Coupon {coupon.id} status set to {status}")
        return coupon

    @staticmethod
    def update_coupon(coupon: Coupon, data) -> Coupon:
        serializer = CouponUpdateSerializer(coupon, data=data, partial=True)
        if not serializer.is_valid():
            raise ServiceError('Validation error', errors=serializer.errors)
        return serializer.save()

    @staticmethod
    def delete_coupon(coupon: Coupon):
        coupon_id = coupon.id
        coupon.delete()
        audit_logger.info(f"Coupon {coupon_id} deleted")
