"""
Brand service.
"""
import logging
from django.db import IntegrityError

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image, delete_image, delete_image_by_url
from ..models import Brand

audit_logger = logging.getLogger('audit')

BRAND_LOGO_FOLDER = 'brands'

BRAND_EXPORT_COLUMNS = [
    ('SL', 'sl'),
    ('BrandLogo', 'logo'),
    ('BrandName', 'name'),
    ('TotalProducts', 'total_products'),
    ('TotalOrders', 'total_orders'),
    ('Status', 'status'),
]


class BrandService:
    """Service class for brand management"""

    @staticmethod
    def get_brand(brand_id) -> Brand:
        try:
            return Brand.objects.get(pk=brand_id)
        except (Brand.DoesNotExist, ValueError):
            raise NotFoundError('Brand not found')

    @staticmethod
    def list_brands(keyword=''):
        queryset = Brand.objects.all()
        if keyword:
            queryset = queryset.filter(name__icontains=keyword)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def create_brand(validated_data, logo_file) -> Brand:
        if logo_file is None:
            raise ServiceError('Brand logo is required')

        uploaded = upload_image(logo_file, BRAND_LOGO_FOLDER)
        validated_data['logo'] = uploaded.get('secure_url', '')
        try:
            return Brand.objects.create(**validated_data)
        except Exception as e:
            if uploaded.get('public_id'):
                delete_image(uploaded['public_id'])
            if isinstance(e, IntegrityError):
                raise ServiceError('A brand with this name already exists')
            raise

    @staticmethod
    def update_brand(brand: Brand, validated_data, logo_file=None) -> Brand:
        old_logo = None
        if logo_file is not None:
            uploaded = upload_image(logo_file, BRAND_LOGO_FOLDER)
            old_logo = brand.logo
            validated_data['logo'] = uploaded.get('secure_url', '')

        for attr, value in validated_data.items():
            setattr(brand, attr, value)
        brand.save()

        if old_logo:
            delete_image_by_url(old_logo)
        return brand

    @staticmethod
    def delete_brand(brand: Brand):
        if brand.logo:
            delete_image_by_url(brand.logo)
        brand_id = brand.id
        brand.delete()
        audit_logger.info(f"Brand {brand_id} deleted")

    @staticmethod
    def set_status(brand: Brand, status) -> Brand:
        brand.status = status
        brand.save(update_fields=['status', 'updated_at'])
        audit_logger.info(f"Brand {brand.id} status set to {status}")
        return brand

    @staticmethod
    def export_rows():
        return [
            {
                'sl': index,
                'logo': brand.logo,
                'name': brand.name,
                'total_products': brand.total_products,
                'total_orders': brand.total_orders,
                'status': brand.status,
            }
            for index, brand in enumerate(Brand.objects.order_by('id'), start=1)
        ]
