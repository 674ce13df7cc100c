"""
Product service for creation, update, approval and listing operations.
"""
import json
import logging

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image, delete_image
from ..models import Product
from ..serializers import ProductWriteSerializer

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

PRODUCT_IMAGE_FOLDER = 'products'

NESTED_BLOCKS = ('generalInfo', 'settings', 'pricing', 'images', 'seo')


def _block(payload, key):
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


class ProductService:
    """Service for product creation and update operations"""

    @staticmethod
    def normalize_payload(data):
        """
        Turn request data into a plain dict of nested blocks.

        Multipart requests carry each block as a JSON string; those are
        decoded here so the serializer sees objects.
        """
        if hasattr(data, 'dict'):
            payload = data.dict()
        else:
            payload = dict(data)

        for key in NESTED_BLOCKS:
            value = payload.get(key)
            if isinstance(value, str):
                try:
                    payload[key] = json.loads(value) if value.strip() else {}
                except ValueError:
                    raise ServiceError(f'{key} must be a JSON object')
        return payload

    @staticmethod
    def missing_required_fields(payload, has_thumbnail_file=False):
        general_info = _block(payload, 'generalInfo')
        pricing = _block(payload, 'pricing')
        images = _block(payload, 'images')

        missing = []
        if not general_info.get('productSKU'):
            missing.append('productSKU')
        if not has_thumbnail_file and not images.get('productThumbnail'):
            missing.append('productThumbnail')
        if not payload.get('productTitle'):
            missing.append('productTitle')
        if pricing.get('unitPrice') in (None, ''):
            missing.append('unitPrice')
        return missing

    @staticmethod
    def _upload_images(payload, thumbnail_file, additional_files):
        """Upload sent files and point the images block at them; returns public ids."""
        uploaded_ids = []
        images = dict(_block(payload, 'images'))
        if thumbnail_file is not None:
            result = upload_image(thumbnail_file, PRODUCT_IMAGE_FOLDER)
            uploaded_ids.append(result.get('public_id'))
            images['productThumbnail'] = result.get('secure_url', '')
        if additional_files:
            urls = list(images.get('additionalImages') or [])
            for image_file in additional_files:
                result = upload_image(image_file, PRODUCT_IMAGE_FOLDER)
                uploaded_ids.append(result.get('public_id'))
                urls.append(result.get('secure_url', ''))
            images['additionalImages'] = urls
        if images:
            payload['images'] = images
        return [public_id for public_id in uploaded_ids if public_id]

    @staticmethod
    def _discard_uploads(public_ids):
        for public_id in public_ids:
            delete_image(public_id)

    @staticmethod
    def create_product(data, thumbnail_file=None, additional_files=None) -> Product:
        """
        Create a product from the nested request payload.

        Raises:
            ServiceError: missing required fields, duplicate SKU or invalid data
        """
        payload = ProductService.normalize_payload(data)

        missing = ProductService.missing_required_fields(payload, thumbnail_file is not None)
        if missing:
            raise ServiceError('Missing required fields', errors={'missingFields': missing})

        sku = payload['generalInfo']['productSKU']
        if Product.objects.filter(sku=sku).exists():
            raise ServiceError('Duplicate productSKU. Please use a unique SKU.')

        uploaded_ids = ProductService._upload_images(payload, thumbnail_file, additional_files)
        serializer = ProductWriteSerializer(data=payload)
        if not serializer.is_valid():
            ProductService._discard_uploads(uploaded_ids)
            raise ServiceError('Invalid product data', errors=serializer.errors)

        try:
            product = serializer.save()
        except Exception:
            ProductService._discard_uploads(uploaded_ids)
            raise
        logger.info(f"Product {product.id} created with SKU {product.sku}")
        return product

    @staticmethod
    def update_product(product: Product, data, thumbnail_file=None, additional_files=None) -> Product:
        """Partial update through the allow-listed product serializer"""
        payload = ProductService.normalize_payload(data)
        uploaded_ids = ProductService._upload_images(payload, thumbnail_file, additional_files)

        serializer = ProductWriteSerializer(product, data=payload, partial=True)
        if not serializer.is_valid():
            ProductService._discard_uploads(uploaded_ids)
            raise ServiceError('Invalid product data', errors=serializer.errors)
        return serializer.save()

    @staticmethod
    def get_product(product_id) -> Product:
        try:
            return Product.objects.select_related(
                'seller', 'category', 'sub_category', 'sub_sub_category', 'brand'
            ).get(pk=product_id)
        except (Product.DoesNotExist, ValueError):
            raise NotFoundError('Product not found')

    @staticmethod
    def list_products(keyword='', product_status=None):
        queryset = Product.objects.select_related(
            'seller', 'category', 'sub_category', 'sub_sub_category', 'brand'
        )
        if keyword:
            queryset = queryset.filter(title__icontains=keyword)
        if product_status:
            queryset = queryset.filter(product_status=product_status)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def list_approved_products(keyword=''):
        return ProductService.list_products(keyword, Product.STATUS_APPROVED)

    @staticmethod
    def list_seller_products(seller_id):
        """Products of one seller; no products answers 404"""
        products = ProductService.list_products().filter(seller_id=seller_id)
        if not products.exists():
            raise NotFoundError('No products found for this seller')
        return products

    @staticmethod
    def delete_product(product: Product):
        product_id = product.id
        product.delete()
        audit_logger.info(f"Product {product_id} deleted")

    @staticmethod
    def approve_product(product: Product) -> Product:
        product.product_status = Product.STATUS_APPROVED
        product.save(update_fields=['product_status', 'updated_at'])
        audit_logger.info(f"Product {product.id} approved")
        return product

    @staticmethod
    def toggle_featured(product: Product) -> Product:
        product.is_featured = not product.is_featured
        product.save(update_fields=['is_featured', 'updated_at'])
        return product
