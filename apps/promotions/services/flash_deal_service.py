"""
Flash deal service.

Banners must be 5:1; the dimensions are read back from the image store after
upload and a banner outside the tolerance is deleted again.
"""
import logging

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image, delete_image, delete_image_by_url, get_image_resource
from apps.common.validators import parse_datetime_value, validate_aspect_ratio
from apps.products.models import Product
from ..models import FlashDeal
from .coupon_service import parse_id_list

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

FLASH_DEAL_IMAGE_FOLDER = 'flash-deals'
BANNER_RATIO = 5
BANNER_RATIO_TOLERANCE = 0.1


class FlashDealService:
    """Service class for flash deals"""

    @staticmethod
    def upload_banner(banner_file):
        """Upload a banner and check its aspect ratio; returns ``(url, public_id)``"""
        uploaded = upload_image(banner_file, FLASH_DEAL_IMAGE_FOLDER)
        public_id = uploaded.get('public_id')
        resource = get_image_resource(public_id)
        if not validate_aspect_ratio(
            resource.get('width'), resource.get('height'), BANNER_RATIO, BANNER_RATIO_TOLERANCE
        ):
            delete_image(public_id)
            raise ServiceError('Image must have a 5:1 aspect ratio.')
        return uploaded.get('secure_url', ''), public_id

    @staticmethod
    def get_flash_deal(deal_id) -> FlashDeal:
        try:
            return FlashDeal.objects.prefetch_related('products__seller').get(pk=deal_id)
        except (FlashDeal.DoesNotExist, ValueError):
            raise NotFoundError('Flash deal not found')

    @staticmethod
    def list_flash_deals():
        return FlashDeal.objects.prefetch_related('products').order_by('-created_at', '-id')

    @staticmethod
    def create_flash_deal(data, banner_file) -> FlashDeal:
        title = data.get('title')
        if not title or not data.get('startDate') or not data.get('endDate'):
            raise ServiceError('Title, Start Date, and End Date are required.')

        start = parse_datetime_value(data.get('startDate'))
        end = parse_datetime_value(data.get('endDate'))
        if start is None or end is None:
            raise ServiceError('Invalid date format for startDate or endDate.')
        if start >= end:
            raise ServiceError('Start date must be before the end date.')
        if banner_file is None:
            raise ServiceError('Banner image is required.')

        banner_url, public_id = FlashDealService.upload_banner(banner_file)
        products = Product.objects.filter(pk__in=parse_id_list(data, 'products'))

        deal = FlashDeal.objects.create(
            title=title,
            start_date=start,
            end_date=end,
            banner_image=banner_url,
            banner_public_id=public_id or '',
            status=FlashDeal.STATUS_ACTIVE,
            is_published=True,
        )
        if products:
            deal.add_products(products)
        logger.info(f"Flash deal {deal.id} created")
        return deal

    @staticmethod
    def update_flash_deal(deal: FlashDeal, data, banner_file=None) -> FlashDeal:
        start = deal.start_date
        end = deal.end_date
        if data.get('startDate'):
            start = parse_datetime_value(data.get('startDate'))
            if start is None:
                raise ServiceError('Invalid start date format.')
        if data.get('endDate'):
            end = parse_datetime_value(data.get('endDate'))
            if end is None:
                raise ServiceError('Invalid end date format.')
        if start >= end:
            raise ServiceError('Start date must be before the end date.')

        old_banner = None
        if banner_file is not None:
            banner_url, public_id = FlashDealService.upload_banner(banner_file)
            old_banner = (deal.banner_public_id, deal.banner_image)
            deal.banner_image = banner_url
            deal.banner_public_id = public_id or ''

        if data.get('title'):
            deal.title = data.get('title')
        deal.start_date = start
        deal.end_date = end
        deal.save()

        product_ids = parse_id_list(data, 'products')
        if product_ids:
            deal.products.set(Product.objects.filter(pk__in=product_ids))
            deal.active_products = deal.products.count()
            deal.save(update_fields=['active_products', 'updated_at'])

        if old_banner:
            old_public_id, old_url = old_banner
            if old_public_id:
                delete_image(old_public_id)
            else:
                delete_image_by_url(old_url)
        return deal

    @staticmethod
    def set_published(deal: FlashDeal, is_published=None) -> FlashDeal:
        """Set ``is_published`` when given, otherwise flip it"""
        deal.is_published = (not deal.is_published) if is_published is None else is_published
        deal.save(update_fields=['is_published', 'updated_at'])
        return deal

    @staticmethod
    def add_products(deal: FlashDeal, product_ids) -> FlashDeal:
        existing = set(deal.products.values_list('id', flat=True))
        duplicates = [product_id for product_id in product_ids if product_id in existing]
        if duplicates:
            raise ServiceError(
                f"Product with ID {', '.join(str(pid) for pid in duplicates)} already exists in the flash deal."
            )

        found = set(Product.objects.filter(pk__in=product_ids).values_list('id', flat=True))
        missing = [product_id for product_id in product_ids if product_id not in found]
        if missing:
            raise NotFoundError(f"Product not found: {', '.join(str(pid) for pid in missing)}")

        deal.add_products(found)
        return deal

    @staticmethod
    def remove_product(deal: FlashDeal, product_id) -> FlashDeal:
        deal.remove_product(product_id)
        return deal

    @staticmethod
    def delete_flash_deal(deal: FlashDeal):
        if deal.banner_public_id:
            delete_image(deal.banner_public_id)
        elif deal.banner_image:
            delete_image_by_url(deal.banner_image)
        deal_id = deal.id
        deal.delete()
        audit_logger.info(f"Flash deal {deal_id} deleted")
