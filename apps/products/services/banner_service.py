"""
Banner service.
"""
import logging

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image, delete_image, delete_image_by_url
from ..models import Banner
from ..serializers import BannerWriteSerializer

audit_logger = logging.getLogger('audit')

BANNER_IMAGE_FOLDER = 'banners'


class BannerService:
    """Service class for storefront banners"""

    @staticmethod
    def get_banner(banner_id) -> Banner:
        try:
            return Banner.objects.get(pk=banner_id)
        except (Banner.DoesNotExist, ValueError):
            raise NotFoundError('Banner not found')

    @staticmethod
    def list_banners(banner_type=None, published=None):
        queryset = Banner.objects.all()
        if banner_type:
            queryset = queryset.filter(banner_type=banner_type)
        if published is not None:
            queryset = queryset.filter(is_published=published)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def create_banner(data, image_file) -> Banner:
        if image_file is None:
            raise ServiceError('Banner image is required')

        serializer = BannerWriteSerializer(data=data)
        if not serializer.is_valid():
            raise ServiceError('Invalid banner data', errors=serializer.errors)

        uploaded = upload_image(image_file, BANNER_IMAGE_FOLDER)
        try:
            return serializer.save(image_url=uploaded.get('secure_url', ''))
        except Exception:
            if uploaded.get('public_id'):
                delete_image(uploaded['public_id'])
            raise

    @staticmethod
    def update_banner(banner: Banner, data, image_file=None) -> Banner:
        serializer = BannerWriteSerializer(banner, data=data, partial=True)
        if not serializer.is_valid():
            raise ServiceError('Invalid banner data', errors=serializer.errors)

        extra = {}
        old_image = None
        if image_file is not None:
            uploaded = upload_image(image_file, BANNER_IMAGE_FOLDER)
            extra['image_url'] = uploaded.get('secure_url', '')
            old_image = banner.image_url

        banner = serializer.save(**extra)
        if old_image:
            delete_image_by_url(old_image)
        return banner

    @staticmethod
    def toggle_publish(banner: Banner) -> Banner:
        banner.is_published = not banner.is_published
        banner.save(update_fields=['is_published', 'updated_at'])
        return banner

    @staticmethod
    def delete_banner(banner: Banner):
        if banner.image_url:
            delete_image_by_url(banner.image_url)
        banner_id = banner.id
        banner.delete()
        audit_logger.info(f"Banner {banner_id} deleted")
