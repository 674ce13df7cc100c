"""
Deal of the day service.
"""
import logging

from apps.common.exceptions import NotFoundError, ServiceError
from ..models import DealOfTheDay
from ..serializers import DealOfTheDayWriteSerializer

audit_logger = logging.getLogger('audit')


def _first_error(errors):
    for messages in errors.values():
        if messages:
            return str(messages[0])
    return 'Invalid deal data'


class DealOfTheDayService:
    """Service class for deals of the day"""

    @staticmethod
    def get_deal(deal_id) -> DealOfTheDay:
        try:
            return DealOfTheDay.objects.select_related('product').get(pk=deal_id)
        except (DealOfTheDay.DoesNotExist, ValueError):
            raise NotFoundError('Deal not found')

    @staticmethod
    def list_deals():
        return DealOfTheDay.objects.select_related('product').order_by('-created_at', '-id')

    @staticmethod
    def create_deal(data) -> DealOfTheDay:
        if not data.get('title') or not data.get('product'):
            raise ServiceError('Title and products are required')

        serializer = DealOfTheDayWriteSerializer(data=data)
        if not serializer.is_valid():
            raise ServiceError(_first_error(serializer.errors), errors=serializer.errors)
        return serializer.save()

    @staticmethod
    def update_deal(deal: DealOfTheDay, data) -> DealOfTheDay:
        serializer = DealOfTheDayWriteSerializer(deal, data=data, partial=True)
        if not serializer.is_valid():
            raise ServiceError(_first_error(serializer.errors), errors=serializer.errors)
        return serializer.save()

    @staticmethod
    def update_status(deal: DealOfTheDay, status: str) -> DealOfTheDay:
        deal.status = status
        deal.save(update_fields=['status'])
        audit_logger.info(f"Deal of the day {deal.id} status set to {status}")
        return deal

    @staticmethod
    def delete_deal(deal: DealOfTheDay):
        deal_id = deal.id
        deal.delete()
        audit_logger.info(f"Deal of the day {deal_id} deleted")
