"""
Flash deal views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, list_response, server_error, service_error_response
)
from ..serializers import (
    FlashDealSerializer, FlashDealDetailSerializer, FlashDealProductsSerializer, FlashDealPublishSerializer
)
from ..services import FlashDealService

logger = logging.getLogger(__name__)


class FlashDealListCreateView(APIView):
    """List flash deals or create one from a multipart form with ``bannerImage``"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            deals = FlashDealService.list_flash_deals()
            return list_response(deals, FlashDealSerializer, request, 'Flash deals retrieved successfully')
        except Exception as e:
            logger.error(f"Error fetching flash deals: {e}")
            return server_error(e)

    def post(self, request):
        try:
            deal = FlashDealService.create_flash_deal(request.data, request.FILES.get('bannerImage'))
            return success_response(
                FlashDealSerializer(deal).data, 'Flash deal created successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating flash deal: {e}")
            return server_error(e)


class FlashDealDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            deal = FlashDealService.get_flash_deal(pk)
            return success_response(FlashDealDetailSerializer(deal).data, 'Flash deal retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            deal = FlashDealService.get_flash_deal(pk)
            deal = FlashDealService.update_flash_deal(deal, request.data, request.FILES.get('bannerImage'))
            return success_response(FlashDealSerializer(deal).data, 'Flash deal updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating flash deal {pk}: {e}")
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            FlashDealService.delete_flash_deal(FlashDealService.get_flash_deal(pk))
            return success_response(None, 'Flash Deal deleted successfully.')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error deleting flash deal {pk}: {e}")
            return server_error(e)


class FlashDealPublishView(APIView):
    """Set ``isPublished`` from the body, or flip it when the body omits it"""
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = FlashDealPublishSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('isPublished must be a boolean', serializer.errors)
            deal = FlashDealService.set_published(
                FlashDealService.get_flash_deal(pk), serializer.validated_data.get('isPublished')
            )
            return success_response(FlashDealSerializer(deal).data, 'Flash Deal status updated')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch


class FlashDealProductsView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        try:
            serializer = FlashDealProductsSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('productIds must be a non-empty list', serializer.errors)
            deal = FlashDealService.get_flash_deal(pk)
            deal = FlashDealService.add_products(deal, serializer.validated_data['productIds'])
            return success_response(FlashDealSerializer(deal).data, 'Products added successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error adding products to flash deal {pk}: {e}")
            return server_error(e)


class FlashDealProductRemoveView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, pk, product_id):
        try:
            deal = FlashDealService.remove_product(FlashDealService.get_flash_deal(pk), product_id)
            return success_response(FlashDealSerializer(deal).data, 'Product removed successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
