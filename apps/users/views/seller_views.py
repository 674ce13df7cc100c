"""
Admin seller management views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, paginated_response, server_error, service_error_response
)
from ..serializers import (
    SellerSerializer, SellerCreateSerializer, SellerUpdateSerializer, SellerStatusSerializer
)
from ..services import SellerService

logger = logging.getLogger(__name__)


class SellerListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            sellers = SellerService.list_sellers(
                keyword=request.GET.get('search', '').strip(),
                status=request.GET.get('status'),
            )
            return paginated_response(sellers, SellerSerializer, request, 'Sellers retrieved successfully')
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            serializer = SellerCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid seller data', serializer.errors)

            SellerService.ensure_unique_contact(
                serializer.validated_data['email'],
                serializer.validated_data['phone_number'],
            )
            seller = serializer.save()
            logger.info(f"Seller registered: {seller.id}")
            return success_response(
                {'sellerId': seller.id}, 'Seller registered successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error registering seller: {e}")
            return server_error(e)


class SellerDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            seller = SellerService.get_seller(pk)
            return success_response(SellerSerializer(seller).data, 'Seller retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            seller = SellerService.get_seller(pk)
            serializer = SellerUpdateSerializer(seller, data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid seller data', serializer.errors)
            seller = serializer.save()
            return success_response(SellerSerializer(seller).data, 'Seller updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch


class SellerStatusView(APIView):
    """Approve, block or reset a seller to pending"""
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = SellerStatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid status', serializer.errors)
            seller = SellerService.get_seller(pk)
            seller = SellerService.set_status(seller, serializer.validated_data['status'])
            return success_response(SellerSerializer(seller).data, 'Seller status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
