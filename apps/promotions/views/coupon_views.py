"""
Coupon views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, list_response, parse_bool, server_error, service_error_response
)
from ..serializers import CouponSerializer, CouponStatusSerializer
from ..services import CouponService

logger = logging.getLogger(__name__)


class CouponListCreateView(APIView):
    """
    GET  - coupons, newest first; filters ``creatorType``, ``applyToAllProducts``, ``categoryId``
    POST - create a coupon; every validation problem is reported at once
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            apply_to_all = request.GET.get('applyToAllProducts')
            coupons = CouponService.list_coupons(
                request.GET.get('creatorType') or None,
                parse_bool(apply_to_all) if apply_to_all not in (None, '') else None,
                request.GET.get('categoryId') or None,
            )
            return list_response(coupons, CouponSerializer, request, 'Coupons fetched successfully')
        except Exception as e:
            logger.error(f"Error fetching coupons: {e}")
            return server_error(e)

    def post(self, request):
        try:
            coupon = CouponService.create_coupon(request.data)
            return success_response(CouponSerializer(coupon).data, 'Coupon added successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error adding coupon: {e}")
            return server_error(e)


class CouponDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            coupon = CouponService.get_coupon(pk)
            return success_response(CouponSerializer(coupon).data, 'Coupon retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            coupon = CouponService.update_coupon(CouponService.get_coupon(pk), request.data)
            return success_response(CouponSerializer(coupon).data, 'Coupon updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating coupon {pk}: {e}")
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            CouponService.delete_coupon(CouponService.get_coupon(pk))
            return success_response(None, 'Coupon deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class CouponStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = CouponStatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('status must be a boolean', serializer.errors)
            coupon = CouponService.update_status(CouponService.get_coupon(pk), serializer.validated_data['status'])
            return success_response(CouponSerializer(coupon).data, 'Coupon status updated')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch
