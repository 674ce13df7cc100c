"""
Deal of the day views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, list_response, server_error, service_error_response
)
from ..serializers import DealOfTheDaySerializer, DealStatusSerializer
from ..services import DealOfTheDayService


class DealOfTheDayListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            deals = DealOfTheDayService.list_deals()
            return list_response(deals, DealOfTheDaySerializer, request, 'Deals retrieved successfully')
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            deal = DealOfTheDayService.create_deal(request.data)
            return success_response(
                DealOfTheDaySerializer(deal).data, 'Deal of the Day added successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class DealOfTheDayDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            deal = DealOfTheDayService.get_deal(pk)
            return success_response(DealOfTheDaySerializer(deal).data, 'Deal retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            deal = DealOfTheDayService.update_deal(DealOfTheDayService.get_deal(pk), request.data)
            return success_response(DealOfTheDaySerializer(deal).data, 'Deal of the Day updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            DealOfTheDayService.delete_deal(DealOfTheDayService.get_deal(pk))
            return success_response(None, 'Deal deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class DealOfTheDayStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = DealStatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Status must be Active or Expired', serializer.errors)
            deal = DealOfTheDayService.update_status(
                DealOfTheDayService.get_deal(pk), serializer.validated_data['status']
            )
            return success_response(DealOfTheDaySerializer(deal).data, 'Deal status updated')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch
