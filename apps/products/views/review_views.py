"""
Customer review views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, paginated_response, server_error, service_error_response
)
from ..serializers import (
    CustomerReviewSerializer, CustomerReviewCreateSerializer,
    CustomerReviewUpdateSerializer, ReviewStatusSerializer
)
from ..services import ReviewService


class ReviewListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            reviews = ReviewService.list_reviews(
                request.GET.get('productId') or None,
                request.GET.get('customerId') or None,
            )
            return paginated_response(reviews, CustomerReviewSerializer, request, 'Reviews retrieved successfully')
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            serializer = CustomerReviewCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid review data', serializer.errors)
            review = ReviewService.create_review(serializer.validated_data)
            return success_response(
                CustomerReviewSerializer(review).data, 'Review created successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class ReviewDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            review = ReviewService.get_review(pk)
            return success_response(CustomerReviewSerializer(review).data, 'Review retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            review = ReviewService.get_review(pk)
            serializer = CustomerReviewUpdateSerializer(review, data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid review data', serializer.errors)
            review = serializer.save()
            return success_response(CustomerReviewSerializer(review).data, 'Review updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            ReviewService.delete_review(ReviewService.get_review(pk))
            return success_response(None, 'Review deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class ReviewStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = ReviewStatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('status must be a boolean', serializer.errors)
            review = ReviewService.set_status(ReviewService.get_review(pk), serializer.validated_data['status'])
            return success_response(CustomerReviewSerializer(review).data, 'Review status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
