"""
Customer review service.
"""
import logging

from apps.common.exceptions import NotFoundError
from apps.users.services import CustomerService
from ..models import CustomerReview
from .product_service import ProductService

audit_logger = logging.getLogger('audit')


class ReviewService:
    """Service class for customer product reviews"""

    @staticmethod
    def get_review(review_pk) -> CustomerReview:
        try:
            return CustomerReview.objects.select_related('product', 'customer').get(pk=review_pk)
        except (CustomerReview.DoesNotExist, ValueError):
            raise NotFoundError('Review not found')

    @staticmethod
    def list_reviews(product_id=None, customer_id=None):
        queryset = CustomerReview.objects.select_related('product', 'customer')
        if product_id:
            queryset = queryset.filter(product_id=product_id)
        if customer_id:
            queryset = queryset.filter(customer_id=customer_id)
        return queryset.order_by('-created_at', '-id')

    @staticmethod
    def create_review(data) -> CustomerReview:
        """Product and customer must both exist"""
        product = ProductService.get_product(data['productId'])
        customer = CustomerService.get_customer(data['customerId'])
        return CustomerReview.objects.create(
            product=product,
            customer=customer,
            rating=data['rating'],
            review=data.get('review', ''),
            status=data.get('status', False),
        )

    @staticmethod
    def set_status(review: CustomerReview, status) -> CustomerReview:
        review.status = status
        review.save(update_fields=['status', 'updated_at'])
        return review

    @staticmethod
    def delete_review(review: CustomerReview):
        review_id = review.review_id
        review.delete()
        audit_logger.info(f"Review {review_id} deleted")
