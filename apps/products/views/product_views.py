"""
Product list, detail and moderation views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.utils import (
    success_response, error_response, paginated_response, list_response,
    server_error, service_error_response
)
from ..serializers import ProductSerializer
from ..services import ProductService, CatalogImportService

logger = logging.getLogger(__name__)


class ProductListCreateView(APIView):
    """
    GET  - paginated product list with optional ``search`` and ``productStatus``
    POST - create a product; ``productThumbnail`` may be an upload or a URL
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            products = ProductService.list_products(
                request.GET.get('search', '').strip(),
                request.GET.get('productStatus') or None,
            )
            return paginated_response(products, ProductSerializer, request, 'Products retrieved successfully')
        except Exception as e:
            logger.error(f"Error fetching products: {e}")
            return server_error(e)

    def post(self, request):
        try:
            product = ProductService.create_product(
                request.data,
                request.FILES.get('productThumbnail'),
                request.FILES.getlist('additionalImages'),
            )
            return success_response(
                ProductSerializer(product).data, 'Product created successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating product: {e}")
            return server_error(e)


class ProductDetailView(APIView):
    """Get, update or delete one product"""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            product = ProductService.get_product(pk)
            return success_response(ProductSerializer(product).data, 'Product retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            product = ProductService.get_product(pk)
            product = ProductService.update_product(
                product,
                request.data,
                request.FILES.get('productThumbnail'),
                request.FILES.getlist('additionalImages'),
            )
            return success_response(ProductSerializer(product).data, 'Product updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating product {pk}: {e}")
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            product = ProductService.get_product(pk)
            ProductService.delete_product(product)
            return success_response(None, 'Product deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error deleting product {pk}: {e}")
            return server_error(e)


class ProductApproveView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            product = ProductService.approve_product(ProductService.get_product(pk))
            return success_response(ProductSerializer(product).data, 'Product approved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    post = patch


class ProductFeaturedToggleView(APIView):
    """Flip ``isFeatured``"""
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            product = ProductService.toggle_featured(ProductService.get_product(pk))
            return success_response(
                {'id': product.id, 'isFeatured': product.is_featured},
                'Product featured status updated successfully'
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class ApprovedProductListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            products = ProductService.list_approved_products(request.GET.get('search', '').strip())
            return list_response(products, ProductSerializer, request, 'Approved products retrieved successfully')
        except Exception as e:
            return server_error(e)


class SellerProductListView(APIView):
    """Products belonging to one seller"""
    permission_classes = [IsAuthenticated]

    def get(self, request, seller_id):
        try:
            products = ProductService.list_seller_products(seller_id)
            return list_response(products, ProductSerializer, request, 'Seller products retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class ProductImportView(APIView):
    """
    Bulk import products from a spreadsheet.

    ``sellerId`` in the form assigns rows that carry no ``seller`` column.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            uploaded_file = request.FILES.get('file') or request.FILES.get('product-file')
            if uploaded_file is None:
                return error_response('No file uploaded')
            result = CatalogImportService.import_products(uploaded_file, request.data.get('sellerId'))
            return success_response(result, 'Bulk import completed', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error importing products: {e}")
            return server_error(e)
