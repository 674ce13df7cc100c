"""
Brand views.
"""
import logging
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.exceptions import ServiceError
from apps.common.exports import export_response
from apps.common.utils import (
    success_response, error_response, list_response, get_export_type,
    server_error, service_error_response
)
from ..serializers import BrandSerializer, BrandWriteSerializer, StatusSerializer
from ..services import BrandService, CatalogImportService
from ..services.brand_service import BRAND_EXPORT_COLUMNS

logger = logging.getLogger(__name__)


class BrandListCreateView(APIView):
    """List brands or create one; the logo upload is required"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            brands = BrandService.list_brands(request.GET.get('search', '').strip())
            return list_response(brands, BrandSerializer, request, 'Brands retrieved successfully')
        except Exception as e:
            logger.error(f"Error fetching brands: {e}")
            return server_error(e)

    def post(self, request):
        try:
            serializer = BrandWriteSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Invalid brand data', serializer.errors)

            brand = BrandService.create_brand(dict(serializer.validated_data), request.FILES.get('logo'))
            return success_response(BrandSerializer(brand).data, 'Brand created successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating brand: {e}")
            return server_error(e)


class BrandDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            brand = BrandService.get_brand(pk)
            return success_response(BrandSerializer(brand).data, 'Brand retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            brand = BrandService.get_brand(pk)
            serializer = BrandWriteSerializer(brand, data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid brand data', serializer.errors)

            brand = BrandService.update_brand(brand, dict(serializer.validated_data), request.FILES.get('logo'))
            return success_response(BrandSerializer(brand).data, 'Brand updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating brand {pk}: {e}")
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            brand = BrandService.get_brand(pk)
            BrandService.delete_brand(brand)
            return success_response(None, 'Brand deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error deleting brand {pk}: {e}")
            return server_error(e)


class BrandStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = StatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Status must be Active or Inactive', serializer.errors)
            brand = BrandService.get_brand(pk)
            brand = BrandService.set_status(brand, serializer.validated_data['status'])
            return success_response(BrandSerializer(brand).data, 'Brand status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class BrandExportView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            export_type = get_export_type(request)
            if export_type not in ('csv', 'excel'):
                return error_response('Invalid export type')

            rows = BrandService.export_rows()
            if not rows:
                return error_response('No brands found', status_code=status.HTTP_404_NOT_FOUND)
            return export_response(rows, BRAND_EXPORT_COLUMNS, export_type, 'brands', 'Brands')
        except Exception as e:
            logger.error(f"Error exporting brands: {e}")
            return server_error(e)

    get = post


class BrandImportView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            uploaded_file = request.FILES.get('file')
            if uploaded_file is None:
                return error_response('No file uploaded')
            result = CatalogImportService.import_brands(uploaded_file)
            return success_response(result, 'Brands imported successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
