"""
Category taxonomy views: categories, sub-categories and sub-sub-categories.
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
from ..serializers import (
    CategorySerializer, CategoryCreateSerializer, CategoryUpdateSerializer, StatusSerializer,
    SubCategorySerializer, SubCategoryWriteSerializer,
    SubSubCategorySerializer, SubSubCategoryWriteSerializer
)
from ..services import CategoryService, SubCategoryService, SubSubCategoryService, CatalogImportService
from ..services.category_service import (
    CATEGORY_EXPORT_COLUMNS, SUB_CATEGORY_EXPORT_COLUMNS, SUB_SUB_CATEGORY_EXPORT_COLUMNS
)

logger = logging.getLogger(__name__)


class CategoryListCreateView(APIView):
    """List categories or create one with an optional logo upload"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            categories = CategoryService.list_categories(request.GET.get('search', '').strip())
            return list_response(categories, CategorySerializer, request, 'Categories retrieved successfully')
        except Exception as e:
            logger.error(f"Error fetching categories: {e}")
            return server_error(e)

    def post(self, request):
        try:
            serializer = CategoryCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Name and priority are required', serializer.errors)

            category = CategoryService.create_category(
                dict(serializer.validated_data), request.FILES.get('logo')
            )
            return success_response(
                CategorySerializer(category).data, 'Category created successfully', status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating category: {e}")
            return server_error(e)


class CategoryDetailView(APIView):
    """Get, update or delete one category"""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            category = CategoryService.get_category(pk)
            return success_response(CategorySerializer(category).data, 'Category retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            category = CategoryService.get_category(pk)
            serializer = CategoryUpdateSerializer(category, data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid category data', serializer.errors)

            category = CategoryService.update_category(
                category, dict(serializer.validated_data), request.FILES.get('logo')
            )
            return success_response(CategorySerializer(category).data, 'Category updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error updating category {pk}: {e}")
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            category = CategoryService.get_category(pk)
            CategoryService.delete_category(category)
            return success_response(None, 'Category deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error deleting category {pk}: {e}")
            return server_error(e)


class CategoryStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = StatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Status must be Active or Inactive', serializer.errors)
            category = CategoryService.get_category(pk)
            category = CategoryService.set_status(category, serializer.validated_data['status'])
            return success_response(CategorySerializer(category).data, 'Category status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class CategoryExportView(APIView):
    """Download every category as csv or excel"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            export_type = get_export_type(request)
            if export_type not in ('csv', 'excel'):
                return error_response('Invalid export type')

            rows = CategoryService.export_rows()
            if not rows:
                return error_response('No categories found', status_code=status.HTTP_404_NOT_FOUND)
            return export_response(rows, CATEGORY_EXPORT_COLUMNS, export_type, 'categories', 'Categories')
        except Exception as e:
            logger.error(f"Error exporting categories: {e}")
            return server_error(e)

    get = post


class CategoryImportView(APIView):
    """Bulk import categories from an uploaded spreadsheet"""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            uploaded_file = request.FILES.get('file') or request.FILES.get('category-file')
            if uploaded_file is None:
                return error_response('No file uploaded')
            result = CatalogImportService.import_categories(uploaded_file)
            return success_response(result, 'Categories imported successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error importing categories: {e}")
            return server_error(e)


class SubCategoryListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            sub_categories = SubCategoryService.list_sub_categories(request.GET.get('search', '').strip())
            return list_response(
                sub_categories, SubCategorySerializer, request, 'Sub categories retrieved successfully'
            )
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            serializer = SubCategoryWriteSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Name and category are required', serializer.errors)
            sub_category = SubCategoryService.create_sub_category(serializer.validated_data)
            return success_response(
                SubCategorySerializer(sub_category).data,
                'Sub category created successfully',
                status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating sub category: {e}")
            return server_error(e)


class SubCategoryDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            sub_category = SubCategoryService.get_sub_category(pk)
            return success_response(SubCategorySerializer(sub_category).data, 'Sub category retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            sub_category = SubCategoryService.get_sub_category(pk)
            serializer = SubCategoryWriteSerializer(data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid sub category data', serializer.errors)
            sub_category = SubCategoryService.update_sub_category(sub_category, serializer.validated_data)
            return success_response(SubCategorySerializer(sub_category).data, 'Sub category updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            sub_category = SubCategoryService.get_sub_category(pk)
            SubCategoryService.delete_sub_category(sub_category)
            return success_response(None, 'Sub category deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubCategoryStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = StatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Status must be Active or Inactive', serializer.errors)
            sub_category = SubCategoryService.get_sub_category(pk)
            sub_category = SubCategoryService.set_status(sub_category, serializer.validated_data['status'])
            return success_response(SubCategorySerializer(sub_category).data, 'Sub category status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubCategoryByCategoryView(APIView):
    """Sub-categories under one category"""
    permission_classes = [IsAuthenticated]

    def get(self, request, category_id=None):
        try:
            category_id = category_id or request.GET.get('categoryId')
            sub_categories = SubCategoryService.list_by_category(category_id)
            serializer = SubCategorySerializer(sub_categories, many=True)
            return success_response(serializer.data, 'Sub categories retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubCategoryExportView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            export_type = get_export_type(request)
            if export_type not in ('csv', 'excel'):
                return error_response('Invalid export type')

            rows = SubCategoryService.export_rows()
            if not rows:
                return error_response('No sub categories found', status_code=status.HTTP_404_NOT_FOUND)
            return export_response(rows, SUB_CATEGORY_EXPORT_COLUMNS, export_type, 'subcategories', 'Subcategories')
        except Exception as e:
            logger.error(f"Error exporting sub categories: {e}")
            return server_error(e)

    get = post


class SubCategoryImportView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            uploaded_file = request.FILES.get('file')
            if uploaded_file is None:
                return error_response('No file uploaded')
            result = CatalogImportService.import_sub_categories(uploaded_file)
            return success_response(result, 'Sub categories imported successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubSubCategoryListCreateView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            items = SubSubCategoryService.list_sub_sub_categories(request.GET.get('search', '').strip())
            return list_response(
                items, SubSubCategorySerializer, request, 'Sub sub categories retrieved successfully'
            )
        except Exception as e:
            return server_error(e)

    def post(self, request):
        try:
            serializer = SubSubCategoryWriteSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Name, sub category and category are required', serializer.errors)
            item = SubSubCategoryService.create_sub_sub_category(serializer.validated_data)
            return success_response(
                SubSubCategorySerializer(item).data,
                'Sub sub category created successfully',
                status.HTTP_201_CREATED
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            logger.error(f"Error creating sub sub category: {e}")
            return server_error(e)


class SubSubCategoryDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        try:
            item = SubSubCategoryService.get_sub_sub_category(pk)
            return success_response(SubSubCategorySerializer(item).data, 'Sub sub category retrieved successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    def patch(self, request, pk):
        try:
            item = SubSubCategoryService.get_sub_sub_category(pk)
            serializer = SubSubCategoryWriteSerializer(data=request.data, partial=True)
            if not serializer.is_valid():
                return error_response('Invalid sub sub category data', serializer.errors)
            item = SubSubCategoryService.update_sub_sub_category(item, serializer.validated_data)
            return success_response(SubSubCategorySerializer(item).data, 'Sub sub category updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)

    put = patch

    def delete(self, request, pk):
        try:
            item = SubSubCategoryService.get_sub_sub_category(pk)
            SubSubCategoryService.delete_sub_sub_category(item)
            return success_response(None, 'Sub sub category deleted successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubSubCategoryStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        try:
            serializer = StatusSerializer(data=request.data)
            if not serializer.is_valid():
                return error_response('Status must be Active or Inactive', serializer.errors)
            item = SubSubCategoryService.get_sub_sub_category(pk)
            item = SubSubCategoryService.set_status(item, serializer.validated_data['status'])
            return success_response(SubSubCategorySerializer(item).data, 'Sub sub category status updated successfully')
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubSubCategoryBySubCategoryView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, sub_category_id=None):
        try:
            sub_category_id = sub_category_id or request.GET.get('subCategoryId')
            items = SubSubCategoryService.list_by_sub_category(sub_category_id)
            return success_response(
                SubSubCategorySerializer(items, many=True).data, 'Sub sub categories retrieved successfully'
            )
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)


class SubSubCategoryExportView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            export_type = get_export_type(request)
            if export_type not in ('csv', 'excel'):
                return error_response('Invalid export type')

            rows = SubSubCategoryService.export_rows()
            if not rows:
                return error_response('No sub sub categories found', status_code=status.HTTP_404_NOT_FOUND)
            return export_response(
                rows, SUB_SUB_CATEGORY_EXPORT_COLUMNS, export_type, 'subsubcategories', 'Subsubcategories'
            )
        except Exception as e:
            logger.error(f"Error exporting sub sub categories: {e}")
            return server_error(e)

    get = post


class SubSubCategoryImportView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            uploaded_file = request.FILES.get('file')
            if uploaded_file is None:
                return error_response('No file uploaded')
            result = CatalogImportService.import_sub_sub_categories(uploaded_file)
            return success_response(result, 'Sub sub categories imported successfully', status.HTTP_201_CREATED)
        except ServiceError as e:
            return service_error_response(e)
        except Exception as e:
            return server_error(e)
