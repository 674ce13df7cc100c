"""
Category taxonomy service: categories, sub-categories and sub-sub-categories.
"""
import logging
from django.db import IntegrityError

from apps.common.exceptions import NotFoundError, ServiceError
from apps.common.storage import upload_image, delete_image_by_url, public_id_from_url, delete_image
from ..models import CatalogStatus, Category, SubCategory, SubSubCategory

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('audit')

CATEGORY_LOGO_FOLDER = 'categories'

CATEGORY_EXPORT_COLUMNS = [
    ('_id', 'id'),
    ('name', 'name'),
    ('priority', 'priority'),
    ('logo', 'logo'),
    ('status', 'status'),
    ('createdAt', 'created_at'),
    ('updatedAt', 'updated_at'),
]

SUB_CATEGORY_EXPORT_COLUMNS = [
    ('_id', 'id'),
    ('Subcategory Name', 'name'),
    ('Main Category Name', 'category_name'),
    ('Priority', 'priority'),
    ('Created At', 'created_at'),
    ('Updated At', 'updated_at'),
]

SUB_SUB_CATEGORY_EXPORT_COLUMNS = [
    ('_id', 'id'),
    ('Name', 'name'),
    ('Subcategory Name', 'sub_category_name'),
    ('Main Category Name', 'category_name'),
    ('Priority', 'priority'),
    ('Created At', 'created_at'),
    ('Updated At', 'updated_at'),
]


def _parse_parent_id(value, label):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ServiceError(f'A valid {label} id is required')


class CategoryService:
    """Service class for top-level categories"""

    @staticmethod
    def get_category(category_id) -> Category:
        try:
            return Category.objects.get(pk=category_id)
        except (Category.DoesNotExist, ValueError):
            raise NotFoundError('Category not found')

    @staticmethod
    def list_categories(keyword=''):
        queryset = Category.objects.all()
        if keyword:
            queryset = queryset.filter(name__icontains=keyword)
        return queryset.order_by('priority', 'id')

    @staticmethod
    def create_category(validated_data, logo_file=None) -> Category:
        """
        Create a category, uploading the logo first when one is sent.

        A failed save removes the uploaded logo again.
        """
        uploaded = None
        if logo_file is not None:
            uploaded = upload_image(logo_file, CATEGORY_LOGO_FOLDER)
            validated_data['logo'] = uploaded.get('secure_url', '')

        try:
            category = Category.objects.create(**validated_data)
        except Exception as e:
            if uploaded:
                delete_image(uploaded.get('public_id') or public_id_from_url(validated_data['logo']))
            if isinstance(e, IntegrityError):
                raise ServiceError('A category with this name already exists')
            raise
        return category

    @staticmethod
    def update_category(category: Category, validated_data, logo_file=None) -> Category:
        old_logo = None
        if logo_file is not None:
            uploaded = upload_image(logo_file, CATEGORY_LOGO_FOLDER)
            old_logo = category.logo
            validated_data['logo'] = uploaded.get('secure_url', '')

        for attr, value in validated_data.items():
            setattr(category, attr, value)
        category.save()

        if old_logo:
            delete_image_by_url(old_logo)
        return category

    @staticmethod
    def delete_category(category: Category):
        """
        Remove the logo from the image store, then the record.

        Logo deletion is best effort; the record is deleted either way.
        """
        if category.logo:
            delete_image_by_url(category.logo)
        category_id = category.id
        category.delete()
        audit_logger.info(f"Category {category_id} deleted")

    @staticmethod
    def set_status(category: Category, status) -> Category:
        category.status = status
        category.save(update_fields=['status', 'updated_at'])
        audit_logger.info(f"Category {category.id} status set to {status}")
        return category

    @staticmethod
    def export_rows():
        """Export rows ordered by id"""
        return [
            {
                'id': category.id,
                'name': category.name,
                'priority': category.priority,
                'logo': category.logo,
                'status': category.status,
                'created_at': category.created_at.isoformat() if category.created_at else '',
                'updated_at': category.updated_at.isoformat() if category.updated_at else '',
            }
            for category in Category.objects.order_by('id')
        ]


class SubCategoryService:
    """Service class for second-level categories"""

    @staticmethod
    def get_sub_category(sub_category_id) -> SubCategory:
        try:
            return SubCategory.objects.select_related('category').get(pk=sub_category_id)
        except (SubCategory.DoesNotExist, ValueError):
            raise NotFoundError('SubCategory not found')

    @staticmethod
    def list_sub_categories(keyword=''):
        queryset = SubCategory.objects.select_related('category')
        if keyword:
            queryset = queryset.filter(name__icontains=keyword)
        return queryset.order_by('priority', 'id')

    @staticmethod
    def list_by_category(category_id):
        """Sub-categories of one category; a missing or malformed id answers 400"""
        if category_id in (None, ''):
            raise ServiceError('Category id is required')
        category_id = _parse_parent_id(category_id, 'category')
        return SubCategory.objects.select_related('category').filter(
            category_id=category_id
        ).order_by('priority', 'id')

    @staticmethod
    def create_sub_category(data) -> SubCategory:
        category = CategoryService.get_category(data['categoryId'])
        return SubCategory.objects.create(
            name=data['name'],
            category=category,
            priority=data.get('priority', 0),
            status=data.get('status') or CatalogStatus.ACTIVE,
        )

    @staticmethod
    def update_sub_category(sub_category: SubCategory, data) -> SubCategory:
        if 'categoryId' in data:
            sub_category.category = CategoryService.get_category(data['categoryId'])
        for field in ('name', 'priority', 'status'):
            if field in data:
                setattr(sub_category, field, data[field])
        sub_category.save()
        return sub_category

    @staticmethod
    def delete_sub_category(sub_category: SubCategory):
        sub_category_id = sub_category.id
        sub_category.delete()
        audit_logger.info(f"SubCategory {sub_category_id} deleted")

    @staticmethod
    def set_status(sub_category: SubCategory, status) -> SubCategory:
        sub_category.status = status
        sub_category.save(update_fields=['status', 'updated_at'])
        return sub_category

    @staticmethod
    def export_rows():
        return [
            {
                'id': sub_category.id,
                'name': sub_category.name or 'N/A',
                'category_name': sub_category.category.name if sub_category.category_id else 'N/A',
                'priority': sub_category.priority,
                'created_at': sub_category.created_at.isoformat() if sub_category.created_at else '',
                'updated_at': sub_category.updated_at.isoformat() if sub_category.updated_at else '',
            }
            for sub_category in SubCategory.objects.select_related('category').order_by('id')
        ]


class SubSubCategoryService:
    """Service class for third-level categories"""

    @staticmethod
    def get_sub_sub_category(sub_sub_category_id) -> SubSubCategory:
        try:
            return SubSubCategory.objects.select_related('category', 'sub_category').get(pk=sub_sub_category_id)
        except (SubSubCategory.DoesNotExist, ValueError):
            raise NotFoundError('SubSubCategory not found')

    @staticmethod
    def list_sub_sub_categories(keyword=''):
        queryset = SubSubCategory.objects.select_related('category', 'sub_category')
        if keyword:
            queryset = queryset.filter(name__icontains=keyword)
        return queryset.order_by('priority', 'id')

    @staticmethod
    def list_by_sub_category(sub_category_id):
        if sub_category_id in (None, ''):
            raise ServiceError('SubCategory id is required')
        sub_category_id = _parse_parent_id(sub_category_id, 'sub category')
        return SubSubCategory.objects.select_related('category', 'sub_category').filter(
            sub_category_id=sub_category_id
        ).order_by('priority', 'id')

    @staticmethod
    def create_sub_sub_category(data) -> SubSubCategory:
        sub_category = SubCategoryService.get_sub_category(data['subCategoryId'])
        category = CategoryService.get_category(data['categoryId'])
        return SubSubCategory.objects.create(
            name=data['name'],
            sub_category=sub_category,
            category=category,
            priority=data.get('priority', 0),
            status=data.get('status') or CatalogStatus.ACTIVE,
        )

    @staticmethod
    def update_sub_sub_category(sub_sub_category: SubSubCategory, data) -> SubSubCategory:
        if 'subCategoryId' in data:
            sub_sub_category.sub_category = SubCategoryService.get_sub_category(data['subCategoryId'])
        if 'categoryId' in data:
            sub_sub_category.category = CategoryService.get_category(data['categoryId'])
        for field in ('name', 'priority', 'status'):
            if field in data:
                setattr(sub_sub_category, field, data[field])
        sub_sub_category.save()
        return sub_sub_category

    @staticmethod
    def delete_sub_sub_category(sub_sub_category: SubSubCategory):
        sub_sub_category_id = sub_sub_category.id
        sub_sub_category.delete()
        audit_logger.info(f"SubSubCategory {sub_sub_category_id} deleted")

    @staticmethod
    def set_status(sub_sub_category: SubSubCategory, status) -> SubSubCategory:
        sub_sub_category.status = status
        sub_sub_category.save(update_fields=['status', 'updated_at'])
        return sub_sub_category

    @staticmethod
    def export_rows():
        return [
            {
                'id': item.id,
                'name': item.name or 'N/A',
                'sub_category_name': item.sub_category.name if item.sub_category_id else 'N/A',
                'category_name': item.category.name if item.category_id else 'N/A',
                'priority': item.priority,
                'created_at': item.created_at.isoformat() if item.created_at else '',
                'updated_at': item.updated_at.isoformat() if item.updated_at else '',
            }
            for item in SubSubCategory.objects.select_related('category', 'sub_category').order_by('id')
        ]
