"""
Bulk catalog import from spreadsheets.

Each importer validates rows one by one, skips rows whose key already exists
(in the database or earlier in the same file), and inserts the survivors in a
single ``bulk_create``.
"""
import logging

from apps.common.imports import read_spreadsheet
from apps.common.utils import parse_bool
from ..models import CatalogStatus, Category, SubCategory, SubSubCategory, Brand, Product
from ..serializers import ProductWriteSerializer

logger = logging.getLogger(__name__)

SEO_FLAGS = ('index', 'noIndex', 'noFollow', 'noArchive', 'noSnippet', 'noImageIndex')
SEO_LIMITS = ('maxSnippet', 'maxVideoPreview', 'maxImagePreview')


def _text(value):
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _int(value, default=0):
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def _status(value, default=CatalogStatus.ACTIVE):
    if value in (None, ''):
        return default
    return CatalogStatus.ACTIVE if parse_bool(value) else CatalogStatus.INACTIVE


def _summary(created, skipped, failed):
    return {
        'created': created,
        'skipped': skipped,
        'failed': failed,
    }


class CatalogImportService:
    """Spreadsheet importers for the taxonomy, brands and products"""

    @staticmethod
    def import_categories(uploaded_file):
        """Rows: ``name``, ``priority``, ``logo``, ``isActive``"""
        rows = read_spreadsheet(uploaded_file)
        existing = set(Category.objects.values_list('name', flat=True))
        to_create, skipped, failed = [], [], []

        for number, row in enumerate(rows, start=2):
            name = _text(row.get('name'))
            if not name:
                failed.append({'row': number, 'error': 'name is required'})
                continue
            if name in existing:
                skipped.append({'row': number, 'name': name})
                continue
            existing.add(name)
            to_create.append(Category(
                name=name,
                priority=_int(row.get('priority')),
                logo=_text(row.get('logo')),
                status=_status(row.get('isActive')),
            ))

        Category.objects.bulk_create(to_create)
        logger.info(f"Imported {len(to_create)} categories, skipped {len(skipped)}, failed {len(failed)}")
        return _summary(len(to_create), skipped, failed)

    @staticmethod
    def import_sub_categories(uploaded_file):
        """Rows: ``name``, ``categoryName``, ``priority``, ``isActive``"""
        rows = read_spreadsheet(uploaded_file)
        categories = {category.name: category for category in Category.objects.all()}
        existing = set(SubCategory.objects.values_list('category_id', 'name'))
        to_create, skipped, failed = [], [], []

        for number, row in enumerate(rows, start=2):
            name = _text(row.get('name'))
            category = categories.get(_text(row.get('categoryName')))
            if not name:
                failed.append({'row': number, 'error': 'name is required'})
                continue
            if category is None:
                failed.append({'row': number, 'error': f"Category '{_text(row.get('categoryName'))}' not found"})
                continue
            key = (category.id, name)
            if key in existing:
                skipped.append({'row': number, 'name': name})
                continue
            existing.add(key)
            to_create.append(SubCategory(
                name=name,
                category=category,
                priority=_int(row.get('priority')),
                status=_status(row.get('isActive')),
            ))

        SubCategory.objects.bulk_create(to_create)
        return _summary(len(to_create), skipped, failed)

    @staticmethod
    def import_sub_sub_categories(uploaded_file):
        """Rows: ``name``, ``categoryName``, ``subCategoryName``, ``priority``"""
        rows = read_spreadsheet(uploaded_file)
        categories = {category.name: category for category in Category.objects.all()}
        sub_categories = {
            (sub_category.category_id, sub_category.name): sub_category
            for sub_category in SubCategory.objects.all()
        }
        existing = set(SubSubCategory.objects.values_list('sub_category_id', 'name'))
        to_create, skipped, failed = [], [], []

        for number, row in enumerate(rows, start=2):
            name = _text(row.get('name'))
            category = categories.get(_text(row.get('categoryName')))
            if not name:
                failed.append({'row': number, 'error': 'name is required'})
                continue
            if category is None:
                failed.append({'row': number, 'error': f"Category '{_text(row.get('categoryName'))}' not found"})
                continue
            sub_category = sub_categories.get((category.id, _text(row.get('subCategoryName'))))
            if sub_category is None:
                failed.append({
                    'row': number,
                    'error': f"SubCategory '{_text(row.get('subCategoryName'))}' not found"
                })
                continue
            key = (sub_category.id, name)
            if key in existing:
                skipped.append({'row': number, 'name': name})
                continue
            existing.add(key)
            to_create.append(SubSubCategory(
                name=name,
                category=category,
                sub_category=sub_category,
                priority=_int(row.get('priority')),
                status=_status(row.get('isActive')),
            ))

        SubSubCategory.objects.bulk_create(to_create)
        return _summary(len(to_create), skipped, failed)

    @staticmethod
    def import_brands(uploaded_file):
        """Rows: ``name``, ``logo``, ``isActive``"""
        rows = read_spreadsheet(uploaded_file)
        existing = set(Brand.objects.values_list('name', flat=True))
        to_create, skipped, failed = [], [], []

        for number, row in enumerate(rows, start=2):
            name = _text(row.get('name'))
            logo = _text(row.get('logo'))
            if not name or not logo:
                failed.append({'row': number, 'error': 'name and logo are required'})
                continue
            if name in existing:
                skipped.append({'row': number, 'name': name})
                continue
            existing.add(name)
            to_create.append(Brand(name=name, logo=logo, status=_status(row.get('isActive'), CatalogStatus.INACTIVE)))

        Brand.objects.bulk_create(to_create)
        return _summary(len(to_create), skipped, failed)

    @staticmethod
    def product_payload(row, seller_id=None):
        """Map one flat spreadsheet row onto the nested product payload."""
        payload = {
            'productTitle': _text(row.get('productTitle') or row.get('productName')),
            'productDescription': _text(row.get('productDescription')),
            'seller': _text(row.get('seller')) or seller_id,
            'generalInfo': {
                'category': _resolve(Category, row.get('category')),
                'subCategory': _resolve(SubCategory, row.get('subCategory')),
                'subSubCategory': _resolve(SubSubCategory, row.get('subSubCategory')),
                'brand': _resolve(Brand, row.get('brand')),
                'productType': _text(row.get('productType')),
                'unit': _text(row.get('unit')),
                'productSKU': _text(row.get('productSKU')),
            },
            'settings': {
                'manufacturer': _text(row.get('manufacturer')),
                'madeIn': _text(row.get('madeIn')),
                'fssaiLicenseNumber': _text(row.get('fssaiLicenseNumber')),
                'isReturnable': parse_bool(row.get('isReturnable')),
                'isCODAllowed': parse_bool(row.get('isCODAllowed')),
                'isCancelable': parse_bool(row.get('isCancelable')),
                'totalAllowedQuantity': _int(row.get('totalAllowedQuantity')),
            },
            'pricing': {
                'unitPrice': row.get('unitPrice'),
                'minimumOrderQty': _int(row.get('minimumOrderQty'), 1),
                'currentStockQty': _int(row.get('currentStockQty')),
                'discountType': _text(row.get('discountType')),
                'discountAmount': row.get('discountAmount') or 0,
                'taxAmount': row.get('taxAmount') or 0,
                'taxCalculation': _text(row.get('taxCalculation')),
                'shippingCost': row.get('shippingCost') or 0,
            },
            'seo': {
                'metaTitle': _text(row.get('metaTitle')),
                'metaDescription': _text(row.get('metaDescription')),
                'metaImage': _text(row.get('metaImage')),
                'indexing': _indexing(row),
            },
        }
        thumbnail = _text(row.get('productThumbnail'))
        if thumbnail:
            additional = _text(row.get('additionalImages'))
            payload['images'] = {
                'productThumbnail': thumbnail,
                'additionalImages': [url.strip() for url in additional.split(',') if url.strip()],
            }
        return payload

    @staticmethod
    def import_products(uploaded_file, seller_id=None):
        """
        Validate every row through the product serializer and insert the valid ones.

        Rows whose SKU already exists are skipped; invalid rows are reported with
        their serializer errors.
        """
        rows = read_spreadsheet(uploaded_file)
        existing = set(Product.objects.values_list('sku', flat=True))
        to_create, skipped, failed = [], [], []

        for number, row in enumerate(rows, start=2):
            payload = CatalogImportService.product_payload(row, seller_id)
            sku = payload['generalInfo']['productSKU']
            if sku and sku in existing:
                skipped.append({'row': number, 'productSKU': sku})
                continue

            serializer = ProductWriteSerializer(data=payload)
            if not serializer.is_valid():
                failed.append({'row': number, 'errors': serializer.errors})
                continue
            existing.add(sku)
            to_create.append(Product(**serializer.validated_data))

        saved = Product.objects.bulk_create(to_create)
        logger.info(f"Imported {len(saved)} products, skipped {len(skipped)}, failed {len(failed)}")
        return {
            'savedProducts': [{'id': product.id, 'productSKU': product.sku} for product in saved],
            'skippedProducts': skipped,
            'failedProducts': failed,
        }


def _resolve(model, value):
    """Resolve a taxonomy or brand reference given by id or by name."""
    text = _text(value)
    if not text:
        return None
    if text.isdigit() and model.objects.filter(pk=int(text)).exists():
        return int(text)
    match = model.objects.filter(name__iexact=text).values_list('pk', flat=True).first()
    return match if match is not None else text


def _indexing(row):
    indexing = {flag: parse_bool(row.get(flag)) for flag in SEO_FLAGS}
    for limit in SEO_LIMITS:
        indexing[limit] = _int(row.get(limit), -1) or -1
    return indexing
