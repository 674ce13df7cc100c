"""
Tests for the catalog API: taxonomy, brands, products and banners.
"""
import pytest

from apps.common.storage import public_id_from_url
from apps.products.models import Category, Product, SubSubCategory
from tests.factories import (
    CategoryFactory, SubCategoryFactory, SubSubCategoryFactory, BrandFactory,
    ProductFactory, SellerFactory
)

CATALOG = '/api/catalog'


@pytest.mark.django_db
class TestCategoryAPI:

    def test_list_without_paging_returns_everything(self, api_client):
        CategoryFactory.create_batch(3)

        response = api_client.get(f'{CATALOG}/categories/')

        assert response.status_code == 200
        assert response.data['data']['total'] == 3
        assert 'page' not in response.data['data']

    def test_list_with_paging(self, api_client):
        CategoryFactory.create_batch(3)

        response = api_client.get(f'{CATALOG}/categories/', {'page': 1, 'pageSize': 2})

        assert len(response.data['data']['list']) == 2
        assert response.data['data']['page']['totalPages'] == 2

    def test_create_uploads_logo(self, api_client, image_store, image_file):
        response = api_client.post(
            f'{CATALOG}/categories/',
            {'name': 'Groceries', 'priority': 1, 'logo': image_file},
            format='multipart'
        )

        assert response.status_code == 201
        assert response.data['data']['logo'] == image_store.upload.return_value['secure_url']
        assert image_store.upload.call_args[0][1] == 'categories'

    def test_create_requires_priority(self, api_client):
        response = api_client.post(f'{CATALOG}/categories/', {'name': 'Groceries'}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Name and priority are required'

    def test_delete_removes_logo_from_image_store(self, api_client, image_store):
        category = CategoryFactory()
        expected_public_id = public_id_from_url(category.logo)

        response = api_client.delete(f'{CATALOG}/categories/{category.id}/')

        assert response.status_code == 200
        image_store.destroy.assert_called_once_with(expected_public_id)
        assert expected_public_id.startswith('categories/logo')
        assert not Category.objects.filter(pk=category.id).exists()

    def test_delete_with_unparseable_logo_still_deletes(self, api_client, image_store, caplog):
        category = CategoryFactory(logo='https://example.com/logo.png')

        response = api_client.delete(f'{CATALOG}/categories/{category.id}/')

        assert response.status_code == 200
        assert 'Failed to extract public ID from URL' in caplog.text
        image_store.destroy.assert_not_called()
        assert not Category.objects.filter(pk=category.id).exists()

    def test_missing_category(self, api_client):
        response = api_client.get(f'{CATALOG}/categories/999999/')

        assert response.status_code == 404
        assert response.data['msg'] == 'Category not found'

    def test_status_update(self, api_client):
        category = CategoryFactory(status='Active')

        response = api_client.patch(
            f'{CATALOG}/categories/{category.id}/status/', {'status': 'Inactive'}, format='json'
        )

        assert response.status_code == 200
        category.refresh_from_db()
        assert category.status == 'Inactive'

    def test_status_rejects_unknown_value(self, api_client):
        category = CategoryFactory()

        response = api_client.patch(
            f'{CATALOG}/categories/{category.id}/status/', {'status': 'Archived'}, format='json'
        )

        assert response.status_code == 400

    def test_export_is_repeatable(self, api_client):
        CategoryFactory.create_batch(2)

        first = api_client.post(f'{CATALOG}/categories/export/', {'type': 'csv'}, format='json')
        second = api_client.post(f'{CATALOG}/categories/export/', {'type': 'csv'}, format='json')

        assert first.status_code == 200
        assert first['Content-Type'] == 'text/csv'
        assert first.content == second.content
        assert first.content.decode().splitlines()[0] == '_id,name,priority,logo,status,createdAt,updatedAt'

    def test_export_rejects_unknown_type(self, api_client):
        CategoryFactory()

        response = api_client.post(f'{CATALOG}/categories/export/', {'type': 'pdf'}, format='json')

        assert response.status_code == 400

    def test_export_without_rows(self, api_client):
        response = api_client.post(f'{CATALOG}/categories/export/', {'type': 'excel'}, format='json')

        assert response.status_code == 404

    def test_import_skips_existing_names(self, api_client, csv_upload):
        CategoryFactory(name='Tea')
        upload = csv_upload(
            ['name', 'priority', 'logo', 'isActive'],
            [['Tea', 1, '', 'true'], ['Coffee', 2, '', 'false'], ['', 3, '', '']]
        )

        response = api_client.post(f'{CATALOG}/categories/import/', {'file': upload}, format='multipart')

        assert response.status_code == 201
        result = response.data['data']
        assert result['created'] == 1
        assert result['skipped'] == [{'row': 2, 'name': 'Tea'}]
        assert result['failed'] == [{'row': 4, 'error': 'name is required'}]
        assert Category.objects.get(name='Coffee').status == 'Inactive'

    def test_import_requires_file(self, api_client):
        response = api_client.post(f'{CATALOG}/categories/import/', {}, format='multipart')

        assert response.status_code == 400
        assert response.data['msg'] == 'No file uploaded'

    def test_requires_authentication(self):
        from rest_framework.test import APIClient

        response = APIClient().get(f'{CATALOG}/categories/')

        assert response.status_code == 401


@pytest.mark.django_db
class TestSubCategoryAPI:

    def test_by_category(self, api_client):
        sub_category = SubCategoryFactory()
        SubCategoryFactory()

        response = api_client.get(f'{CATALOG}/sub-categories/by-category/{sub_category.category_id}/')

        assert response.status_code == 200
        assert [item['id'] for item in response.data['data']] == [sub_category.id]

    def test_by_category_rejects_malformed_id(self, api_client):
        response = api_client.get(f'{CATALOG}/sub-categories/by-category/not-an-id/')

        assert response.status_code == 400

    def test_create_under_missing_category(self, api_client):
        response = api_client.post(
            f'{CATALOG}/sub-categories/', {'name': 'Green tea', 'categoryId': 999999}, format='json'
        )

        assert response.status_code == 404


@pytest.mark.django_db
class TestSubSubCategoryAPI:

    def test_by_sub_category(self, api_client):
        item = SubSubCategoryFactory()

        response = api_client.get(
            f'{CATALOG}/sub-sub-categories/by-sub-category/', {'subCategoryId': item.sub_category_id}
        )

        assert response.status_code == 200
        assert [row['id'] for row in response.data['data']] == [item.id]

    def test_export_lists_parents(self, api_client):
        item = SubSubCategoryFactory()

        response = api_client.post(f'{CATALOG}/sub-sub-categories/export/', {'type': 'csv'}, format='json')

        assert response.status_code == 200
        lines = response.content.decode().splitlines()
        assert lines[0].startswith('_id,Name,Subcategory Name,Main Category Name')
        assert item.sub_category.name in lines[1]
        assert item.category.name in lines[1]

    def test_delete(self, api_client):
        item = SubSubCategoryFactory()

        response = api_client.delete(f'{CATALOG}/sub-sub-categories/{item.id}/')

        assert response.status_code == 200
        assert not SubSubCategory.objects.filter(pk=item.id).exists()


@pytest.mark.django_db
class TestBrandAPI:

    def test_create_requires_logo(self, api_client):
        response = api_client.post(f'{CATALOG}/brands/', {'name': 'Acme'}, format='multipart')

        assert response.status_code == 400

    def test_delete_removes_logo(self, api_client, image_store):
        brand = BrandFactory()

        response = api_client.delete(f'{CATALOG}/brands/{brand.id}/')

        assert response.status_code == 200
        image_store.destroy.assert_called_once_with(public_id_from_url(brand.logo))


def _product_payload(seller, category, sku='SKU-NEW-1'):
    return {
        'productTitle': 'Assam tea',
        'productDescription': 'Strong black tea',
        'seller': seller.id,
        'generalInfo': {
            'category': category.id,
            'productSKU': sku,
            'unit': 'kg',
        },
        'pricing': {
            'unitPrice': '250.00',
            'currentStockQty': 40,
        },
        'images': {
            'productThumbnail': 'https://res.cloudinary.com/demo/image/upload/v1/products/tea.png',
        },
    }


@pytest.mark.django_db
class TestProductAPI:

    def test_create(self, api_client):
        seller = SellerFactory()
        category = CategoryFactory()

        response = api_client.post(f'{CATALOG}/products/', _product_payload(seller, category), format='json')

        assert response.status_code == 201
        product = Product.objects.get(sku='SKU-NEW-1')
        assert product.product_status == Product.STATUS_NOT_APPROVED
        assert product.is_featured is False

    def test_create_reports_missing_fields(self, api_client):
        response = api_client.post(f'{CATALOG}/products/', {'productTitle': 'Tea'}, format='json')

        assert response.status_code == 400
        assert set(response.data['errors']['missingFields']) == {'productSKU', 'productThumbnail', 'unitPrice'}

    def test_duplicate_sku(self, api_client):
        existing = ProductFactory()

        response = api_client.post(
            f'{CATALOG}/products/',
            _product_payload(existing.seller, existing.category, sku=existing.sku),
            format='json'
        )

        assert response.status_code == 400
        assert response.data['msg'] == 'Duplicate productSKU. Please use a unique SKU.'
        assert Product.objects.filter(sku=existing.sku).count() == 1

    def test_toggle_featured_twice_restores_flag(self, api_client):
        product = ProductFactory(is_featured=False)
        url = f'{CATALOG}/products/{product.id}/featured/'

        first = api_client.patch(url)
        second = api_client.patch(url)

        assert first.data['data']['isFeatured'] is True
        assert second.data['data']['isFeatured'] is False
        product.refresh_from_db()
        assert product.is_featured is False

    def test_approve(self, api_client):
        product = ProductFactory()

        response = api_client.patch(f'{CATALOG}/products/{product.id}/approve/')

        assert response.status_code == 200
        product.refresh_from_db()
        assert product.product_status == Product.STATUS_APPROVED

    def test_seller_without_products(self, api_client):
        seller = SellerFactory()

        response = api_client.get(f'{CATALOG}/products/seller/{seller.id}/')

        assert response.status_code == 404

    def test_update_cannot_change_status_or_counters(self, api_client):
        product = ProductFactory()

        response = api_client.patch(
            f'{CATALOG}/products/{product.id}/',
            {'productTitle': 'Renamed', 'productStatus': 'Approved', 'totalSold': 99},
            format='json'
        )

        assert response.status_code == 200
        product.refresh_from_db()
        assert product.title == 'Renamed'
        assert product.product_status == Product.STATUS_NOT_APPROVED
        assert product.total_sold == 0

    def test_import_uses_seller_from_form(self, api_client, csv_upload):
        seller = SellerFactory()
        category = CategoryFactory(name='Beverages')
        ProductFactory(sku='SKU-TAKEN')
        upload = csv_upload(
            ['productName', 'category', 'productSKU', 'unitPrice', 'productThumbnail'],
            [
                ['Green tea', 'Beverages', 'SKU-IMP-1', '120', 'https://example.com/a.png'],
                ['Old tea', 'Beverages', 'SKU-TAKEN', '90', 'https://example.com/b.png'],
            ]
        )

        response = api_client.post(
            f'{CATALOG}/products/import/', {'file': upload, 'sellerId': seller.id}, format='multipart'
        )

        assert response.status_code == 201
        data = response.data['data']
        assert [row['productSKU'] for row in data['savedProducts']] == ['SKU-IMP-1']
        assert data['skippedProducts'] == [{'row': 3, 'productSKU': 'SKU-TAKEN'}]
        imported = Product.objects.get(sku='SKU-IMP-1')
        assert imported.seller_id == seller.id
        assert imported.category_id == category.id


@pytest.mark.django_db
class TestBannerAPI:

    def test_ratio_must_match_placement(self, api_client, image_store, image_file):
        response = api_client.post(
            f'{CATALOG}/banners/',
            {
                'bannerType': 'Main Banner',
                'bannerUrl': 'https://shop.example.com/sale',
                'resourceType': 'Shop',
                'bannerImageRatio': '1:1',
                'image': image_file,
            },
            format='multipart'
        )

        assert response.status_code == 400
        image_store.upload.assert_not_called()

    def test_create_and_toggle_publish(self, api_client, image_store, image_file):
        response = api_client.post(
            f'{CATALOG}/banners/',
            {
                'bannerType': 'Popup Banner',
                'bannerUrl': 'https://shop.example.com/sale',
                'resourceType': 'Shop',
                'bannerImageRatio': '1:1',
                'image': image_file,
            },
            format='multipart'
        )
        assert response.status_code == 201
        banner_id = response.data['data']['id']

        toggled = api_client.patch(f'{CATALOG}/banners/{banner_id}/publish/')

        assert toggled.data['data']['isPublished'] is True
