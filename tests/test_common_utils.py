"""
Tests for the shared helpers: image store URLs, pagination, exports,
spreadsheet reading and validators.
"""
import pytest
from datetime import datetime, timezone as dt_timezone
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from hypothesis import given, strategies as st
from rest_framework import serializers

from apps.common.exceptions import ServiceError
from apps.common.exports import export_response, ReportExporter
from apps.common.imports import read_spreadsheet
from apps.common.storage import public_id_from_url, delete_image_by_url
from apps.common.utils import parse_bool, paginate_queryset
from apps.common.validators import (
    validate_aspect_ratio, parse_datetime_value, validate_phone, validate_quantity,
    validate_discount_amount, normalize_email
)


class TestPublicIdFromUrl:

    def test_strips_version_and_extension(self):
        url = 'https://res.cloudinary.com/demo/image/upload/v1736191710/brands/logo.png'
        assert public_id_from_url(url) == 'brands/logo'

    def test_nested_folders(self):
        url = 'https://res.cloudinary.com/demo/image/upload/v1/a/b/c/photo.jpg'
        assert public_id_from_url(url) == 'a/b/c/photo'

    @pytest.mark.parametrize('url', ['', None, 'https://example.com/images/logo.png'])
    def test_without_upload_segment(self, url):
        assert public_id_from_url(url) is None

    def test_delete_by_url_logs_unparseable_url(self, image_store, caplog):
        assert delete_image_by_url('https://example.com/logo.png') is False
        assert 'Failed to extract public ID from URL' in caplog.text
        image_store.destroy.assert_not_called()


class TestPaginateQueryset:

    @pytest.mark.django_db
    def test_page_metadata(self):
        from tests.factories import CategoryFactory
        from apps.products.models import Category

        CategoryFactory.create_batch(5)
        items, meta = paginate_queryset(Category.objects.order_by('id'), 2, 2)

        assert len(list(items)) == 2
        assert meta == {
            'pageNum': 2,
            'pageSize': 2,
            'total': 5,
            'totalPages': 3,
            'hasNextPage': True,
            'hasPrevPage': True,
        }

    @pytest.mark.django_db
    def test_last_page(self):
        from tests.factories import CategoryFactory
        from apps.products.models import Category

        CategoryFactory.create_batch(3)
        items, meta = paginate_queryset(Category.objects.order_by('id'), 2, 2)

        assert len(list(items)) == 1
        assert meta['hasNextPage'] is False


class TestParseBool:

    @pytest.mark.parametrize('value', [True, 1, 'true', 'TRUE', 'yes', 'y', '1', 'Active'])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize('value', [False, 0, 'false', 'no', 'Inactive', '0'])
    def test_falsy(self, value):
        assert parse_bool(value) is False

    def test_default_for_missing(self):
        assert parse_bool(None, default=True) is True
        assert parse_bool('', default=False) is False


class TestExports:

    COLUMNS = [('Name', 'name'), ('Tags', 'tags'), ('Missing', 'missing')]

    def test_csv_export(self):
        content = ReportExporter.export_to_csv([{'name': 'Tea', 'tags': ['a', 'b']}], self.COLUMNS)
        lines = content.strip().splitlines()

        assert lines[0] == 'Name,Tags,Missing'
        assert lines[1] == 'Tea,"a, b",'

    def test_csv_response_headers(self):
        response = export_response([{'name': 'Tea'}], self.COLUMNS, 'csv', 'categories')

        assert response['Content-Type'] == 'text/csv'
        assert response['Content-Disposition'] == 'attachment; filename="categories.csv"'

    def test_excel_response(self):
        response = export_response([{'name': 'Tea'}], self.COLUMNS, 'excel', 'categories', 'Categories')

        assert response['Content-Disposition'].endswith('categories.xlsx"')
        # xlsx files are zip archives
        assert response.content[:2] == b'PK'

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            export_response([], self.COLUMNS, 'pdf', 'categories')


class TestReadSpreadsheet:

    def test_reads_csv_rows(self, csv_upload):
        upload = csv_upload(['name', 'priority'], [['Tea', 1], ['', ''], ['Coffee', '']])
        rows = read_spreadsheet(upload)

        assert rows == [
            {'name': 'Tea', 'priority': '1'},
            {'name': 'Coffee', 'priority': None},
        ]

    def test_reads_xlsx_rows(self):
        import io
        from openpyxl import Workbook

        workbook = Workbook()
        sheet = workbook.active
        sheet.append(['name', 'priority'])
        sheet.append(['Tea', 3])
        sheet.append([None, None])
        buffer = io.BytesIO()
        workbook.save(buffer)
        upload = SimpleUploadedFile('import.xlsx', buffer.getvalue())

        assert read_spreadsheet(upload) == [{'name': 'Tea', 'priority': 3}]

    def test_rejects_other_extensions(self):
        upload = SimpleUploadedFile('import.txt', b'name\nTea\n')
        with pytest.raises(ServiceError):
            read_spreadsheet(upload)

    def test_row_limit(self, csv_upload, settings):
        settings.IMPORT_MAX_ROWS = 1
        upload = csv_upload(['name'], [['Tea'], ['Coffee']])
        with pytest.raises(ServiceError) as exc_info:
            read_spreadsheet(upload)
        assert 'limit is 1' in exc_info.value.message


class TestAspectRatio:

    def test_exact_ratio(self):
        assert validate_aspect_ratio(1000, 200, 5) is True

    def test_inside_tolerance(self):
        assert validate_aspect_ratio(1010, 200, 5) is True

    def test_outside_tolerance(self):
        assert validate_aspect_ratio(480, 100, 5) is False
        assert validate_aspect_ratio(1000, 250, 5) is False

    def test_missing_dimensions(self):
        assert validate_aspect_ratio(None, 100, 5) is False
        assert validate_aspect_ratio(500, 0, 5) is False

    @given(st.integers(min_value=1, max_value=5000))
    def test_scaled_ratio_always_matches(self, height):
        assert validate_aspect_ratio(height * 5, height, 5) is True


class TestParseDatetimeValue:

    def test_utc_suffix(self):
        parsed = parse_datetime_value('2025-03-01T10:00:00Z')
        assert parsed == datetime(2025, 3, 1, 10, 0, tzinfo=dt_timezone.utc)

    def test_bare_date_is_midnight(self):
        parsed = parse_datetime_value('2025-03-01')
        local = timezone.localtime(parsed)
        assert (local.year, local.month, local.day, local.hour) == (2025, 3, 1, 0)
        assert timezone.is_aware(parsed)

    @pytest.mark.parametrize('value', [None, '', 'not a date', '2025-13-45'])
    def test_invalid_values(self, value):
        assert parse_datetime_value(value) is None


class TestFieldValidators:

    def test_phone(self):
        assert validate_phone('+919876543210') == '+919876543210'
        with pytest.raises(serializers.ValidationError):
            validate_phone('98-76')

    def test_quantity(self):
        assert validate_quantity(1) == 1
        with pytest.raises(serializers.ValidationError):
            validate_quantity(0)

    def test_discount_amount(self):
        with pytest.raises(serializers.ValidationError):
            validate_discount_amount('percentage', 150, 100)
        with pytest.raises(serializers.ValidationError):
            validate_discount_amount('flat', 120, 100)
        assert validate_discount_amount('flat', 50, 100) == 50

    def test_normalize_email(self):
        assert normalize_email('  Asha@Example.COM ') == 'asha@example.com'
