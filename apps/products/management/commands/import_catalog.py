"""
Django management command to bulk import catalog data from a spreadsheet.
Usage: python manage.py import_catalog categories path/to/categories.xlsx
       python manage.py import_catalog products products.csv --seller 3
"""
from pathlib import Path

from django.core.files import File
from django.core.management.base import BaseCommand, CommandError

from apps.common.exceptions import ServiceError
from apps.products.services import CatalogImportService

IMPORTERS = {
    'categories': CatalogImportService.import_categories,
    'sub-categories': CatalogImportService.import_sub_categories,
    'sub-sub-categories': CatalogImportService.import_sub_sub_categories,
    'brands': CatalogImportService.import_brands,
}


class Command(BaseCommand):
    help = 'Bulk import categories, sub-categories, brands or products from an .xlsx or .csv file'

    def add_arguments(self, parser):
        parser.add_argument('kind', choices=sorted(IMPORTERS) + ['products'])
        parser.add_argument('path', type=str, help='Spreadsheet to import')
        parser.add_argument(
            '--seller',
            type=int,
            default=None,
            help='Seller id for product rows without a seller column',
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        if not path.is_file():
            raise CommandError(f'File not found: {path}')

        with path.open('rb') as handle:
            upload = File(handle, name=path.name)
            try:
                if options['kind'] == 'products':
                    result = CatalogImportService.import_products(upload, options['seller'])
                else:
                    result = IMPORTERS[options['kind']](upload)
            except ServiceError as e:
                raise CommandError(e.message)

        for key, value in result.items():
            count = len(value) if isinstance(value, list) else value
            self.stdout.write(f'{key}: {count}')
        self.stdout.write(self.style.SUCCESS(f"Imported {options['kind']} from {path.name}"))
