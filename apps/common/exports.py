"""
Tabular exports (CSV and Excel) for admin list screens
"""
import csv
import io

from django.http import HttpResponse
from openpyxl import Workbook

EXPORT_FORMATS = ('csv', 'excel')

CONTENT_TYPES = {
    'csv': 'text/csv',
    'excel': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
}

EXTENSIONS = {
    'csv': 'csv',
    'excel': 'xlsx',
}


class ReportExporter:
    """Export rows in various formats"""

    @staticmethod
    def export_to_csv(rows, columns):
        """
        Export rows to CSV text.

        ``columns`` is an ordered list of ``(header, key)`` pairs; missing keys
        become empty cells.
        """
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow([header for header, _ in columns])
        for row in rows:
            writer.writerow([_cell(row.get(key)) for _, key in columns])
        return output.getvalue()

    @staticmethod
    def export_to_excel(rows, columns, sheet_title='Sheet1'):
        """Export rows to an xlsx workbook and return its bytes."""
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = sheet_title[:31]
        sheet.append([header for header, _ in columns])
        for row in rows:
            sheet.append([_cell(row.get(key)) for _, key in columns])

        output = io.BytesIO()
        workbook.save(output)
        return output.getvalue()


def _cell(value):
    if value is None:
        return ''
    if isinstance(value, (list, tuple)):
        return ', '.join(str(item) for item in value)
    if isinstance(value, (int, float, str)):
        return value
    return str(value)


def export_response(rows, columns, format_type, filename, sheet_title='Sheet1'):
    """
    Build a download response for ``rows``.

    Raises ``ValueError`` for an unsupported ``format_type``.
    """
    if format_type not in EXPORT_FORMATS:
        raise ValueError(f"Invalid format type: {format_type}. Use 'csv' or 'excel'.")

    if format_type == 'csv':
        content = ReportExporter.export_to_csv(rows, columns)
    else:
        content = ReportExporter.export_to_excel(rows, columns, sheet_title)

    response = HttpResponse(content, content_type=CONTENT_TYPES[format_type])
    response['Content-Disposition'] = f'attachment; filename="{filename}.{EXTENSIONS[format_type]}"'
    return response
