"""
Spreadsheet readers for bulk imports
"""
import csv
import io

from django.conf import settings
from openpyxl import load_workbook

from .exceptions import ServiceError


def read_spreadsheet(uploaded_file):
    """
    Read the first sheet of an ``.xlsx`` or ``.csv`` upload into a list of dicts.

    The first row supplies the keys; blank rows are dropped and header names
    are used exactly as written.
    """
    name = (getattr(uploaded_file, 'name', '') or '').lower()
    if name.endswith('.csv'):
        rows = _read_csv(uploaded_file)
    elif name.endswith('.xlsx'):
        rows = _read_xlsx(uploaded_file)
    else:
        raise ServiceError("Unsupported file type. Upload an .xlsx or .csv file.")

    if len(rows) > settings.IMPORT_MAX_ROWS:
        raise ServiceError(f"File has {len(rows)} rows; the limit is {settings.IMPORT_MAX_ROWS}.")
    return rows


def _read_csv(uploaded_file):
    text = uploaded_file.read().decode('utf-8-sig')
    reader = csv.DictReader(io.StringIO(text))
    return [
        {key: (value if value != '' else None) for key, value in row.items() if key}
        for row in reader
        if any(value not in (None, '') for value in row.values())
    ]


def _read_xlsx(uploaded_file):
    try:
        workbook = load_workbook(uploaded_file, read_only=True, data_only=True)
    except Exception as e:
        raise ServiceError(f"Could not read spreadsheet: {str(e)}")

    sheet = workbook.worksheets[0]
    row_iter = sheet.iter_rows(values_only=True)
    try:
        headers = [str(cell).strip() if cell is not None else '' for cell in next(row_iter)]
    except StopIteration:
        return []

    rows = []
    for values in row_iter:
        if all(value in (None, '') for value in values):
            continue
        rows.append({header: value for header, value in zip(headers, values) if header})
    workbook.close()
    return rows
