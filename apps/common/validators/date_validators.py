"""
Date parsing helpers for request payloads.
"""
from datetime import datetime, date

from django.utils import timezone
from django.utils.dateparse import parse_datetime, parse_date


def parse_datetime_value(value):
    """
    Parse an ISO 8601 date or datetime into an aware datetime.

    Returns ``None`` when the value cannot be parsed. Naive values are read in
    the current time zone; bare dates start at midnight.
    """
    if value in (None, ''):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                parsed = datetime(day.year, day.month, day.day) if day else None
        except ValueError:
            return None
        if parsed is None:
            return None

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed
