"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .contact_validators import validate_phone, normalize_email
from .price_validators import (
    validate_price_range, validate_quantity, validate_discount_amount
)
from .media_validators import validate_aspect_ratio
from .date_validators import parse_datetime_value

__all__ = [
    'validate_phone',
    'normalize_email',
    'validate_price_range',
    'validate_quantity',
    'validate_discount_amount',
    'validate_aspect_ratio',
    'parse_datetime_value',
]
