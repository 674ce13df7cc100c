"""
Phone and email validators shared by customer and seller serializers.
"""
import re
from rest_framework import serializers

PHONE_PATTERN = re.compile(r'^\+?\d{7,15}$')


def validate_phone(value):
    """
    Validate phone number format: optional leading ``+`` and 7 to 15 digits.
    """
    if not value:
        return value

    if not PHONE_PATTERN.match(value):
        raise serializers.ValidationError("Invalid phone number format.")

    return value


def normalize_email(value):
    if not value:
        return value
    return value.strip().lower()
