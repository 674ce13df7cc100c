"""
Price and quantity validators.
"""
from rest_framework import serializers


def validate_price_range(value, min_value=0, max_value=None):
    """
    Validate price is within acceptable range.

    Args:
        value: Price decimal
        min_value: Minimum allowed price (default: 0)
        max_value: Maximum allowed price (optional)

    Raises:
        serializers.ValidationError: If price is outside valid range

    Returns:
        decimal.Decimal: Validated price
    """
    if value < min_value:
        raise serializers.ValidationError(f"Price must be at least {min_value}.")

    if max_value is not None and value > max_value:
        raise serializers.ValidationError(f"Price must not exceed {max_value}.")

    return value


def validate_quantity(value, min_value=1):
    """
    Validate quantity is positive and meets minimum requirement.

    Raises:
        serializers.ValidationError: If quantity is invalid
    """
    if value < min_value:
        raise serializers.ValidationError(f"Quantity must be at least {min_value}.")

    return value


def validate_discount_amount(discount_type, discount_amount, unit_price):
    """
    Validate a product discount against its unit price.

    A flat discount may not exceed the price; a percentage may not exceed 100.
    """
    if discount_amount is None:
        return discount_amount

    if discount_type == 'percentage' and discount_amount > 100:
        raise serializers.ValidationError({
            'discountAmount': 'Percentage discount cannot exceed 100.'
        })
    if discount_type == 'flat' and unit_price is not None and discount_amount > unit_price:
        raise serializers.ValidationError({
            'discountAmount': 'Flat discount cannot exceed the unit price.'
        })

    return discount_amount
