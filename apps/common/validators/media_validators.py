"""
Image validators.
"""


def validate_aspect_ratio(width, height, target, tolerance=0.1):
    """
    Return True when ``width / height`` is strictly within ``tolerance`` of ``target``.
    """
    if not width or not height:
        return False
    return abs(width / height - target) < tolerance
