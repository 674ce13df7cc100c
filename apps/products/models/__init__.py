"""
Product models module.

All models are exported from this module to maintain backward compatibility.
"""
from .category import CatalogStatus, Category, SubCategory, SubSubCategory
from .brand import Brand
from .product import Product
from .banner import Banner
from .review import CustomerReview

__all__ = [
    'CatalogStatus',
    'Category',
    'SubCategory',
    'SubSubCategory',
    'Brand',
    'Product',
    'Banner',
    'CustomerReview',
]
