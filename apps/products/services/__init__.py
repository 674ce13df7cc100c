"""
Catalog services module.

All services are exported from this module to maintain backward compatibility.
"""
from .category_service import CategoryService, SubCategoryService, SubSubCategoryService
from .brand_service import BrandService
from .product_service import ProductService
from .catalog_import import CatalogImportService
from .banner_service import BannerService
from .review_service import ReviewService

__all__ = [
    'CategoryService',
    'SubCategoryService',
    'SubSubCategoryService',
    'BrandService',
    'ProductService',
    'CatalogImportService',
    'BannerService',
    'ReviewService',
]
