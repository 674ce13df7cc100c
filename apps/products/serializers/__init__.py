"""
Catalog serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .category_serializers import (
    CategorySerializer, CategoryCreateSerializer, CategoryUpdateSerializer, StatusSerializer,
    SubCategorySerializer, SubCategoryWriteSerializer,
    SubSubCategorySerializer, SubSubCategoryWriteSerializer
)
from .brand_serializers import BrandSerializer, BrandWriteSerializer
from .product_serializers import (
    ProductSerializer, ProductSummarySerializer, ProductWriteSerializer
)
from .banner_serializers import BannerSerializer, BannerWriteSerializer
from .review_serializers import (
    CustomerReviewSerializer, CustomerReviewCreateSerializer,
    CustomerReviewUpdateSerializer, ReviewStatusSerializer
)

__all__ = [
    'CategorySerializer',
    'CategoryCreateSerializer',
    'CategoryUpdateSerializer',
    'StatusSerializer',
    'SubCategorySerializer',
    'SubCategoryWriteSerializer',
    'SubSubCategorySerializer',
    'SubSubCategoryWriteSerializer',
    'BrandSerializer',
    'BrandWriteSerializer',
    'ProductSerializer',
    'ProductSummarySerializer',
    'ProductWriteSerializer',
    'BannerSerializer',
    'BannerWriteSerializer',
    'CustomerReviewSerializer',
    'CustomerReviewCreateSerializer',
    'CustomerReviewUpdateSerializer',
    'ReviewStatusSerializer',
]
