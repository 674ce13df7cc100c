"""
Catalog views module.

All views are exported from this module to maintain backward compatibility.
"""
from .category_views import (
    CategoryListCreateView, CategoryDetailView, CategoryStatusView,
    CategoryExportView, CategoryImportView,
    SubCategoryListCreateView, SubCategoryDetailView, SubCategoryStatusView,
    SubCategoryByCategoryView, SubCategoryExportView, SubCategoryImportView,
    SubSubCategoryListCreateView, SubSubCategoryDetailView, SubSubCategoryStatusView,
    SubSubCategoryBySubCategoryView, SubSubCategoryExportView, SubSubCategoryImportView
)
from .brand_views import (
    BrandListCreateView, BrandDetailView, BrandStatusView, BrandExportView, BrandImportView
)
from .product_views import (
    ProductListCreateView, ProductDetailView, ProductApproveView, ProductFeaturedToggleView,
    ApprovedProductListView, SellerProductListView, ProductImportView
)
from .banner_views import BannerListCreateView, BannerDetailView, BannerPublishToggleView
from .review_views import ReviewListCreateView, ReviewDetailView, ReviewStatusView

__all__ = [
    'CategoryListCreateView',
    'CategoryDetailView',
    'CategoryStatusView',
    'CategoryExportView',
    'CategoryImportView',
    'SubCategoryListCreateView',
    'SubCategoryDetailView',
    'SubCategoryStatusView',
    'SubCategoryByCategoryView',
    'SubCategoryExportView',
    'SubCategoryImportView',
    'SubSubCategoryListCreateView',
    'SubSubCategoryDetailView',
    'SubSubCategoryStatusView',
    'SubSubCategoryBySubCategoryView',
    'SubSubCategoryExportView',
    'SubSubCategoryImportView',
    'BrandListCreateView',
    'BrandDetailView',
    'BrandStatusView',
    'BrandExportView',
    'BrandImportView',
    'ProductListCreateView',
    'ProductDetailView',
    'ProductApproveView',
    'ProductFeaturedToggleView',
    'ApprovedProductListView',
    'SellerProductListView',
    'ProductImportView',
    'BannerListCreateView',
    'BannerDetailView',
    'BannerPublishToggleView',
    'ReviewListCreateView',
    'ReviewDetailView',
    'ReviewStatusView',
]
