from django.urls import path
from . import views

# Static segments come before the <int:pk> routes of the same prefix
urlpatterns = [
    # Categories
    path('categories/export/', views.CategoryExportView.as_view(), name='category-export'),
    path('categories/import/', views.CategoryImportView.as_view(), name='category-import'),
    path('categories/<int:pk>/status/', views.CategoryStatusView.as_view(), name='category-status'),
    path('categories/<int:pk>/', views.CategoryDetailView.as_view(), name='category-detail'),
    path('categories/', views.CategoryListCreateView.as_view(), name='category-list'),

    # Sub-categories
    path('sub-categories/export/', views.SubCategoryExportView.as_view(), name='sub-category-export'),
    path('sub-categories/import/', views.SubCategoryImportView.as_view(), name='sub-category-import'),
    path('sub-categories/by-category/', views.SubCategoryByCategoryView.as_view(), name='sub-category-by-category'),
    path(
        'sub-categories/by-category/<str:category_id>/',
        views.SubCategoryByCategoryView.as_view(),
        name='sub-category-by-category-id'
    ),
    path('sub-categories/<int:pk>/status/', views.SubCategoryStatusView.as_view(), name='sub-category-status'),
    path('sub-categories/<int:pk>/', views.SubCategoryDetailView.as_view(), name='sub-category-detail'),
    path('sub-categories/', views.SubCategoryListCreateView.as_view(), name='sub-category-list'),

    # Sub-sub-categories
    path('sub-sub-categories/export/', views.SubSubCategoryExportView.as_view(), name='sub-sub-category-export'),
    path('sub-sub-categories/import/', views.SubSubCategoryImportView.as_view(), name='sub-sub-category-import'),
    path(
        'sub-sub-categories/by-sub-category/',
        views.SubSubCategoryBySubCategoryView.as_view(),
        name='sub-sub-category-by-sub-category'
    ),
    path(
        'sub-sub-categories/by-sub-category/<str:sub_category_id>/',
        views.SubSubCategoryBySubCategoryView.as_view(),
        name='sub-sub-category-by-sub-category-id'
    ),
    path(
        'sub-sub-categories/<int:pk>/status/',
        views.SubSubCategoryStatusView.as_view(),
        name='sub-sub-category-status'
    ),
    path('sub-sub-categories/<int:pk>/', views.SubSubCategoryDetailView.as_view(), name='sub-sub-category-detail'),
    path('sub-sub-categories/', views.SubSubCategoryListCreateView.as_view(), name='sub-sub-category-list'),

    # Brands
    path('brands/export/', views.BrandExportView.as_view(), name='brand-export'),
    path('brands/import/', views.BrandImportView.as_view(), name='brand-import'),
    path('brands/<int:pk>/status/', views.BrandStatusView.as_view(), name='brand-status'),
    path('brands/<int:pk>/', views.BrandDetailView.as_view(), name='brand-detail'),
    path('brands/', views.BrandListCreateView.as_view(), name='brand-list'),

    # Products
    path('products/approved/', views.ApprovedProductListView.as_view(), name='product-approved-list'),
    path('products/import/', views.ProductImportView.as_view(), name='product-import'),
    path('products/seller/<int:seller_id>/', views.SellerProductListView.as_view(), name='product-seller-list'),
    path('products/<int:pk>/approve/', views.ProductApproveView.as_view(), name='product-approve'),
    path('products/<int:pk>/featured/', views.ProductFeaturedToggleView.as_view(), name='product-featured'),
    path('products/<int:pk>/', views.ProductDetailView.as_view(), name='product-detail'),
    path('products/', views.ProductListCreateView.as_view(), name='product-list'),

    # Banners
    path('banners/<int:pk>/publish/', views.BannerPublishToggleView.as_view(), name='banner-publish'),
    path('banners/<int:pk>/', views.BannerDetailView.as_view(), name='banner-detail'),
    path('banners/', views.BannerListCreateView.as_view(), name='banner-list'),

    # Reviews
    path('reviews/<int:pk>/status/', views.ReviewStatusView.as_view(), name='review-status'),
    path('reviews/<int:pk>/', views.ReviewDetailView.as_view(), name='review-detail'),
    path('reviews/', views.ReviewListCreateView.as_view(), name='review-list'),
]
