from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter()
router.register(r'addresses', views.CustomerAddressViewSet, basename='customer-address')

urlpatterns = [
    path('customers/', views.CustomerListView.as_view(), name='customer-list'),
    path('customers/<int:pk>/', views.CustomerDetailView.as_view(), name='customer-detail'),
    path('customers/<int:pk>/block/', views.CustomerBlockStatusView.as_view(), name='customer-block'),
    path('sellers/', views.SellerListCreateView.as_view(), name='seller-list'),
    path('sellers/<int:pk>/', views.SellerDetailView.as_view(), name='seller-detail'),
    path('sellers/<int:pk>/status/', views.SellerStatusView.as_view(), name='seller-status'),
    path('', include(router.urls)),
]
