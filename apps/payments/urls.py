from django.urls import path
from . import views

urlpatterns = [
    path(
        'withdrawal-methods/<int:pk>/status/',
        views.WithdrawalMethodStatusView.as_view(),
        name='withdrawal-method-status'
    ),
    path('withdrawal-methods/<int:pk>/', views.WithdrawalMethodDetailView.as_view(), name='withdrawal-method-detail'),
    path('withdrawal-methods/', views.WithdrawalMethodListCreateView.as_view(), name='withdrawal-method-list'),
]
