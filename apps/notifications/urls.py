from django.urls import path
from . import views

urlpatterns = [
    path('device-tokens/', views.DeviceTokenView.as_view(), name='device-token-list'),
    path('<int:pk>/resend/', views.NotificationResendView.as_view(), name='notification-resend'),
    path('', views.NotificationListSendView.as_view(), name='notification-list'),
]
