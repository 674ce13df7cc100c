"""
Customer address management views with RESTful API design.
"""
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..models import CustomerAddress
from ..serializers import CustomerAddressSerializer


class CustomerAddressViewSet(viewsets.ModelViewSet):
    """
    RESTful API for customer addresses.

    Endpoints:
    - GET /users/addresses/?customer=<id> - List addresses, optionally for one customer
    - POST /users/addresses/ - Create new address
    - GET /users/addresses/{id}/ - Get address detail
    - PATCH /users/addresses/{id}/ - Update address (partial)
    - DELETE /users/addresses/{id}/ - Delete address
    """
    serializer_class = CustomerAddressSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = CustomerAddress.objects.select_related('customer').order_by('-created_at')
        customer_id = self.request.query_params.get('customer')
        if customer_id:
            queryset = queryset.filter(customer_id=customer_id)
        return queryset

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return success_response(serializer.data, 'Address list retrieved successfully')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return success_response(serializer.data, 'Address created successfully', status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance)
        return success_response(serializer.data, 'Address retrieved successfully')

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return success_response(serializer.data, 'Address updated successfully')

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return success_response(None, 'Customer Address deleted')
