"""
Order serializers for create, denormalized list/detail and status updates.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.validators import validate_quantity as check_quantity
from apps.products.serializers import ProductSummarySerializer
from apps.users.serializers import SellerSummarySerializer, CustomerAddressSerializer
from apps.users.models import Customer
from ..models import Order, OrderItem

STATUS_VALUES = [choice for choice, _ in Order.STATUS_CHOICES]
PAYMENT_STATUS_VALUES = [choice for choice, _ in Order.PAYMENT_STATUS_CHOICES]


class OrderItemInputSerializer(serializers.Serializer):
    """One submitted order line; ``totalPrice`` is accepted as sent"""
    productId = serializers.IntegerField()
    quantity = serializers.IntegerField()
    unitPrice = serializers.DecimalField(max_digits=12, decimal_places=2)
    tax = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, default=Decimal('0'))
    itemDiscount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, default=Decimal('0'))
    totalPrice = serializers.DecimalField(max_digits=14, decimal_places=2)

    def validate_quantity(self, value):
        return check_quantity(value)


class OrderCustomerSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)

    class Meta:
        model = Customer
        fields = ['id', 'firstName', 'lastName', 'phoneNumber', 'email']
        read_only_fields = fields


class OrderItemSerializer(serializers.ModelSerializer):
    product = ProductSummarySerializer(read_only=True)
    unitPrice = serializers.DecimalField(source='unit_price', max_digits=12, decimal_places=2, read_only=True)
    itemDiscount = serializers.DecimalField(source='item_discount', max_digits=12, decimal_places=2, read_only=True)
    totalPrice = serializers.DecimalField(source='total_price', max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'product', 'quantity', 'unitPrice', 'tax', 'itemDiscount', 'totalPrice']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Denormalized order: customer, seller, address and product details per line"""
    orderId = serializers.CharField(source='order_id', read_only=True)
    paymentStatus = serializers.CharField(source='payment_status', read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    verificationCode = serializers.CharField(source='verification_code', read_only=True)
    customer = OrderCustomerSerializer(read_only=True)
    seller = SellerSummarySerializer(read_only=True)
    customerAddress = CustomerAddressSerializer(source='customer_address', read_only=True)
    delivery = serializers.SerializerMethodField()
    orderItems = OrderItemSerializer(source='items', many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'orderId', 'total', 'status', 'date', 'paymentStatus', 'paymentMethod',
            'verificationCode', 'customer', 'seller', 'customerAddress', 'delivery',
            'orderItems', 'createdAt', 'updatedAt'
        ]
        read_only_fields = fields

    def get_delivery(self, obj):
        return {
            'deliveryMan': {
                'name': obj.delivery_man_name,
                'contact': obj.delivery_man_contact,
            },
            'expectedDeliveryDate': obj.expected_delivery_date,
        }


class OrderStatusUpdateSerializer(serializers.Serializer):
    """
    Status, payment status and delivery details an admin may set.

    Any status value is accepted from any current status.
    """
    status = serializers.ChoiceField(choices=STATUS_VALUES, required=False)
    paymentStatus = serializers.ChoiceField(choices=PAYMENT_STATUS_VALUES, required=False)
    deliveryManName = serializers.CharField(max_length=100, required=False, allow_blank=True)
    deliveryManContact = serializers.CharField(max_length=50, required=False, allow_blank=True)
    expectedDeliveryDate = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError('Nothing to update')
        return attrs


class OrderFilterSerializer(serializers.Serializer):
    """Query string filters for order listings"""
    store = serializers.CharField(required=False, allow_blank=True)
    customer = serializers.CharField(required=False, allow_blank=True)
    date_filter = serializers.ChoiceField(
        choices=['thisWeek', 'thisMonth', 'thisYear'], required=False, allow_blank=True
    )
