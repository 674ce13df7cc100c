"""
Customer address serializers.
"""
from rest_framework import serializers
from ..models import Customer, CustomerAddress

ADDRESS_TYPES = [choice for choice, _ in CustomerAddress.ADDRESS_TYPE_CHOICES]


class AddressBlockSerializer(serializers.Serializer):
    """One embedded billing or shipping address"""
    contactPersonName = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=20)
    addressType = serializers.ChoiceField(choices=ADDRESS_TYPES, default='Permanent')
    country = serializers.CharField(max_length=100)
    city = serializers.CharField(max_length=100)
    zipCode = serializers.CharField(max_length=20)
    address = serializers.CharField()
    note = serializers.CharField(required=False, allow_blank=True, default='')


class CustomerAddressSerializer(serializers.ModelSerializer):
    """
    Customer address serializer.

    Fields:
    - customer: owning customer id
    - billingAddress / shippingAddress: embedded address blocks
    """
    customer = serializers.PrimaryKeyRelatedField(queryset=Customer.objects.all())
    billingAddress = AddressBlockSerializer(source='billing_address')
    shippingAddress = AddressBlockSerializer(source='shipping_address')
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = CustomerAddress
        fields = ['id', 'customer', 'billingAddress', 'shippingAddress', 'createdAt']
        read_only_fields = ['id', 'createdAt']

    def validate(self, attrs):
        if self.instance is not None and 'customer' in attrs and attrs['customer'] != self.instance.customer:
            raise serializers.ValidationError({'customer': 'An address cannot be moved to another customer'})
        return attrs
