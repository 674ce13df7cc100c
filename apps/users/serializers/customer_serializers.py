"""
Customer serializers for list, detail, update and block-status operations.
"""
from rest_framework import serializers
from apps.common.validators import validate_phone, normalize_email
from ..models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read representation used by list and detail endpoints"""
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)
    joinedDate = serializers.DateTimeField(source='joined_date', read_only=True)
    isBlock = serializers.CharField(source='is_block', read_only=True)
    customerLogo = serializers.CharField(source='customer_logo', read_only=True)
    totalOrders = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            'id', 'firstName', 'lastName', 'phoneNumber', 'email',
            'joinedDate', 'isBlock', 'customerLogo', 'totalOrders'
        ]
        read_only_fields = fields

    def get_totalOrders(self, obj):
        """Use the annotated count when the queryset carries one"""
        total = getattr(obj, 'total_orders', None)
        if total is None:
            total = obj.orders.count()
        return total


class CustomerUpdateSerializer(serializers.ModelSerializer):
    """
    Allow-listed customer fields an admin may change.

    Fields absent from the payload keep their stored values.
    """
    firstName = serializers.CharField(source='first_name', max_length=100, required=False)
    lastName = serializers.CharField(source='last_name', max_length=100, required=False, allow_blank=True)
    phoneNumber = serializers.CharField(source='phone_number', max_length=20, required=False, validators=[validate_phone])
    email = serializers.EmailField(required=False, allow_null=True)
    customerLogo = serializers.URLField(source='customer_logo', required=False, allow_blank=True)

    class Meta:
        model = Customer
        fields = ['firstName', 'lastName', 'phoneNumber', 'email', 'customerLogo']

    def validate_phoneNumber(self, value):
        queryset = Customer.objects.filter(phone_number=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('Phone number already exists')
        return value

    def validate_email(self, value):
        value = normalize_email(value)
        if not value:
            return None
        queryset = Customer.objects.filter(email=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('Email already exists')
        return value


class CustomerBlockSerializer(serializers.Serializer):
    isBlock = serializers.ChoiceField(choices=[choice for choice, _ in Customer.BLOCK_CHOICES])
