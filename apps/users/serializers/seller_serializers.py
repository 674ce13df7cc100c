"""
Seller serializers for registration, list, detail, update and status.
"""
from rest_framework import serializers
from apps.common.validators import validate_phone, normalize_email
from ..models import Seller


class SellerSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    shopName = serializers.CharField(source='shop_name', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)
    otherDocuments = serializers.JSONField(source='other_documents', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Seller
        fields = [
            'id', 'firstName', 'lastName', 'shopName', 'address', 'phoneNumber',
            'email', 'image', 'otherDocuments', 'status', 'createdAt'
        ]
        read_only_fields = fields


class SellerSummarySerializer(serializers.ModelSerializer):
    """Compact seller block embedded in orders and products"""
    shopName = serializers.CharField(source='shop_name', read_only=True)
    name = serializers.CharField(source='full_name', read_only=True)
    phoneNumber = serializers.CharField(source='phone_number', read_only=True)

    class Meta:
        model = Seller
        fields = ['id', 'shopName', 'name', 'phoneNumber', 'email']
        read_only_fields = fields


class SellerCreateSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', max_length=100)
    lastName = serializers.CharField(source='last_name', max_length=100, required=False, allow_blank=True)
    shopName = serializers.CharField(source='shop_name', max_length=200)
    phoneNumber = serializers.CharField(source='phone_number', max_length=20, validators=[validate_phone])
    aadhaarNumber = serializers.CharField(source='aadhaar_number', max_length=20, required=False, allow_blank=True)
    panNumber = serializers.CharField(source='pan_number', max_length=20, required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, min_length=6)
    confirmPassword = serializers.CharField(write_only=True)

    class Meta:
        model = Seller
        fields = [
            'firstName', 'lastName', 'shopName', 'address', 'phoneNumber', 'email',
            'aadhaarNumber', 'panNumber', 'password', 'confirmPassword'
        ]
        extra_kwargs = {
            'email': {'validators': []},
            'address': {'required': False},
        }

    def validate_email(self, value):
        return normalize_email(value)

    def validate(self, attrs):
        if attrs['password'] != attrs.pop('confirmPassword'):
            raise serializers.ValidationError({'confirmPassword': 'Passwords do not match'})
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        seller = Seller(**validated_data)
        seller.set_password(password)
        seller.save()
        return seller


class SellerUpdateSerializer(serializers.ModelSerializer):
    """Allow-listed seller profile fields"""
    firstName = serializers.CharField(source='first_name', max_length=100, required=False)
    lastName = serializers.CharField(source='last_name', max_length=100, required=False, allow_blank=True)
    shopName = serializers.CharField(source='shop_name', max_length=200, required=False)
    phoneNumber = serializers.CharField(source='phone_number', max_length=20, required=False, validators=[validate_phone])
    image = serializers.URLField(required=False, allow_blank=True)

    class Meta:
        model = Seller
        fields = ['firstName', 'lastName', 'shopName', 'address', 'phoneNumber', 'image']
        extra_kwargs = {'address': {'required': False}}

    def validate_phoneNumber(self, value):
        queryset = Seller.objects.filter(phone_number=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('Phone number already exists')
        return value


class SellerStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[choice for choice, _ in Seller.STATUS_CHOICES])
