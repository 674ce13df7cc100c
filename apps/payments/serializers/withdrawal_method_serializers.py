"""
Withdrawal method serializers.
"""
from rest_framework import serializers
from ..models import WithdrawalMethod


class WithdrawalFieldSerializer(serializers.Serializer):
    fieldName = serializers.CharField(max_length=100)
    inputType = serializers.ChoiceField(choices=WithdrawalMethod.INPUT_TYPES)
    placeholder = serializers.CharField(required=False, allow_blank=True, default='')
    isRequired = serializers.BooleanField(required=False, default=False)


class WithdrawalMethodSerializer(serializers.ModelSerializer):
    """Name and a non-empty field list are required on create and update"""
    methodName = serializers.CharField(source='method_name', max_length=100)
    fields = WithdrawalFieldSerializer(many=True, allow_empty=False)
    isActive = serializers.BooleanField(source='is_active', required=False, default=True)
    isDefault = serializers.BooleanField(source='is_default', required=False, default=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = WithdrawalMethod
        fields = ['id', 'methodName', 'fields', 'isActive', 'isDefault', 'createdAt', 'updatedAt']
        read_only_fields = ['id', 'createdAt', 'updatedAt']

    def validate_methodName(self, value):
        queryset = WithdrawalMethod.objects.filter(method_name=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('Method name already exists.')
        return value


class WithdrawalMethodStatusSerializer(serializers.Serializer):
    field = serializers.ChoiceField(choices=['isActive', 'isDefault'])
