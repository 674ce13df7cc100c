"""
Category taxonomy serializers: categories, sub-categories and sub-sub-categories.
"""
from rest_framework import serializers
from ..models import CatalogStatus, Category, SubCategory, SubSubCategory

STATUS_CHOICES = [choice for choice, _ in CatalogStatus.choices]


class CategorySerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'priority', 'logo', 'status', 'createdAt', 'updatedAt']
        read_only_fields = fields


class CategoryCreateSerializer(serializers.ModelSerializer):
    """Name and priority are required; the logo arrives as an upload"""
    priority = serializers.IntegerField()
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)

    class Meta:
        model = Category
        fields = ['name', 'priority', 'status']


class CategoryUpdateSerializer(serializers.ModelSerializer):
    """Allow-listed category fields; absent fields keep their values"""
    name = serializers.CharField(max_length=100, required=False)
    priority = serializers.IntegerField(required=False)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)

    class Meta:
        model = Category
        fields = ['name', 'priority', 'status']

    def validate_name(self, value):
        queryset = Category.objects.filter(name=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError('A category with this name already exists')
        return value


class StatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUS_CHOICES)


class SubCategorySerializer(serializers.ModelSerializer):
    categoryId = serializers.IntegerField(source='category_id', read_only=True)
    categoryName = serializers.CharField(source='category.name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = SubCategory
        fields = ['id', 'name', 'categoryId', 'categoryName', 'priority', 'status', 'createdAt']
        read_only_fields = fields


class SubCategoryWriteSerializer(serializers.Serializer):
    """
    Allow-listed sub-category fields.

    The parent is checked by the service so a missing category answers 404.
    """
    name = serializers.CharField(max_length=100)
    categoryId = serializers.IntegerField()
    priority = serializers.IntegerField(required=False, default=0)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)


class SubSubCategorySerializer(serializers.ModelSerializer):
    subCategoryId = serializers.IntegerField(source='sub_category_id', read_only=True)
    subCategoryName = serializers.CharField(source='sub_category.name', read_only=True)
    categoryId = serializers.IntegerField(source='category_id', read_only=True)
    categoryName = serializers.CharField(source='category.name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = SubSubCategory
        fields = [
            'id', 'name', 'subCategoryId', 'subCategoryName', 'categoryId',
            'categoryName', 'priority', 'status', 'createdAt'
        ]
        read_only_fields = fields


class SubSubCategoryWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    subCategoryId = serializers.IntegerField()
    categoryId = serializers.IntegerField()
    priority = serializers.IntegerField(required=False, default=0)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)
