"""
Product serializers for list, detail, create and allow-listed update.

Request and response bodies group product fields into ``generalInfo``,
``settings``, ``pricing``, ``images`` and ``seo`` blocks; every block maps
onto flat model columns.
"""
from decimal import Decimal
from rest_framework import serializers

from apps.common.validators import validate_price_range, validate_discount_amount
from apps.users.models import Seller
from apps.users.serializers import SellerSummarySerializer
from ..models import Product, Category, SubCategory, SubSubCategory, Brand


class ProductGeneralInfoSerializer(serializers.Serializer):
    category = serializers.PrimaryKeyRelatedField(queryset=Category.objects.all())
    subCategory = serializers.PrimaryKeyRelatedField(
        source='sub_category', queryset=SubCategory.objects.all(), required=False, allow_null=True
    )
    subSubCategory = serializers.PrimaryKeyRelatedField(
        source='sub_sub_category', queryset=SubSubCategory.objects.all(), required=False, allow_null=True
    )
    brand = serializers.PrimaryKeyRelatedField(queryset=Brand.objects.all(), required=False, allow_null=True)
    productType = serializers.CharField(source='product_type', required=False, allow_blank=True, max_length=50)
    unit = serializers.CharField(required=False, allow_blank=True, max_length=50)
    productSKU = serializers.CharField(source='sku', max_length=100)


class ProductSettingsSerializer(serializers.Serializer):
    manufacturer = serializers.CharField(required=False, allow_blank=True, max_length=200)
    madeIn = serializers.CharField(source='made_in', required=False, allow_blank=True, max_length=100)
    fssaiLicenseNumber = serializers.CharField(
        source='fssai_license_number', required=False, allow_blank=True, max_length=50
    )
    isReturnable = serializers.BooleanField(source='is_returnable', required=False)
    isCODAllowed = serializers.BooleanField(source='is_cod_allowed', required=False)
    isCancelable = serializers.BooleanField(source='is_cancelable', required=False)
    totalAllowedQuantity = serializers.IntegerField(source='total_allowed_quantity', required=False, min_value=0)
    productStatus = serializers.ChoiceField(
        source='product_status', choices=[choice for choice, _ in Product.STATUS_CHOICES], read_only=True
    )


class ProductPricingSerializer(serializers.Serializer):
    unitPrice = serializers.DecimalField(source='unit_price', max_digits=12, decimal_places=2)
    minimumOrderQty = serializers.IntegerField(source='minimum_order_qty', required=False, min_value=1)
    currentStockQty = serializers.IntegerField(source='current_stock_qty', required=False, min_value=0)
    discountType = serializers.ChoiceField(
        source='discount_type', choices=[choice for choice, _ in Product.DISCOUNT_TYPE_CHOICES],
        required=False, allow_blank=True
    )
    discountAmount = serializers.DecimalField(
        source='discount_amount', max_digits=12, decimal_places=2, required=False, min_value=Decimal('0')
    )
    taxAmount = serializers.DecimalField(
        source='tax_amount', max_digits=12, decimal_places=2, required=False, min_value=Decimal('0')
    )
    taxCalculation = serializers.ChoiceField(
        source='tax_calculation', choices=[choice for choice, _ in Product.TAX_CALCULATION_CHOICES],
        required=False, allow_blank=True
    )
    shippingCost = serializers.DecimalField(
        source='shipping_cost', max_digits=12, decimal_places=2, required=False, min_value=Decimal('0')
    )

    def validate_unitPrice(self, value):
        return validate_price_range(value, min_value=Decimal('0'))


class ProductImagesSerializer(serializers.Serializer):
    productThumbnail = serializers.URLField(source='thumbnail', max_length=500)
    additionalImages = serializers.ListField(
        source='additional_images', child=serializers.URLField(max_length=500), required=False
    )


class ProductSerializer(serializers.ModelSerializer):
    """Read representation shared by list and detail endpoints"""
    productTitle = serializers.CharField(source='title', read_only=True)
    productDescription = serializers.CharField(source='description', read_only=True)
    generalInfo = serializers.SerializerMethodField()
    settings = ProductSettingsSerializer(source='*', read_only=True)
    pricing = ProductPricingSerializer(source='*', read_only=True)
    images = ProductImagesSerializer(source='*', read_only=True)
    seo = serializers.JSONField(read_only=True)
    seller = SellerSummarySerializer(read_only=True)
    isFeatured = serializers.BooleanField(source='is_featured', read_only=True)
    totalSold = serializers.IntegerField(source='total_sold', read_only=True)
    totalSoldAmount = serializers.DecimalField(
        source='total_sold_amount', max_digits=14, decimal_places=2, read_only=True
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'productTitle', 'productDescription', 'generalInfo', 'settings',
            'pricing', 'images', 'seo', 'seller', 'isFeatured', 'totalSold',
            'totalSoldAmount', 'createdAt'
        ]
        read_only_fields = fields

    def get_generalInfo(self, obj):
        return {
            'category': obj.category_id,
            'categoryName': obj.category.name if obj.category_id else None,
            'subCategory': obj.sub_category_id,
            'subCategoryName': obj.sub_category.name if obj.sub_category_id else None,
            'subSubCategory': obj.sub_sub_category_id,
            'subSubCategoryName': obj.sub_sub_category.name if obj.sub_sub_category_id else None,
            'brand': obj.brand_id,
            'brandName': obj.brand.name if obj.brand_id else None,
            'productType': obj.product_type,
            'unit': obj.unit,
            'productSKU': obj.sku,
        }


class ProductSummarySerializer(serializers.ModelSerializer):
    """Compact product block embedded in orders, refunds and promotions"""
    productTitle = serializers.CharField(source='title', read_only=True)
    productSKU = serializers.CharField(source='sku', read_only=True)
    unitPrice = serializers.DecimalField(source='unit_price', max_digits=12, decimal_places=2, read_only=True)
    productThumbnail = serializers.CharField(source='thumbnail', read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'productTitle', 'productSKU', 'unitPrice', 'productThumbnail']
        read_only_fields = fields


class ProductWriteSerializer(serializers.ModelSerializer):
    """
    Allow-listed product fields for create and partial update.

    ``productStatus``, ``isFeatured`` and the sales counters are not writable
    here; they change through their own endpoints and order creation.
    """
    productTitle = serializers.CharField(source='title', max_length=255)
    productDescription = serializers.CharField(source='description', required=False, allow_blank=True)
    generalInfo = ProductGeneralInfoSerializer(source='*')
    settings = ProductSettingsSerializer(source='*', required=False)
    pricing = ProductPricingSerializer(source='*')
    images = ProductImagesSerializer(source='*', required=False)
    seo = serializers.JSONField(required=False)
    seller = serializers.PrimaryKeyRelatedField(queryset=Seller.objects.all())

    class Meta:
        model = Product
        fields = [
            'productTitle', 'productDescription', 'generalInfo', 'settings',
            'pricing', 'images', 'seo', 'seller'
        ]

    def validate_seo(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('seo must be an object')
        return value

    def validate(self, attrs):
        sku = attrs.get('sku')
        if sku:
            queryset = Product.objects.filter(sku=sku)
            if self.instance is not None:
                queryset = queryset.exclude(pk=self.instance.pk)
            if queryset.exists():
                raise serializers.ValidationError({'productSKU': 'Duplicate productSKU. Please use a unique SKU.'})

        unit_price = attrs.get('unit_price', getattr(self.instance, 'unit_price', None))
        discount_type = attrs.get('discount_type', getattr(self.instance, 'discount_type', ''))
        validate_discount_amount(discount_type, attrs.get('discount_amount'), unit_price)

        category = attrs.get('category', getattr(self.instance, 'category', None))
        sub_category = attrs.get('sub_category')
        if sub_category is not None and category is not None and sub_category.category_id != category.id:
            raise serializers.ValidationError({'subCategory': 'Sub category does not belong to the selected category'})
        sub_sub_category = attrs.get('sub_sub_category')
        if sub_sub_category is not None:
            parent = sub_category or getattr(self.instance, 'sub_category', None)
            if parent is None or sub_sub_category.sub_category_id != parent.id:
                raise serializers.ValidationError(
                    {'subSubCategory': 'Sub sub category does not belong to the selected sub category'}
                )
        return attrs
