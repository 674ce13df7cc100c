"""
Banner serializers.
"""
from rest_framework import serializers
from ..models import Banner, Product


class BannerSerializer(serializers.ModelSerializer):
    bannerType = serializers.CharField(source='banner_type', read_only=True)
    bannerUrl = serializers.CharField(source='banner_url', read_only=True)
    resourceType = serializers.CharField(source='resource_type', read_only=True)
    productId = serializers.IntegerField(source='product_id', read_only=True)
    bannerImageRatio = serializers.CharField(source='banner_image_ratio', read_only=True)
    imageUrl = serializers.CharField(source='image_url', read_only=True)
    isPublished = serializers.BooleanField(source='is_published', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Banner
        fields = [
            'id', 'bannerType', 'bannerUrl', 'resourceType', 'productId',
            'bannerImageRatio', 'imageUrl', 'isPublished', 'createdAt'
        ]
        read_only_fields = fields


class BannerWriteSerializer(serializers.ModelSerializer):
    """Allow-listed banner fields; the image arrives as an upload"""
    bannerType = serializers.ChoiceField(source='banner_type', choices=list(Banner.BANNER_RATIOS))
    bannerUrl = serializers.CharField(source='banner_url', max_length=500)
    resourceType = serializers.ChoiceField(
        source='resource_type', choices=[choice for choice, _ in Banner.RESOURCE_TYPE_CHOICES]
    )
    product = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(), required=False, allow_null=True
    )
    bannerImageRatio = serializers.CharField(source='banner_image_ratio', max_length=10)
    isPublished = serializers.BooleanField(source='is_published', required=False)

    class Meta:
        model = Banner
        fields = ['bannerType', 'bannerUrl', 'resourceType', 'product', 'bannerImageRatio', 'isPublished']

    def validate(self, attrs):
        banner_type = attrs.get('banner_type', getattr(self.instance, 'banner_type', None))
        ratio = attrs.get('banner_image_ratio', getattr(self.instance, 'banner_image_ratio', None))
        expected = Banner.expected_ratio(banner_type)
        if expected and ratio != expected:
            raise serializers.ValidationError({
                'bannerImageRatio': f'{banner_type} requires a {expected} image ratio'
            })
        if attrs.get('resource_type') == 'Product' and not attrs.get('product') and self.instance is None:
            raise serializers.ValidationError({'product': 'A product is required for Product banners'})
        return attrs
