"""
Refund serializers.
"""
from rest_framework import serializers

from apps.products.models import Product
from ..models import Refund, RefundLog


class RefundLogSerializer(serializers.ModelSerializer):
    actorType = serializers.CharField(source='actor_type', read_only=True)
    actorId = serializers.IntegerField(source='actor_id', read_only=True)
    actorName = serializers.CharField(source='actor_name', read_only=True)

    class Meta:
        model = RefundLog
        fields = ['id', 'actorType', 'actorId', 'actorName', 'date', 'status', 'note']
        read_only_fields = fields


class RefundSerializer(serializers.ModelSerializer):
    """Refund with populated order, product and seller details"""
    refundId = serializers.CharField(source='refund_id', read_only=True)
    refundRequestedDate = serializers.DateTimeField(source='requested_date', read_only=True)
    refundStatus = serializers.CharField(source='status', read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    order = serializers.SerializerMethodField()
    products = serializers.SerializerMethodField()
    refundableAmount = serializers.DecimalField(
        source='refundable_amount', max_digits=14, decimal_places=2, read_only=True
    )
    refundReason = serializers.JSONField(source='reason', read_only=True)
    seller = serializers.SerializerMethodField()
    customerDetails = serializers.JSONField(source='customer_details', read_only=True)
    refundLogs = RefundLogSerializer(source='logs', many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Refund
        fields = [
            'id', 'refundId', 'refundRequestedDate', 'refundStatus', 'paymentMethod', 'order',
            'products', 'refundableAmount', 'refundReason', 'seller', 'customerDetails',
            'refundLogs', 'createdAt'
        ]
        read_only_fields = fields

    def get_order(self, obj):
        order = obj.order
        return {
            'id': order.id,
            'orderId': order.order_id,
            'total': str(order.total),
            'paymentMethod': order.payment_method,
        }

    def get_seller(self, obj):
        seller = obj.seller
        return {
            'id': seller.id,
            'shopName': seller.shop_name,
            'email': seller.email,
            'phoneNumber': seller.phone_number,
        }

    def get_products(self, obj):
        """Snapshot lines enriched with the product's current SKU and thumbnail"""
        products = self.context.get('products_by_id')
        if products is None:
            products = Product.objects.in_bulk([item.get('productId') for item in obj.products or []])
        lines = []
        for item in obj.products or []:
            product = products.get(item.get('productId'))
            lines.append({
                **item,
                'productSKU': product.sku if product else None,
                'productThumbnail': product.thumbnail if product else None,
            })
        return lines
