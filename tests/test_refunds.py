"""
Tests for refund requests: eligibility, snapshots, listing, search and export.
"""
import pytest
from unittest.mock import patch
from decimal import Decimal

from apps.common.exceptions import ServiceError
from apps.orders.models import Order, Refund, RefundLog
from apps.orders.services import RefundService
from tests.factories import create_order_with_items, CustomerFactory

REFUNDS = '/api/orders/refunds'


def delivered_paid_order(**kwargs):
    kwargs.setdefault('status', Order.STATUS_DELIVERED)
    kwargs.setdefault('payment_status', Order.PAYMENT_PAID)
    return create_order_with_items(**kwargs)


@pytest.mark.django_db
class TestRefundEligibility:

    @pytest.mark.parametrize('order_status,payment_status,message', [
        (Order.STATUS_DELIVERED, Order.PAYMENT_PENDING, 'Refunds can only be requested for paid orders.'),
        (Order.STATUS_CONFIRMED, Order.PAYMENT_PAID, 'Refunds can only be requested for delivered orders.'),
    ])
    def test_ineligible_order_creates_nothing(self, api_client, order_status, payment_status, message):
        order = create_order_with_items(status=order_status, payment_status=payment_status)

        response = api_client.post(
            f'{REFUNDS}/', {'orderId': order.id, 'description': 'Damaged box'}, format='json'
        )

        assert response.status_code == 400
        assert response.data['msg'] == message
        assert Refund.objects.count() == 0
        assert RefundLog.objects.count() == 0

    def test_second_request_for_same_products_is_rejected(self, api_client):
        order = delivered_paid_order(item_count=1)
        product_id = order.items.get().product_id
        first = api_client.post(f'{REFUNDS}/', {'orderId': order.id, 'description': 'Damaged'}, format='json')
        assert first.status_code == 201

        second = api_client.post(f'{REFUNDS}/', {'orderId': order.id, 'description': 'Again'}, format='json')

        assert second.status_code == 400
        assert second.data['msg'] == f'Refund already requested for product: {product_id}'
        assert Refund.objects.filter(order=order).count() == 1

    def test_missing_description(self, api_client):
        order = delivered_paid_order()

        response = api_client.post(f'{REFUNDS}/', {'orderId': order.id}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Missing required fields'

    def test_missing_order(self, api_client):
        response = api_client.post(f'{REFUNDS}/', {'orderId': 999999, 'description': 'x'}, format='json')

        assert response.status_code == 404


@pytest.mark.django_db
class TestRefundCreation:

    def test_snapshot_and_initial_log(self, api_client):
        order = delivered_paid_order(item_count=2)

        response = api_client.post(
            f'{REFUNDS}/', {'orderId': order.id, 'description': 'Wrong flavour'}, format='json'
        )

        assert response.status_code == 201
        refund = Refund.objects.get()
        assert refund.status == Refund.STATUS_PENDING
        assert refund.payment_method == order.payment_method
        assert refund.seller_id == order.seller_id
        assert len(refund.products) == 2
        assert refund.refundable_amount == Decimal('400.00')
        assert refund.reason == {'description': 'Wrong flavour', 'images': []}
        assert refund.customer_details['name'] == order.customer.full_name

        log = refund.logs.get()
        assert log.actor_type == RefundLog.ACTOR_CUSTOMER
        assert log.actor_id == order.customer_id
        assert log.status == Refund.STATUS_PENDING
        assert log.note == 'Refund initiated by customer'

        data = response.data['data']
        assert data['refundStatus'] == 'Pending'
        assert data['products'][0]['productSKU'] == order.items.first().product.sku

    def test_snapshot_line_total_includes_tax_and_discount(self):
        order = delivered_paid_order(item_count=1)
        item = order.items.get()
        item.tax = Decimal('18.00')
        item.item_discount = Decimal('8.00')
        item.save()

        refund = RefundService.create_refund({'orderId': order.id, 'description': 'Late'})

        assert refund.products[0]['totalPrice'] == '210.00'
        assert refund.refundable_amount == Decimal('210.00')

    def test_reason_images_are_uploaded(self, api_client, image_store, image_file):
        order = delivered_paid_order(item_count=1)

        response = api_client.post(
            f'{REFUNDS}/',
            {'orderId': order.id, 'description': 'Broken seal', 'images': [image_file]},
            format='multipart'
        )

        assert response.status_code == 201
        assert response.data['data']['refundReason']['images'] == [image_store.upload.return_value['secure_url']]
        assert image_store.upload.call_args[0][1] == 'refunds'

    def test_product_ids_on_model(self):
        order = delivered_paid_order(item_count=2)
        refund = RefundService.create_refund({'orderId': order.id, 'description': 'x'})

        assert refund.product_ids == set(order.items.values_list('product_id', flat=True))


@pytest.mark.django_db
class TestRefundListing:

    def test_status_is_required(self, api_client):
        response = api_client.get(f'{REFUNDS}/')

        assert response.status_code == 400
        assert response.data['msg'] == 'Refund status is required'

    def test_list_by_status(self, api_client):
        pending = RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'a'})
        approved = RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'b'})
        Refund.objects.filter(pk=approved.pk).update(status=Refund.STATUS_APPROVED)

        response = api_client.get(f'{REFUNDS}/', {'refundStatus': 'Pending'})

        assert response.status_code == 200
        assert [row['id'] for row in response.data['data']['list']] == [pending.id]

    def test_search_by_customer_name(self):
        customer = CustomerFactory(first_name='Meera', last_name='Iyer')
        match = RefundService.create_refund({
            'orderId': delivered_paid_order(customer=customer).id, 'description': 'a'
        })
        RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'b'})

        results = RefundService.list_refunds('Pending', 'meera')

        assert list(results) == [match]

    def test_search_by_order_number_and_primary_key(self):
        order = delivered_paid_order()
        refund = RefundService.create_refund({'orderId': order.id, 'description': 'a'})
        RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'b'})

        assert list(RefundService.list_refunds('Pending', order.order_id.lower())) == [refund]
        # digits also match inside refund numbers
        assert refund in RefundService.list_refunds('Pending', str(order.id))

    def test_non_ascii_digit_search(self, api_client):
        RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'a'})

        response = api_client.get(f'{REFUNDS}/', {'refundStatus': 'Pending', 'search': '\u00b2'})

        assert response.status_code == 200
        assert response.data['data']['list'] == []

    def test_list_resolves_products_once_per_page(self, api_client):
        orders = [delivered_paid_order(item_count=2) for _ in range(3)]
        for order in orders:
            RefundService.create_refund({'orderId': order.id, 'description': 'a'})
        skus = {item.product_id: item.product.sku for order in orders for item in order.items.all()}

        with patch('apps.orders.serializers.refund_serializers.Product') as serializer_product:
            response = api_client.get(f'{REFUNDS}/', {'refundStatus': 'Pending'})

        serializer_product.objects.in_bulk.assert_not_called()
        lines = [line for row in response.data['data']['list'] for line in row['products']]
        assert len(lines) == 6
        assert {line['productId']: line['productSKU'] for line in lines} == skus

    def test_service_requires_status(self):
        with pytest.raises(ServiceError):
            RefundService.list_refunds('')

    def test_detail(self, api_client):
        refund = RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'a'})

        response = api_client.get(f'{REFUNDS}/{refund.id}/')

        assert response.status_code == 200
        assert response.data['data']['refundId'] == refund.refund_id
        assert len(response.data['data']['refundLogs']) == 1


@pytest.mark.django_db
class TestRefundDecisionAndExport:

    def test_decision_is_not_implemented(self, api_client):
        refund = RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'a'})

        response = api_client.patch(f'{REFUNDS}/{refund.id}/decision/', {'status': 'Approved'}, format='json')

        assert response.status_code == 501
        refund.refresh_from_db()
        assert refund.status == Refund.STATUS_PENDING

    def test_export_csv(self, api_client):
        refund = RefundService.create_refund({'orderId': delivered_paid_order().id, 'description': 'Dented'})

        response = api_client.get(f'{REFUNDS}/export/', {'refundStatus': 'Pending', 'format': 'csv'})

        assert response.status_code == 200
        assert response['Content-Disposition'] == 'attachment; filename="refunds-pending.csv"'
        lines = response.content.decode().splitlines()
        assert lines[0].startswith('Refund ID,Order ID,Payment Method,Refund Status')
        assert lines[1].startswith(refund.refund_id)
        assert 'Dented' in lines[1]

    def test_export_requires_status(self, api_client):
        response = api_client.get(f'{REFUNDS}/export/', {'format': 'csv'})

        assert response.status_code == 400

    def test_export_rejects_unknown_format(self, api_client):
        response = api_client.get(f'{REFUNDS}/export/', {'refundStatus': 'Pending', 'format': 'pdf'})

        assert response.status_code == 400

    def test_export_without_rows(self, api_client):
        response = api_client.get(f'{REFUNDS}/export/', {'refundStatus': 'Rejected', 'format': 'excel'})

        assert response.status_code == 404
