"""
Tests for the customer and seller registries and customer addresses.
"""
import pytest
from django.contrib.auth.hashers import check_password

from apps.users.models import Customer, CustomerAddress, Seller
from tests.factories import (
    CustomerFactory, CustomerAddressFactory, SellerFactory, OrderFactory
)

USERS = '/api/users'


@pytest.mark.django_db
class TestCustomers:

    def test_list_includes_order_counts(self, api_client):
        customer = CustomerFactory()
        OrderFactory.create_batch(2, customer=customer)

        response = api_client.get(f'{USERS}/customers/')

        assert response.status_code == 200
        row = response.data['data']['list'][0]
        assert row['id'] == customer.id
        assert row['totalOrders'] == 2
        assert response.data['data']['page']['total'] == 1

    def test_search(self, api_client):
        match = CustomerFactory(first_name='Kavya')
        CustomerFactory(first_name='Rohan')

        response = api_client.get(f'{USERS}/customers/', {'search': 'kav'})

        assert [row['id'] for row in response.data['data']['list']] == [match.id]

    def test_detail_and_missing(self, api_client):
        customer = CustomerFactory()

        assert api_client.get(f'{USERS}/customers/{customer.id}/').data['data']['totalOrders'] == 0
        missing = api_client.get(f'{USERS}/customers/999999/')
        assert missing.status_code == 404
        assert missing.data['msg'] == 'Customer not found'

    def test_update_only_touches_sent_fields(self, api_client):
        customer = CustomerFactory(first_name='Old', last_name='Name')

        response = api_client.patch(f'{USERS}/customers/{customer.id}/', {'firstName': 'New'}, format='json')

        assert response.status_code == 200
        customer.refresh_from_db()
        assert customer.first_name == 'New'
        assert customer.last_name == 'Name'

    def test_update_rejects_taken_phone(self, api_client):
        CustomerFactory(phone_number='9000000001')
        customer = CustomerFactory()

        response = api_client.patch(
            f'{USERS}/customers/{customer.id}/', {'phoneNumber': '9000000001'}, format='json'
        )

        assert response.status_code == 400
        assert response.data['msg'] == 'Invalid customer data'

    def test_block_and_unblock(self, api_client):
        customer = CustomerFactory()

        blocked = api_client.patch(f'{USERS}/customers/{customer.id}/block/', {'isBlock': 'Block'}, format='json')
        assert blocked.data['msg'] == 'Customer blocked successfully'
        customer.refresh_from_db()
        assert customer.is_blocked

        unblocked = api_client.patch(
            f'{USERS}/customers/{customer.id}/block/', {'isBlock': 'Unblock'}, format='json'
        )
        assert unblocked.data['msg'] == 'Customer unblocked successfully'
        customer.refresh_from_db()
        assert customer.is_block == Customer.UNBLOCK

    def test_block_value_is_checked(self, api_client):
        customer = CustomerFactory()

        response = api_client.patch(f'{USERS}/customers/{customer.id}/block/', {'isBlock': 'yes'}, format='json')

        assert response.status_code == 400


@pytest.mark.django_db
class TestSellers:

    def _payload(self, **overrides):
        payload = {
            'firstName': 'Nila',
            'lastName': 'Menon',
            'shopName': 'Nila Spices',
            'phoneNumber': '9876500000',
            'email': 'Nila@Example.com',
            'password': 'secret123',
            'confirmPassword': 'secret123',
        }
        payload.update(overrides)
        return payload

    def test_register(self, api_client):
        response = api_client.post(f'{USERS}/sellers/', self._payload(), format='json')

        assert response.status_code == 201
        seller = Seller.objects.get(pk=response.data['data']['sellerId'])
        assert seller.status == Seller.STATUS_PENDING
        assert seller.email == 'nila@example.com'
        assert check_password('secret123', seller.password)

    def test_passwords_must_match(self, api_client):
        response = api_client.post(
            f'{USERS}/sellers/', self._payload(confirmPassword='other123'), format='json'
        )

        assert response.status_code == 400
        assert 'confirmPassword' in response.data['errors']

    def test_duplicate_contact(self, api_client):
        SellerFactory(phone_number='9876500000')

        response = api_client.post(f'{USERS}/sellers/', self._payload(), format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Seller with this email or phone number already exists'

    def test_invalid_phone(self, api_client):
        response = api_client.post(f'{USERS}/sellers/', self._payload(phoneNumber='12ab'), format='json')

        assert response.status_code == 400

    def test_list_filters_by_status(self, api_client):
        pending = SellerFactory(status=Seller.STATUS_PENDING)
        SellerFactory(status=Seller.STATUS_APPROVED)

        response = api_client.get(f'{USERS}/sellers/', {'status': 'Pending'})

        assert [row['id'] for row in response.data['data']['list']] == [pending.id]

    def test_password_is_never_returned(self, api_client):
        seller = SellerFactory()

        response = api_client.get(f'{USERS}/sellers/{seller.id}/')

        assert 'password' not in response.data['data']
        assert response.data['data']['shopName'] == seller.shop_name

    def test_status_change(self, api_client):
        seller = SellerFactory(status=Seller.STATUS_PENDING)

        response = api_client.patch(f'{USERS}/sellers/{seller.id}/status/', {'status': 'Blocked'}, format='json')

        assert response.status_code == 200
        seller.refresh_from_db()
        assert seller.status == Seller.STATUS_BLOCKED

    def test_unknown_status(self, api_client):
        seller = SellerFactory()

        response = api_client.patch(f'{USERS}/sellers/{seller.id}/status/', {'status': 'Gone'}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Invalid status'

    def test_update_profile(self, api_client):
        seller = SellerFactory()

        response = api_client.patch(f'{USERS}/sellers/{seller.id}/', {'shopName': 'Renamed'}, format='json')

        assert response.data['data']['shopName'] == 'Renamed'


@pytest.mark.django_db
class TestCustomerAddresses:

    def _block(self, **overrides):
        block = {
            'contactPersonName': 'Asha Rao',
            'phone': '9876543210',
            'country': 'India',
            'city': 'Pune',
            'zipCode': '411001',
            'address': '12 MG Road',
        }
        block.update(overrides)
        return block

    def test_create(self, api_client):
        customer = CustomerFactory()

        response = api_client.post(f'{USERS}/addresses/', {
            'customer': customer.id,
            'billingAddress': self._block(),
            'shippingAddress': self._block(city='Mumbai'),
        }, format='json')

        assert response.status_code == 201
        address = CustomerAddress.objects.get()
        assert address.shipping_address['city'] == 'Mumbai'
        assert address.billing_address['addressType'] == 'Permanent'

    def test_create_requires_blocks(self, api_client):
        customer = CustomerFactory()

        response = api_client.post(f'{USERS}/addresses/', {'customer': customer.id}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Validation error'

    def test_list_for_customer(self, api_client):
        address = CustomerAddressFactory()
        CustomerAddressFactory()

        response = api_client.get(f'{USERS}/addresses/', {'customer': address.customer_id})

        assert [row['id'] for row in response.data['data']] == [address.id]

    def test_cannot_move_to_another_customer(self, api_client):
        address = CustomerAddressFactory()
        other = CustomerFactory()

        response = api_client.patch(f'{USERS}/addresses/{address.id}/', {'customer': other.id}, format='json')

        assert response.status_code == 400

    def test_delete(self, api_client):
        address = CustomerAddressFactory()

        response = api_client.delete(f'{USERS}/addresses/{address.id}/')

        assert response.status_code == 200
        assert response.data['msg'] == 'Customer Address deleted'
        assert not CustomerAddress.objects.exists()
