"""
Tests for seller withdrawal methods.
"""
import pytest

from apps.payments.models import WithdrawalMethod
from tests.factories import WithdrawalMethodFactory

METHODS = '/api/payments/withdrawal-methods'


def method_payload(**overrides):
    payload = {
        'methodName': 'Bank Transfer',
        'fields': [
            {'fieldName': 'Account Number', 'inputType': 'Number', 'isRequired': True},
            {'fieldName': 'IFSC', 'inputType': 'String', 'placeholder': 'SBIN0000001'},
        ],
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestWithdrawalMethodCreate:

    def test_create(self, api_client):
        response = api_client.post(f'{METHODS}/', method_payload(), format='json')

        assert response.status_code == 201
        assert response.data['msg'] == 'Withdrawal method added successfully.'
        data = response.data['data']
        assert data['methodName'] == 'Bank Transfer'
        assert data['isActive'] is True
        assert data['isDefault'] is False
        assert data['fields'][1]['placeholder'] == 'SBIN0000001'
        assert data['fields'][0]['isRequired'] is True

    def test_duplicate_name(self, api_client):
        WithdrawalMethodFactory(method_name='Bank Transfer')

        response = api_client.post(f'{METHODS}/', method_payload(), format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Invalid withdrawal method data'
        assert 'methodName' in response.data['errors']

    def test_fields_must_not_be_empty(self, api_client):
        response = api_client.post(f'{METHODS}/', method_payload(fields=[]), format='json')

        assert response.status_code == 400
        assert WithdrawalMethod.objects.count() == 0

    def test_unknown_input_type(self, api_client):
        payload = method_payload(fields=[{'fieldName': 'Account', 'inputType': 'Checkbox'}])

        response = api_client.post(f'{METHODS}/', payload, format='json')

        assert response.status_code == 400

    def test_only_one_default(self, api_client):
        first = api_client.post(f'{METHODS}/', method_payload(isDefault=True), format='json')
        second = api_client.post(
            f'{METHODS}/', method_payload(methodName='UPI', isDefault=True), format='json'
        )

        assert first.status_code == second.status_code == 201
        defaults = WithdrawalMethod.objects.filter(is_default=True)
        assert [method.method_name for method in defaults] == ['UPI']


@pytest.mark.django_db
class TestWithdrawalMethodDetail:

    def test_list(self, api_client):
        WithdrawalMethodFactory.create_batch(2)

        response = api_client.get(f'{METHODS}/')

        assert response.status_code == 200
        assert len(response.data['data']) == 2

    def test_get(self, api_client):
        method = WithdrawalMethodFactory()

        response = api_client.get(f'{METHODS}/{method.id}/')

        assert response.data['data']['methodName'] == method.method_name

    def test_missing(self, api_client):
        response = api_client.get(f'{METHODS}/999999/')

        assert response.status_code == 404
        assert response.data['msg'] == 'Withdrawal method not found'

    def test_update_keeps_own_name(self, api_client):
        method = WithdrawalMethodFactory(method_name='Bank Transfer')

        response = api_client.put(f'{METHODS}/{method.id}/', method_payload(), format='json')

        assert response.status_code == 200
        method.refresh_from_db()
        assert len(method.fields) == 2

    def test_update_requires_name_and_fields(self, api_client):
        method = WithdrawalMethodFactory()

        response = api_client.put(f'{METHODS}/{method.id}/', {'methodName': 'PayPal'}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Method name and fields are required'

    def test_delete(self, api_client):
        method = WithdrawalMethodFactory()

        response = api_client.delete(f'{METHODS}/{method.id}/')

        assert response.status_code == 200
        assert not WithdrawalMethod.objects.filter(pk=method.pk).exists()


@pytest.mark.django_db
class TestWithdrawalMethodStatus:

    def test_toggle_active(self, api_client):
        method = WithdrawalMethodFactory(is_active=True)

        response = api_client.patch(f'{METHODS}/{method.id}/status/', {'field': 'isActive'}, format='json')

        assert response.status_code == 200
        assert response.data['data']['isActive'] is False
        api_client.patch(f'{METHODS}/{method.id}/status/', {'field': 'isActive'}, format='json')
        method.refresh_from_db()
        assert method.is_active is True

    def test_make_default_moves_the_flag(self, api_client):
        current = WithdrawalMethodFactory(is_default=True)
        method = WithdrawalMethodFactory()

        response = api_client.patch(f'{METHODS}/{method.id}/status/', {'field': 'isDefault'}, format='json')

        assert response.data['data']['isDefault'] is True
        current.refresh_from_db()
        assert current.is_default is False

    def test_default_stays_default(self, api_client):
        method = WithdrawalMethodFactory(is_default=True)

        response = api_client.patch(f'{METHODS}/{method.id}/status/', {'field': 'isDefault'}, format='json')

        assert response.status_code == 200
        method.refresh_from_db()
        assert method.is_default is True

    def test_invalid_field(self, api_client):
        method = WithdrawalMethodFactory()

        response = api_client.patch(f'{METHODS}/{method.id}/status/', {'field': 'name'}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Invalid field specified'
