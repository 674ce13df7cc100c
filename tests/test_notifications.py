"""
Tests for device tokens, notification fan-out and the push client.
"""
import pytest
import requests
from unittest.mock import MagicMock, patch

from apps.notifications.models import DeviceToken, Notification
from apps.notifications.services import PushResult
from apps.notifications.services.push_service import PushClient, PushError
from tests.factories import DeviceTokenFactory

NOTIFICATIONS = '/api/notifications'


@pytest.mark.django_db
class TestDeviceTokens:

    def test_save_new_token(self, api_client):
        response = api_client.post(f'{NOTIFICATIONS}/device-tokens/', {'token': 'abc-123'}, format='json')

        assert response.status_code == 201
        assert response.data['msg'] == 'Device token saved successfully.'
        assert DeviceToken.objects.filter(token='abc-123').exists()

    def test_save_existing_token(self, api_client):
        DeviceTokenFactory(token='abc-123')

        response = api_client.post(f'{NOTIFICATIONS}/device-tokens/', {'token': 'abc-123'}, format='json')

        assert response.status_code == 200
        assert response.data['msg'] == 'Device token already exists.'
        assert DeviceToken.objects.count() == 1

    def test_token_required(self, api_client):
        response = api_client.post(f'{NOTIFICATIONS}/device-tokens/', {}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Device token is required.'

    def test_list(self, api_client):
        DeviceTokenFactory.create_batch(2)

        response = api_client.get(f'{NOTIFICATIONS}/device-tokens/')

        assert response.data['data']['total'] == 2


@pytest.mark.django_db
class TestSendNotification:

    def test_sends_to_stored_and_requested_tokens(self, api_client, push_client):
        DeviceTokenFactory(token='stored-1')
        DeviceTokenFactory(token='stored-2')

        response = api_client.post(f'{NOTIFICATIONS}/', {
            'title': 'Sale',
            'description': 'Everything 10% off',
            'recipientTokens': ['stored-2', 'extra-1'],
        }, format='json')

        assert response.status_code == 200
        data = response.data['data']
        assert data['recipientTokens'] == ['stored-1', 'stored-2', 'extra-1']
        assert data['notificationCount'] == 3
        assert data['failureCount'] == 0
        assert data['status'] == 'Sent'
        push_client.send_multicast.assert_called_once_with(
            ['stored-1', 'stored-2', 'extra-1'], 'Sale', 'Everything 10% off', None
        )

    def test_recipient_tokens_as_json_string(self, api_client, push_client):
        response = api_client.post(f'{NOTIFICATIONS}/', {
            'title': 'Sale',
            'description': 'Body',
            'recipientTokens': '["t-1", "t-2"]',
        }, format='multipart')

        assert response.status_code == 200
        assert response.data['data']['recipientTokens'] == ['t-1', 't-2']

    def test_malformed_recipient_tokens(self, api_client, push_client):
        response = api_client.post(f'{NOTIFICATIONS}/', {
            'title': 'Sale', 'description': 'Body', 'recipientTokens': '[not json',
        }, format='multipart')

        assert response.status_code == 400
        assert response.data['msg'] == 'Invalid recipient tokens format.'

    def test_recipient_tokens_must_be_strings(self, api_client, push_client):
        response = api_client.post(f'{NOTIFICATIONS}/', {
            'title': 'Sale', 'description': 'Body', 'recipientTokens': [1, 2],
        }, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Recipient tokens must be an array of strings.'

    def test_title_and_description_required(self, api_client, push_client):
        response = api_client.post(f'{NOTIFICATIONS}/', {'title': 'Sale'}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Title and description are required.'
        push_client.send_multicast.assert_not_called()

    def test_no_tokens_anywhere(self, api_client, push_client):
        response = api_client.post(f'{NOTIFICATIONS}/', {'title': 'Sale', 'description': 'Body'}, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'No valid recipient tokens found.'
        assert Notification.objects.count() == 0

    def test_image_is_uploaded(self, api_client, push_client, image_store, image_file):
        DeviceTokenFactory()

        response = api_client.post(f'{NOTIFICATIONS}/', {
            'title': 'Sale', 'description': 'Body', 'image': image_file,
        }, format='multipart')

        url = image_store.upload.return_value['secure_url']
        assert response.data['data']['imageUrl'] == url
        assert push_client.send_multicast.call_args[0][3] == url

    def test_partial_failures_are_counted(self, api_client, push_client):
        DeviceTokenFactory.create_batch(3)
        push_client.send_multicast.side_effect = None
        push_client.send_multicast.return_value = PushResult(success_count=2, failure_count=1)

        response = api_client.post(f'{NOTIFICATIONS}/', {'title': 'Sale', 'description': 'Body'}, format='json')

        assert response.data['data']['notificationCount'] == 2
        assert response.data['data']['failureCount'] == 1

    def test_provider_failure_marks_notification_failed(self, api_client, push_client):
        DeviceTokenFactory()
        push_client.send_multicast.side_effect = PushError('unreachable')

        response = api_client.post(f'{NOTIFICATIONS}/', {'title': 'Sale', 'description': 'Body'}, format='json')

        assert response.status_code == 500
        notification = Notification.objects.get()
        assert notification.status == Notification.STATUS_FAILED


@pytest.mark.django_db
class TestResendNotification:

    def test_resend_adds_to_counts(self, api_client, push_client):
        notification = Notification.objects.create(
            title='Sale', description='Body', recipient_tokens=['a', 'b'],
            notification_count=2, status=Notification.STATUS_FAILED
        )

        response = api_client.post(f'{NOTIFICATIONS}/{notification.id}/resend/')

        assert response.status_code == 200
        notification.refresh_from_db()
        assert notification.notification_count == 4
        assert notification.status == Notification.STATUS_SENT

    def test_resend_missing(self, api_client, push_client):
        response = api_client.post(f'{NOTIFICATIONS}/999999/resend/')

        assert response.status_code == 404
        assert response.data['msg'] == 'Notification not found.'


class TestPushClient:

    def test_missing_configuration(self, settings):
        settings.FCM_ACCESS_TOKEN = ''

        with pytest.raises(PushError):
            PushClient()

    @patch('apps.notifications.services.push_service.requests.post')
    def test_counts_rejected_tokens(self, mock_post):
        mock_post.side_effect = [MagicMock(status_code=200), MagicMock(status_code=404)]

        result = PushClient().send_multicast(['good', 'stale'], 'Title', 'Body', 'https://example.com/i.png')

        assert result.success_count == 1
        assert result.failure_count == 1
        assert result.failed_tokens == ['stale']
        message = mock_post.call_args_list[0][1]['json']['message']
        assert message['token'] == 'good'
        assert message['notification']['image'] == 'https://example.com/i.png'

    @patch('apps.notifications.services.push_service.requests.post')
    def test_network_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError('down')

        with pytest.raises(PushError):
            PushClient().send_multicast(['t'], 'Title', 'Body')
