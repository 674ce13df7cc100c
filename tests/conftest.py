"""
Test configuration for the marketplace admin server.
"""
import io
import pytest
from unittest.mock import MagicMock, patch
from rest_framework.test import APIClient


@pytest.fixture
def staff_user(db):
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def api_client(staff_user):
    """API client authenticated as a staff user."""
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def image_store():
    """
    Stub the image store. Uploads return a delivery URL and public id; the
    resource lookup reports a 5:1 image unless a test changes it.
    """
    store = MagicMock()
    store.upload.return_value = {
        'secure_url': 'https://res.cloudinary.com/demo/image/upload/v1700000000/uploads/image.png',
        'public_id': 'uploads/image',
        'width': 1000,
        'height': 200,
    }
    store.get_resource.return_value = {'width': 1000, 'height': 200}
    store.destroy.return_value = {'result': 'ok'}
    with patch('apps.common.storage.get_image_store', return_value=store):
        yield store


@pytest.fixture
def push_client():
    """Stub the push provider; every token is delivered."""
    from apps.notifications.services import PushResult

    client = MagicMock()
    client.send_multicast.side_effect = lambda tokens, *args, **kwargs: PushResult(success_count=len(tokens))
    with patch('apps.notifications.services.notification_service.get_push_client', return_value=client):
        yield client


@pytest.fixture
def image_file():
    from django.core.files.uploadedfile import SimpleUploadedFile
    return SimpleUploadedFile('banner.png', b'\x89PNG\r\n\x1a\nfake', content_type='image/png')


@pytest.fixture
def csv_upload():
    """Build an uploaded ``.csv`` file from a header row and data rows."""
    from django.core.files.uploadedfile import SimpleUploadedFile

    def build(headers, rows, name='import.csv'):
        buffer = io.StringIO()
        buffer.write(','.join(headers) + '\n')
        for row in rows:
            buffer.write(','.join(str(value) for value in row) + '\n')
        return SimpleUploadedFile(name, buffer.getvalue().encode('utf-8'), content_type='text/csv')

    return build
