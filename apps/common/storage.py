"""
Cloudinary image store integration utilities
"""
import hashlib
import logging
import os
import time

import certifi
import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class ImageStoreError(Exception):
    """Raised when the image store rejects a request or cannot be reached."""


def public_id_from_url(url):
    """
    Derive the image store public id from a delivery URL.

    ``https://res.cloudinary.com/demo/image/upload/v1736191710/brands/logo.png``
    becomes ``brands/logo``. Returns ``None`` when the URL has no ``/upload/``
    segment.
    """
    if not url:
        return None
    marker = '/upload/'
    upload_index = url.find(marker)
    if upload_index == -1:
        return None

    parts = url[upload_index + len(marker):].split('/')
    # Drop the version segment
    parts = parts[1:]
    public_id = '/'.join(parts).split('.')[0]
    return public_id or None


class ImageStore:
    """Minimal Cloudinary REST client: upload, destroy and resource lookup"""

    def __init__(self):
        self.cloud_name = settings.CLOUDINARY_CLOUD_NAME
        self.api_key = settings.CLOUDINARY_API_KEY
        self.api_secret = settings.CLOUDINARY_API_SECRET
        self.timeout = settings.CLOUDINARY_TIMEOUT
        self.base_url = f"https://api.cloudinary.com/v1_1/{self.cloud_name}"
        self.verify_ssl = os.getenv('CLOUDINARY_VERIFY_SSL', certifi.where())

        if not self.cloud_name or not self.api_key or not self.api_secret:
            raise ValueError(
                "Cloudinary configuration is missing. Please set CLOUDINARY_CLOUD_NAME, "
                "CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET in environment variables."
            )

    def _sign(self, params):
        """Signature over the alphabetically sorted parameters plus the API secret."""
        to_sign = '&'.join(f"{key}={params[key]}" for key in sorted(params) if params[key] not in (None, ''))
        return hashlib.sha1(f"{to_sign}{self.api_secret}".encode('utf-8')).hexdigest()

    def _signed_params(self, **params):
        params['timestamp'] = int(time.time())
        params['signature'] = self._sign(params)
        params['api_key'] = self.api_key
        return params

    def _handle(self, response):
        try:
            data = response.json()
        except ValueError:
            raise ImageStoreError(f"Invalid response from image store (HTTP {response.status_code})")
        if response.status_code >= 400 or 'error' in data:
            message = data.get('error', {}).get('message', 'Unknown error')
            raise ImageStoreError(f"Image store error (HTTP {response.status_code}): {message}")
        return data

    def upload(self, uploaded_file, folder):
        """
        Upload a file and return the stored resource description
        (``secure_url``, ``public_id``, ``width``, ``height``).
        """
        data = self._signed_params(folder=folder)
        files = {'file': (uploaded_file.name, uploaded_file.read(), getattr(uploaded_file, 'content_type', None))}
        try:
            response = requests.post(
                f"{self.base_url}/image/upload",
                data=data,
                files=files,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            raise ImageStoreError(f"Network error: {str(e)}")
        return self._handle(response)

    def destroy(self, public_id):
        """Delete a stored image by public id."""
        data = self._signed_params(public_id=public_id)
        try:
            response = requests.post(
                f"{self.base_url}/image/destroy",
                data=data,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            raise ImageStoreError(f"Network error: {str(e)}")
        return self._handle(response)

    def get_resource(self, public_id):
        """Fetch stored metadata for an image, including its pixel dimensions."""
        try:
            response = requests.get(
                f"{self.base_url}/resources/image/upload/{public_id}",
                auth=(self.api_key, self.api_secret),
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.RequestException as e:
            raise ImageStoreError(f"Network error: {str(e)}")
        return self._handle(response)


def get_image_store():
    return ImageStore()


def upload_image(uploaded_file, folder):
    """Upload ``uploaded_file`` into ``folder`` and return its resource description."""
    return get_image_store().upload(uploaded_file, folder)


def delete_image(public_id):
    """Delete by public id; failures are logged and never raised."""
    try:
        result = get_image_store().destroy(public_id)
        logger.info(f"Deleted image {public_id}: {result.get('result')}")
        return True
    except (ImageStoreError, ValueError) as e:
        logger.error(f"Error deleting image {public_id} from image store: {e}")
        return False


def delete_image_by_url(url):
    """
    Best-effort deletion of the image behind a delivery URL.

    A URL the public id cannot be derived from is logged and skipped.
    """
    if not url:
        return False
    public_id = public_id_from_url(url)
    if not public_id:
        logger.error(f"Failed to extract public ID from URL: {url}")
        return False
    return delete_image(public_id)


def get_image_resource(public_id):
    """Stored metadata for ``public_id`` (``width``, ``height``, ``format``...)."""
    return get_image_store().get_resource(public_id)
