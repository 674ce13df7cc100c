"""
Firebase Cloud Messaging HTTP v1 client
"""
import logging
from dataclasses import dataclass, field

import certifi
import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class PushError(Exception):
    """Raised when the push provider cannot be used at all."""


@dataclass
class PushResult:
    success_count: int = 0
    failure_count: int = 0
    failed_tokens: list = field(default_factory=list)


class PushClient:
    """
    Sends one message per device token. A token the provider rejects counts
    as a failure; a missing configuration or a network error raises
    ``PushError``.

    ``FCM_ACCESS_TOKEN`` is an OAuth bearer token minted outside this process
    from the service account; HTTP v1 tokens expire after about an hour, so
    the deployment must refresh it.
    """

    def __init__(self):
        self.project_id = settings.FCM_PROJECT_ID
        self.access_token = settings.FCM_ACCESS_TOKEN
        self.timeout = settings.FCM_TIMEOUT
        self.url = f"https://fcm.googleapis.com/v1/projects/{self.project_id}/messages:send"

        if not self.project_id or not self.access_token:
            raise PushError(
                "Push configuration is missing. Please set FCM_PROJECT_ID and FCM_ACCESS_TOKEN "
                "in environment variables."
            )

    def _message(self, token, title, body, image_url):
        message = {
            'token': token,
            'notification': {'title': title, 'body': body},
        }
        if image_url:
            message['notification']['image'] = image_url
            message['data'] = {'imageUrl': image_url}
        return {'message': message}

    def send_multicast(self, tokens, title, body, image_url=None) -> PushResult:
        result = PushResult()
        headers = {
            'Authorization': f"Bearer {self.access_token}",
            'Content-Type': 'application/json; UTF-8',
        }
        for token in tokens:
            try:
                response = requests.post(
                    self.url,
                    json=self._message(token, title, body, image_url),
                    headers=headers,
                    timeout=self.timeout,
                    verify=certifi.where(),
                )
            except requests.RequestException as e:
                raise PushError(f"Network error: {str(e)}")

            if response.status_code == 200:
                result.success_count += 1
            else:
                result.failure_count += 1
                result.failed_tokens.append(token)
                logger.warning(f"Push to token {token[:16]}... failed (HTTP {response.status_code})")

        logger.info(f"{result.success_count} messages sent successfully")
        if result.failure_count:
            logger.warning(f"{result.failure_count} messages failed to send")
        return result


def get_push_client():
    return PushClient()
