"""
Test settings for marketplace_server project.
"""

from .base import *

# Use SQLite for testing
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}


# Disable migrations for faster testing
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

# Use faster password hasher for testing
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Disable logging configuration during tests; records still reach pytest's caplog
LOGGING_CONFIG = None

# External services are never reached from tests
CLOUDINARY_CLOUD_NAME = 'test-cloud'
CLOUDINARY_API_KEY = 'test-key'
CLOUDINARY_API_SECRET = 'test-secret'
FCM_PROJECT_ID = 'test-project'
FCM_ACCESS_TOKEN = 'test-token'
