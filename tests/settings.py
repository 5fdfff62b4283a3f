import os

os.environ.setdefault('SECRET_KEY', 'spaceapi-test-secret')

from core.settings import *  # noqa: E402,F401,F403

DEBUG = False
ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'spaceapi-tests',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

RATELIMIT_BACKEND = 'memory'
SPACEAPI_RATELIMIT_PER_MINUTE = 100000
SPACEAPI_HOME_URL = '/'
SPACEAPI_SETTINGS_SECTION = 'spaceapi-wp-settings-section'
