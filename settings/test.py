from .main import *

ENVIRONMENT = TESTING_ENVIRONMENT

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Test data lives inside a per-test transaction that pool threads cannot see
EVENT_ACCESS = {
    'BATCH_MAX_WORKERS': 1,
}
