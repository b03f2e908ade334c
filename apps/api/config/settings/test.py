# PATH: apps/api/config/settings/test.py
# pytest 전용: SQLite + 메모리 스토리지 어댑터

from .base import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

if os.getenv("TEST_DB_HOST"):
    # 동시성 테스트(원자적 증가)는 PostgreSQL에서만 의미가 있다.
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("TEST_DB_NAME", "learnpet_test"),
            "USER": os.getenv("TEST_DB_USER"),
            "PASSWORD": os.getenv("TEST_DB_PASSWORD"),
            "HOST": os.getenv("TEST_DB_HOST"),
            "PORT": os.getenv("TEST_DB_PORT", "5432"),
        }
    }

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

OBJECT_STORAGE_BACKEND = "tests.support.InMemoryObjectStorage"

OPENAI_API_KEY = "test-key"

LOGGING["root"]["level"] = "WARNING"
