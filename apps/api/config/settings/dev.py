from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 🔴 로컬 개발: DB_HOST 미설정 시 SQLite 사용
if not os.getenv("DB_HOST"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

# 브라우저에서 swagger 로그인용
REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"] = [
    "rest_framework.authentication.SessionAuthentication",
    "rest_framework_simplejwt.authentication.JWTAuthentication",
]
