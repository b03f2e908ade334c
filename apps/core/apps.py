# PATH: apps/core/apps.py
# 역할: core 앱 설정(AppConfig): User / 인증

from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.core"
    label = "core"
