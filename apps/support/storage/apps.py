# PATH: apps/support/storage/apps.py
# 역할: 객체 스토리지 + 객체 ACL 앱 설정

from django.apps import AppConfig


class StorageConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.support.storage"
    label = "storage"
    verbose_name = "Object Storage"
