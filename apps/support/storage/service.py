# PATH: apps/support/storage/service.py
"""
객체 스토리지 서비스

key          : uploads/<uuid>[.ext]  (스토리지 내부 키)
object_path  : /objects/<key>        (외부 노출 경로, ACL 기준)

업로드(blob)와 ACL 기록은 별도 연산이다. 정책 없는 객체는 읽기 불가.
"""

from __future__ import annotations

import logging
import uuid
from functools import lru_cache

from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings
from django.utils.module_loading import import_string

from apps.api.common.errors import UpstreamServiceError

from . import acl
from .acl import ObjectPermission
from .errors import AclPolicyNotFoundError, ObjectAccessDenied, ObjectNotFoundError
from .models import ObjectAclPolicy
from .ports import IObjectStorage, StoredObject

logger = logging.getLogger(__name__)

OBJECT_PATH_PREFIX = "/objects/"

_STORAGE_ERRORS = (BotoCoreError, ClientError, OSError)


@lru_cache(maxsize=1)
def get_storage() -> IObjectStorage:
    return import_string(settings.OBJECT_STORAGE_BACKEND)()


class ObjectStorageService:
    def __init__(self, storage: IObjectStorage | None = None, prefix: str | None = None):
        self.storage = storage or get_storage()
        self.prefix = prefix if prefix is not None else settings.OBJECT_STORAGE_PREFIX

    # ------------------------------------------------------------------
    # key <-> path
    # ------------------------------------------------------------------

    def new_key(self, extension: str = "") -> str:
        ext = (extension or "").strip().lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        return f"{self.prefix}{uuid.uuid4()}{ext}"

    @staticmethod
    def to_object_path(key: str) -> str:
        return f"{OBJECT_PATH_PREFIX}{key}"

    def to_key(self, object_path: str) -> str:
        """
        '/objects/<key>' 또는 '<key>' → key.
        prefix 밖이거나 상위 경로 참조면 ObjectNotFoundError.
        """
        path = (object_path or "").strip()
        key = path[len(OBJECT_PATH_PREFIX):] if path.startswith(OBJECT_PATH_PREFIX) else path.lstrip("/")
        if not key.startswith(self.prefix) or key == self.prefix or ".." in key.split("/"):
            raise ObjectNotFoundError()
        return key

    def normalize_path(self, object_path: str) -> str:
        return self.to_object_path(self.to_key(object_path))

    # ------------------------------------------------------------------
    # upload
    # ------------------------------------------------------------------

    def create_upload_url(self, extension: str = "") -> dict:
        key = self.new_key(extension)
        expires_in = settings.OBJECT_PRESIGN_UPLOAD_EXPIRES
        try:
            url = self.storage.presigned_put_url(key, expires_in)
        except _STORAGE_ERRORS as e:
            logger.warning("[storage.upload_url] failed key=%s err=%s", key, e)
            raise UpstreamServiceError("failed to create upload url")

        return {
            "upload_url": url,
            "object_path": self.to_object_path(key),
            "expires_in": expires_in,
        }

    def upload_bytes(self, data: bytes, *, content_type: str, extension: str = "") -> str:
        key = self.new_key(extension)
        try:
            self.storage.put(key, data, content_type)
        except _STORAGE_ERRORS as e:
            logger.warning("[storage.upload] failed key=%s err=%s", key, e)
            raise UpstreamServiceError("failed to upload object")

        logger.info("[storage.upload] key=%s bytes=%s", key, len(data))
        return self.to_object_path(key)

    def confirm_upload(self, *, actor_id, object_path: str, visibility: str) -> ObjectAclPolicy:
        """
        업로드 완료 후 ACL 기록.
        기존 정책이 있으면 WRITE 권한(소유자)만 교체 가능.
        """
        key = self.to_key(object_path)
        path = self.to_object_path(key)

        if not self._exists(key):
            raise ObjectNotFoundError()

        existing = acl.get_policy(path)
        if existing is not None and not acl.can_access(actor_id, path, ObjectPermission.WRITE, policy=existing):
            raise ObjectAccessDenied()

        return acl.set_policy(path, owner=actor_id, visibility=visibility)

    # ------------------------------------------------------------------
    # read / delete / list
    # ------------------------------------------------------------------

    def open_for_read(self, *, actor_id, object_path: str) -> tuple[StoredObject, ObjectAclPolicy]:
        key = self.to_key(object_path)
        path = self.to_object_path(key)

        if not self._exists(key):
            raise ObjectNotFoundError()

        policy = acl.get_policy(path)
        if policy is None:
            raise AclPolicyNotFoundError()

        if not acl.can_access(actor_id, path, ObjectPermission.READ, policy=policy):
            raise ObjectAccessDenied()

        try:
            stored = self.storage.get_stream(key)
        except _STORAGE_ERRORS as e:
            logger.warning("[storage.read] failed key=%s err=%s", key, e)
            raise UpstreamServiceError("failed to read object")
        return stored, policy

    def delete_object(self, *, actor_id, object_path: str) -> None:
        key = self.to_key(object_path)
        path = self.to_object_path(key)

        policy = acl.get_policy(path)
        if policy is None:
            raise AclPolicyNotFoundError()
        if not acl.can_access(actor_id, path, ObjectPermission.WRITE, policy=policy):
            raise ObjectAccessDenied()

        try:
            self.storage.delete(key)
        except _STORAGE_ERRORS as e:
            logger.warning("[storage.delete] failed key=%s err=%s", key, e)
            raise UpstreamServiceError("failed to delete object")

        acl.delete_policy(path)
        logger.info("[storage.delete] key=%s actor=%s", key, actor_id)

    def list_objects(self) -> list[str]:
        try:
            keys = self.storage.list(self.prefix)
        except _STORAGE_ERRORS as e:
            logger.warning("[storage.list] failed err=%s", e)
            raise UpstreamServiceError("failed to list objects")
        return [self.to_object_path(k) for k in keys]

    def _exists(self, key: str) -> bool:
        try:
            return self.storage.exists(key)
        except _STORAGE_ERRORS as e:
            logger.warning("[storage.head] failed key=%s err=%s", key, e)
            raise UpstreamServiceError("failed to check object")
