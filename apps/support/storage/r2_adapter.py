# PATH: apps/support/storage/r2_adapter.py
# R2(S3 호환) 객체 스토리지 어댑터: IObjectStorage 구현

from __future__ import annotations

from libs.s3_client import client as s3
from libs.s3_client.presign import create_presigned_put_url

from .errors import ObjectNotFoundError
from .ports import IObjectStorage, StoredObject


class R2ObjectStorageAdapter(IObjectStorage):
    """R2(S3 호환) 객체 스토리지 IObjectStorage 구현."""

    def put(self, key: str, data: bytes, content_type: str) -> None:
        s3.put_object(key, data, content_type)

    def get_stream(self, key: str) -> StoredObject:
        found = s3.get_object(key)
        if found is None:
            raise ObjectNotFoundError()
        chunks, content_type, length = found
        return StoredObject(chunks=chunks, content_type=content_type, content_length=length)

    def exists(self, key: str) -> bool:
        ok, _size = s3.head_object(key)
        return ok

    def delete(self, key: str) -> None:
        s3.delete_object(key)

    def list(self, prefix: str = "") -> list[str]:
        return s3.list_keys(prefix)

    def presigned_put_url(self, key: str, expires_in: int) -> str:
        return create_presigned_put_url(key, expires_in=expires_in)
