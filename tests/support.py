"""
테스트 보조

- InMemoryObjectStorage : 메모리 IObjectStorage 구현
- hide_existing         : 사전 조회(.exists)를 무력화해 동시 요청 경합을 재현
- miss_first_update     : 첫 원자적 갱신을 0 행으로 만들어 생성 경합을 재현
"""

from __future__ import annotations

from unittest import mock

from django.db.models.query import QuerySet

from apps.support.storage.errors import ObjectNotFoundError
from apps.support.storage.ports import IObjectStorage, StoredObject


class InMemoryObjectStorage(IObjectStorage):
    def __init__(self):
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put(self, key: str, data: bytes, content_type: str) -> None:
        self.objects[key] = (bytes(data), content_type)

    def get_stream(self, key: str) -> StoredObject:
        if key not in self.objects:
            raise ObjectNotFoundError()
        data, content_type = self.objects[key]
        return StoredObject(chunks=iter([data]), content_type=content_type, content_length=len(data))

    def exists(self, key: str) -> bool:
        return key in self.objects

    def delete(self, key: str) -> None:
        self.objects.pop(key, None)

    def list(self, prefix: str = "") -> list[str]:
        return sorted(k for k in self.objects if k.startswith(prefix))

    def presigned_put_url(self, key: str, expires_in: int) -> str:
        return f"https://storage.test/{key}?expires={expires_in}"


def hide_existing(model):
    """
    model 에 대한 .exists() 만 False 로 응답.
    다른 요청이 사전 조회 직후 같은 행을 넣은 상황과 같다.
    """
    real_exists = QuerySet.exists

    def exists(self):
        if self.model is model:
            return False
        return real_exists(self)

    return mock.patch.object(QuerySet, "exists", exists)


def miss_first_update():
    """
    첫 번째 QuerySet.update 만 0 행으로 응답.
    갱신 직후 다른 요청이 행을 먼저 만든 상황과 같다.
    """
    real_update = QuerySet.update
    calls = []

    def update(self, **kwargs):
        calls.append(kwargs)
        if len(calls) == 1:
            return 0
        return real_update(self, **kwargs)

    return mock.patch.object(QuerySet, "update", update)
