# PATH: apps/support/storage/ports.py
# 객체 스토리지 포트: 버킷은 어댑터 설정에서 결정, 호출자는 key 만 다룬다

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class StoredObject:
    chunks: Iterable[bytes]
    content_type: str
    content_length: Optional[int] = None


class IObjectStorage(ABC):
    """객체 스토리지 put / get / exists / delete / list / presign"""

    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str) -> None:
        ...

    @abstractmethod
    def get_stream(self, key: str) -> StoredObject:
        """없으면 ObjectNotFoundError."""
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def list(self, prefix: str = "") -> list[str]:
        ...

    @abstractmethod
    def presigned_put_url(self, key: str, expires_in: int) -> str:
        ...
