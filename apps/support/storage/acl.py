# PATH: apps/support/storage/acl.py
"""
객체 ACL

- 정책이 없으면 항상 거부 (fail closed)
- public + READ 는 비로그인 포함 허용
- 그 외에는 actor_id == owner 일 때만 허용
- WRITE 는 소유자 외에는 공개 여부와 무관하게 거부
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

from apps.api.common.errors import DomainValidationError

from .models import ObjectAclPolicy, Visibility

logger = logging.getLogger(__name__)


class ObjectPermission(str, enum.Enum):
    READ = "read"
    WRITE = "write"


def set_policy(object_path: str, *, owner, visibility: str) -> ObjectAclPolicy:
    """object_path 기준 upsert"""
    if visibility not in Visibility.values:
        raise DomainValidationError(f"invalid visibility: {visibility}")

    policy, created = ObjectAclPolicy.objects.update_or_create(
        object_path=object_path,
        defaults={"owner": str(owner), "visibility": visibility},
    )
    logger.info(
        "[acl.set_policy] path=%s owner=%s visibility=%s created=%s",
        object_path,
        owner,
        visibility,
        created,
    )
    return policy


def get_policy(object_path: str) -> Optional[ObjectAclPolicy]:
    return ObjectAclPolicy.objects.filter(object_path=object_path).first()


def delete_policy(object_path: str) -> None:
    ObjectAclPolicy.objects.filter(object_path=object_path).delete()


def can_access(actor_id, object_path: str, permission: ObjectPermission, *, policy=None) -> bool:
    if policy is None:
        policy = get_policy(object_path)
    if policy is None:
        return False

    if policy.visibility == Visibility.PUBLIC and permission == ObjectPermission.READ:
        return True

    if actor_id is None or str(actor_id) == "":
        return False

    return str(actor_id) == policy.owner
