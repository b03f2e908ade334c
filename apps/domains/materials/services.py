# PATH: apps/domains/materials/services.py
# 학습 자료 등록 / 일괄 삭제

from __future__ import annotations

import logging

from django.db import transaction

from apps.api.common.errors import DomainValidationError, ForbiddenError

from .models import LearningMaterial, MaterialTag

logger = logging.getLogger(__name__)


def derive_extension(file_url: str) -> str:
    """
    URL 마지막 '.' 이후를 소문자 확장자로 ('.pdf').
    '.' 이 맨 앞이거나 맨 끝이면 빈 문자열.

    >>> derive_extension("/objects/uploads/abc.PDF")
    '.pdf'
    >>> derive_extension("/objects/uploads/abc")
    ''
    """
    dot = file_url.rfind(".")
    if 0 < dot < len(file_url) - 1:
        return file_url[dot:].lower()
    return ""


def clean_tags(tags) -> list[str]:
    """공백 제거, 빈 값 제거, 순서 유지 중복 제거"""
    seen: list[str] = []
    for raw in tags or []:
        name = str(raw).strip()
        if name and name not in seen:
            seen.append(name)
    return seen


@transaction.atomic
def create_material(
    *,
    teacher,
    name: str,
    file_type: str,
    file_url: str,
    file_extension: str = "",
    tags=None,
) -> LearningMaterial:
    material = LearningMaterial.objects.create(
        teacher=teacher,
        name=name,
        file_type=file_type,
        file_url=file_url,
        file_extension=file_extension or derive_extension(file_url),
    )
    MaterialTag.objects.bulk_create(
        [MaterialTag(material=material, name=t) for t in clean_tags(tags)]
    )

    logger.info(
        "[materials.upload] material_id=%s teacher_id=%s ext=%s",
        material.id,
        teacher.id,
        material.file_extension or "-",
    )
    return material


@transaction.atomic
def batch_delete(*, teacher, ids) -> int:
    """
    요청한 id 가 모두 본인 소유일 때만 삭제 (하나라도 아니면 아무것도 삭제하지 않음).
    """
    if not isinstance(ids, (list, tuple)) or not ids:
        raise DomainValidationError("ids must be a non-empty array")

    wanted = set(ids)
    owned = LearningMaterial.objects.filter(id__in=wanted, teacher=teacher)
    if owned.count() != len(wanted):
        raise ForbiddenError(
            "some materials were not found or you do not have permission to delete them"
        )

    deleted = len(wanted)
    owned.delete()

    logger.info("[materials.batch_delete] teacher_id=%s count=%s", teacher.id, deleted)
    return deleted
