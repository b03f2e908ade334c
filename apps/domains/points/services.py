# PATH: apps/domains/points/services.py
"""
포인트 원장 (학생 × 학급)

- award : 과제 제출 시 적립. 단일 UPDATE ... SET total = total + delta
- spend : 펫 먹이 시 차감. 잔여 포인트 조건부 단일 UPDATE
- 두 연산 모두 read-modify-write 왕복 없이 DB 한 문장으로 처리한다.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.db.models import F, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.api.common.errors import ConflictError, DomainValidationError
from apps.domains.classes.models import ClassMembership

from .models import UserPoints

logger = logging.getLogger(__name__)


class InsufficientPointsError(ConflictError):
    default_code = "insufficient_points"
    default_detail = "Not enough points."


def _require_positive_int(value, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise DomainValidationError(f"{field} must be a positive integer")
    return value


def _ledger(student_id, class_id):
    return UserPoints.objects.filter(student_id=student_id, classroom_id=class_id)


def award(*, student_id, class_id, delta: int) -> None:
    """
    포인트 적립.
    - 행이 있으면 원자적 증가
    - 없으면 savepoint 안에서 생성, unique 경합에서 지면 다시 원자적 증가
    """
    _require_positive_int(delta, "delta")

    updated = _ledger(student_id, class_id).update(
        total_points=F("total_points") + delta,
        updated_at=timezone.now(),
    )
    if not updated:
        try:
            with transaction.atomic():
                UserPoints.objects.create(
                    student_id=student_id,
                    classroom_id=class_id,
                    total_points=delta,
                )
        except IntegrityError:
            _ledger(student_id, class_id).update(
                total_points=F("total_points") + delta,
                updated_at=timezone.now(),
            )

    logger.info(
        "[points.award] student_id=%s class_id=%s delta=%s",
        student_id,
        class_id,
        delta,
    )


def spend(*, student_id, class_id, amount: int) -> None:
    """
    포인트 사용. total >= spent + amount 일 때만 spent 증가.
    """
    _require_positive_int(amount, "points")

    updated = _ledger(student_id, class_id).filter(
        total_points__gte=F("spent_points") + amount,
    ).update(
        spent_points=F("spent_points") + amount,
        updated_at=timezone.now(),
    )
    if not updated:
        logger.info(
            "[points.spend] rejected student_id=%s class_id=%s amount=%s",
            student_id,
            class_id,
            amount,
        )
        raise InsufficientPointsError()

    logger.info(
        "[points.spend] student_id=%s class_id=%s amount=%s",
        student_id,
        class_id,
        amount,
    )


def balance(*, student_id, class_id) -> dict:
    row = _ledger(student_id, class_id).first()
    if row is None:
        return {"earned": 0, "spent": 0, "remaining": 0}
    return {
        "earned": row.total_points,
        "spent": row.spent_points,
        "remaining": row.remaining_points,
    }


def rankings(class_id) -> list[dict]:
    """
    학급 전체 멤버 순위. 원장 행이 없는 학생은 0점.
    정렬: 적립 포인트 내림차순, 동점이면 student_id 오름차순
    """
    earned = _ledger(OuterRef("student_id"), class_id).values("total_points")[:1]

    rows = (
        ClassMembership.objects
        .filter(classroom_id=class_id)
        .annotate(points=Coalesce(Subquery(earned), Value(0)))
        .order_by("-points", "student_id")
        .values("student_id", "student__name", "points")
    )

    return [
        {
            "student_id": r["student_id"],
            "student_name": r["student__name"],
            "total_points": r["points"],
        }
        for r in rows
    ]
