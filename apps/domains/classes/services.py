# PATH: apps/domains/classes/services.py
# 학급 생성 / 가입 / 멤버 제거

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from apps.api.common.errors import ConflictError, NotFoundError

from .access import get_class_or_404
from .models import Class, ClassMembership

logger = logging.getLogger(__name__)


def create_class(*, teacher, year: str, class_name: str, subject: str) -> Class:
    classroom = Class.objects.create(
        teacher=teacher,
        year=year,
        class_name=class_name,
        subject=subject,
    )
    logger.info("[classes.create] class_id=%s teacher_id=%s", classroom.id, teacher.id)
    return classroom


def join_class(*, student, class_id) -> ClassMembership:
    """
    학생 학급 가입.
    - 학급 없음: NotFoundError
    - 이미 가입: ConflictError (동시 요청은 unique 제약으로 판정)
    """
    classroom = get_class_or_404(class_id)

    if ClassMembership.objects.filter(classroom=classroom, student=student).exists():
        raise ConflictError("you have already joined this class")

    try:
        with transaction.atomic():
            membership = ClassMembership.objects.create(
                classroom=classroom,
                student=student,
            )
    except IntegrityError:
        raise ConflictError("you have already joined this class")

    logger.info("[classes.join] class_id=%s student_id=%s", classroom.id, student.id)
    return membership


def remove_member(*, classroom: Class, student_id) -> None:
    deleted, _ = ClassMembership.objects.filter(
        classroom=classroom,
        student_id=student_id,
    ).delete()
    if not deleted:
        raise NotFoundError("student is not a member of this class")

    logger.info("[classes.remove_member] class_id=%s student_id=%s", classroom.id, student_id)
