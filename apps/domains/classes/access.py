# PATH: apps/domains/classes/access.py
# 학급 소유/소속 조회 단일 진입점 (permissions / services 공용)

from __future__ import annotations

from apps.api.common.errors import ForbiddenError, NotFoundError

from .models import Class, ClassMembership


def get_class_or_404(class_id) -> Class:
    try:
        return Class.objects.select_related("teacher").get(id=class_id)
    except (Class.DoesNotExist, ValueError, TypeError):
        raise NotFoundError("class not found")


def is_owner(user, classroom: Class) -> bool:
    return bool(user and user.is_authenticated and classroom.teacher_id == user.id)


def is_member(student_id, class_id) -> bool:
    if not student_id:
        return False
    return ClassMembership.objects.filter(
        classroom_id=class_id,
        student_id=student_id,
    ).exists()


def is_participant(user, classroom: Class) -> bool:
    """
    교사: 본인 소유 학급
    학생: 가입한 학급
    """
    if not user or not user.is_authenticated:
        return False
    if user.is_teacher:
        return is_owner(user, classroom)
    if user.is_student:
        return is_member(user.id, classroom.id)
    return False


def require_member(student, classroom: Class) -> None:
    if not is_member(student.id, classroom.id):
        raise ForbiddenError("you are not a member of this class")


def require_owner(teacher, classroom: Class) -> None:
    if not is_owner(teacher, classroom):
        raise ForbiddenError("you do not own this class")
