# PATH: apps/domains/tasks/services.py
# 과제 게시 / 제출 (+ 포인트 적립)

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from apps.api.common.errors import ConflictError
from apps.domains.classes.access import require_member, require_owner
from apps.domains.classes.models import Class
from apps.domains.points import services as points_service

from .models import Task, TaskSubmission

logger = logging.getLogger(__name__)


def publish_task(
    *,
    teacher,
    classroom: Class,
    title: str,
    description: str,
    points: int,
    deadline,
    attachment_url: str | None = None,
) -> Task:
    require_owner(teacher, classroom)

    task = Task.objects.create(
        teacher=teacher,
        classroom=classroom,
        title=title,
        description=description,
        points=points,
        deadline=deadline,
        attachment_url=attachment_url or None,
    )
    logger.info(
        "[tasks.publish] task_id=%s class_id=%s points=%s",
        task.id,
        classroom.id,
        points,
    )
    return task


@transaction.atomic
def submit_task(
    *,
    student,
    task: Task,
    description: str,
    attachment_url: str | None = None,
) -> TaskSubmission:
    """
    과제 제출. 제출 행 생성과 포인트 적립은 한 트랜잭션.
    - 학급 미가입: ForbiddenError
    - 중복 제출: ConflictError (포인트 재적립 없음)
    """
    require_member(student, task.classroom)

    if TaskSubmission.objects.filter(task=task, student=student).exists():
        raise ConflictError("you have already submitted this task")

    try:
        with transaction.atomic():
            submission = TaskSubmission.objects.create(
                task=task,
                student=student,
                description=description,
                attachment_url=attachment_url or None,
            )
    except IntegrityError:
        raise ConflictError("you have already submitted this task")

    points_service.award(
        student_id=student.id,
        class_id=task.classroom_id,
        delta=task.points,
    )

    logger.info(
        "[tasks.submit] task_id=%s student_id=%s awarded=%s",
        task.id,
        student.id,
        task.points,
    )
    return submission
