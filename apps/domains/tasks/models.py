from django.conf import settings
from django.db import models
from django.db.models import Q

from apps.domains.classes.models import Class


# ========================================================
# Task (학급 과제)
# ========================================================

class Task(models.Model):
    """
    교사가 학급에 게시하는 과제.
    제출 시 points 만큼 학생의 학급 포인트가 적립된다.
    """

    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="published_tasks",
    )
    classroom = models.ForeignKey(
        Class,
        on_delete=models.CASCADE,
        related_name="tasks",
        db_column="class_id",
    )

    title = models.CharField(max_length=200)
    description = models.TextField()
    points = models.PositiveIntegerField()
    deadline = models.DateTimeField()
    attachment_url = models.CharField(max_length=500, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "tasks"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(points__gt=0),
                name="task_points_positive",
            ),
        ]

    def __str__(self):
        return f"{self.title} (+{self.points})"


# ========================================================
# TaskSubmission (학생 제출, 과제당 1회)
# ========================================================

class TaskSubmission(models.Model):
    task = models.ForeignKey(
        Task,
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="task_submissions",
    )

    description = models.TextField()
    attachment_url = models.CharField(max_length=500, null=True, blank=True)

    submitted_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "task_submissions"
        ordering = ["-submitted_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["task", "student"],
                name="unique_task_student_submission",
            )
        ]

    def __str__(self):
        return f"{self.student_id} -> task {self.task_id}"
