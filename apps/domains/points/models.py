from django.conf import settings
from django.db import models
from django.db.models import F, Q

from apps.domains.classes.models import Class


class UserPoints(models.Model):
    """
    (student, classroom) 당 포인트 원장 1행.

    total_points : 과제 제출로 적립된 누적 포인트 (감소하지 않음)
    spent_points : 펫 먹이로 사용한 누적 포인트
    잔여 포인트 = total_points - spent_points
    """

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="point_ledgers",
    )
    classroom = models.ForeignKey(
        Class,
        on_delete=models.CASCADE,
        related_name="point_ledgers",
        db_column="class_id",
    )

    total_points = models.PositiveIntegerField(default=0)
    spent_points = models.PositiveIntegerField(default=0)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "user_points"
        constraints = [
            models.UniqueConstraint(
                fields=["student", "classroom"],
                name="unique_student_class_points",
            ),
            models.CheckConstraint(
                condition=Q(spent_points__lte=F("total_points")),
                name="user_points_spent_lte_total",
            ),
        ]

    def __str__(self):
        return f"{self.student_id}@{self.classroom_id}: {self.total_points}/{self.spent_points}"

    @property
    def remaining_points(self) -> int:
        return self.total_points - self.spent_points
