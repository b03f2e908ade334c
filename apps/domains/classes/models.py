from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


# ========================================================
# Class (교사 소유 학급)
# ========================================================

class Class(TimestampModel):
    """
    교사 한 명이 소유하는 학급.
    과제/포인트/펫은 모두 학급 단위로 묶인다.
    """

    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="owned_classes",
    )

    year = models.CharField(max_length=20)
    class_name = models.CharField(max_length=100)
    subject = models.CharField(max_length=50)

    class Meta:
        db_table = "classes"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.year} {self.class_name} ({self.subject})"


# ========================================================
# ClassMembership (학생 ↔ 학급)
# ========================================================

class ClassMembership(models.Model):
    """
    학생의 학급 가입. (classroom, student) 당 1행.
    """

    classroom = models.ForeignKey(
        Class,
        on_delete=models.CASCADE,
        related_name="memberships",
        db_column="class_id",
    )
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="class_memberships",
    )

    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "class_members"
        ordering = ["-joined_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["classroom", "student"],
                name="unique_class_student",
            )
        ]

    def __str__(self):
        return f"{self.student_id} -> {self.classroom_id}"
