from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.classes.models import Class


class Pet(TimestampModel):
    """
    학생 × 학급 당 1마리.
    level 은 experience 로부터 계산된 캐시 값 (progression.level_for)
    """

    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="pets",
    )
    classroom = models.ForeignKey(
        Class,
        on_delete=models.CASCADE,
        related_name="pets",
        db_column="class_id",
    )

    name = models.CharField(max_length=50)
    description = models.TextField()
    image_url = models.CharField(max_length=500)

    level = models.PositiveIntegerField(default=1)
    experience = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "pets"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["student", "classroom"],
                name="unique_student_class_pet",
            )
        ]

    def __str__(self):
        return f"{self.name} Lv.{self.level}"
