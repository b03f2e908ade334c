from django.conf import settings
from django.db import models


class LearningMaterial(models.Model):
    teacher = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="materials",
    )

    name = models.CharField(max_length=255)
    file_type = models.CharField(max_length=50)
    file_extension = models.CharField(max_length=20, blank=True, default="")
    file_url = models.CharField(max_length=500)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "learning_materials"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.name


class MaterialTag(models.Model):
    """자료 태그. 자료당 태그 이름은 집합(중복 없음)."""

    material = models.ForeignKey(
        LearningMaterial,
        on_delete=models.CASCADE,
        related_name="tags",
    )
    name = models.CharField(max_length=50)

    class Meta:
        db_table = "learning_material_tags"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["material", "name"],
                name="unique_material_tag",
            )
        ]

    def __str__(self):
        return self.name
