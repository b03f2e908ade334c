from django.db import models

from apps.api.common.models import TimestampModel


class Visibility(models.TextChoices):
    PUBLIC = "public", "Public"
    PRIVATE = "private", "Private"


class ObjectAclPolicy(TimestampModel):
    """
    저장 객체 1개의 접근 정책 (소유자 + 공개 여부).
    object_path 는 외부 노출 경로 (/objects/uploads/<uuid>...)
    """

    object_path = models.CharField(max_length=512, unique=True)
    owner = models.CharField(max_length=64)
    visibility = models.CharField(
        max_length=10,
        choices=Visibility.choices,
        default=Visibility.PRIVATE,
    )

    class Meta:
        db_table = "object_acl_policies"

    def __str__(self):
        return f"{self.object_path} ({self.visibility}, owner={self.owner})"
