from rest_framework import serializers

from .models import LearningMaterial


class LearningMaterialSerializer(serializers.ModelSerializer):
    teacher_id = serializers.IntegerField(read_only=True)
    teacher_name = serializers.CharField(source="teacher.name", read_only=True)
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field="name")

    class Meta:
        model = LearningMaterial
        fields = [
            "id",
            "teacher_id",
            "teacher_name",
            "name",
            "file_type",
            "file_extension",
            "file_url",
            "tags",
            "created_at",
        ]


class MaterialUploadSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    file_type = serializers.CharField(max_length=50)
    file_url = serializers.CharField(max_length=500)
    file_extension = serializers.CharField(
        max_length=20, required=False, allow_blank=True, default=""
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50, allow_blank=True),
        required=False,
        default=list,
    )


class BatchDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=False,
    )
