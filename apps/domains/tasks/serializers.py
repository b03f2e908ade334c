from rest_framework import serializers

from .models import Task, TaskSubmission


class TaskSerializer(serializers.ModelSerializer):
    class_id = serializers.IntegerField(source="classroom_id", read_only=True)
    teacher_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Task
        fields = [
            "id",
            "teacher_id",
            "class_id",
            "title",
            "description",
            "points",
            "deadline",
            "attachment_url",
            "created_at",
        ]


class TaskPublishSerializer(serializers.Serializer):
    class_id = serializers.IntegerField(min_value=1)
    title = serializers.CharField(max_length=200)
    description = serializers.CharField()
    points = serializers.IntegerField(min_value=1)
    deadline = serializers.DateTimeField()
    attachment_url = serializers.CharField(
        max_length=500, required=False, allow_null=True, allow_blank=True
    )


class TaskSubmitSerializer(serializers.Serializer):
    description = serializers.CharField()
    attachment_url = serializers.CharField(
        max_length=500, required=False, allow_null=True, allow_blank=True
    )


class TaskSubmissionSerializer(serializers.ModelSerializer):
    task_id = serializers.IntegerField(read_only=True)
    student_id = serializers.IntegerField(read_only=True)
    student_name = serializers.CharField(source="student.name", read_only=True)

    class Meta:
        model = TaskSubmission
        fields = [
            "id",
            "task_id",
            "student_id",
            "student_name",
            "description",
            "attachment_url",
            "submitted_at",
        ]
