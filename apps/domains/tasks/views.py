from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.errors import NotFoundError
from apps.core.permissions import IsStudent, IsTeacher
from apps.domains.classes.access import get_class_or_404
from apps.domains.classes.permissions import IsClassParticipant

from .models import Task, TaskSubmission
from .permissions import IsTaskOwner
from .serializers import (
    TaskSerializer,
    TaskPublishSerializer,
    TaskSubmitSerializer,
    TaskSubmissionSerializer,
)
from . import services


def _get_task_or_404(task_id) -> Task:
    try:
        return Task.objects.select_related("classroom").get(id=task_id)
    except Task.DoesNotExist:
        raise NotFoundError("task not found")


class TaskPublishView(APIView):
    permission_classes = [IsAuthenticated, IsTeacher]

    @swagger_auto_schema(request_body=TaskPublishSerializer)
    def post(self, request):
        serializer = TaskPublishSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        classroom = get_class_or_404(data.pop("class_id"))
        task = services.publish_task(teacher=request.user, classroom=classroom, **data)
        return Response(TaskSerializer(task).data, status=status.HTTP_201_CREATED)


class ClassTaskListView(APIView):
    permission_classes = [IsAuthenticated, IsClassParticipant]

    def get(self, request, class_id):
        classroom = get_class_or_404(class_id)
        self.check_object_permissions(request, classroom)

        qs = Task.objects.filter(classroom=classroom).order_by("-created_at", "-id")
        return Response(TaskSerializer(qs, many=True).data)


class TaskDetailView(APIView):
    permission_classes = [IsAuthenticated, IsClassParticipant]

    def get(self, request, task_id):
        task = _get_task_or_404(task_id)
        self.check_object_permissions(request, task)
        return Response(TaskSerializer(task).data)


class TaskSubmitView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    @swagger_auto_schema(request_body=TaskSubmitSerializer)
    def post(self, request, task_id):
        serializer = TaskSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = _get_task_or_404(task_id)
        submission = services.submit_task(
            student=request.user,
            task=task,
            **serializer.validated_data,
        )
        return Response(
            TaskSubmissionSerializer(submission).data,
            status=status.HTTP_201_CREATED,
        )


class TaskSubmissionListView(APIView):
    permission_classes = [IsAuthenticated, IsTeacher, IsTaskOwner]

    def get(self, request, task_id):
        task = _get_task_or_404(task_id)
        self.check_object_permissions(request, task)

        qs = task.submissions.select_related("student")
        return Response(TaskSubmissionSerializer(qs, many=True).data)


class MySubmissionView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, task_id):
        submission = (
            TaskSubmission.objects
            .filter(task_id=task_id, student=request.user)
            .select_related("student")
            .first()
        )
        if submission is None:
            raise NotFoundError("no submission found")
        return Response(TaskSubmissionSerializer(submission).data)
