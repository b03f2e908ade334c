from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.core.permissions import IsStudent, IsTeacher
from apps.domains.points import services as points_service

from .access import get_class_or_404
from .models import Class, ClassMembership
from .permissions import IsClassOwner, IsClassParticipant
from .serializers import (
    ClassSerializer,
    ClassCreateSerializer,
    JoinClassSerializer,
    JoinedClassSerializer,
    MemberSerializer,
)
from . import services


# --------------------------------------------------
# Teacher
# --------------------------------------------------

class ClassCreateView(APIView):
    permission_classes = [IsAuthenticated, IsTeacher]

    @swagger_auto_schema(request_body=ClassCreateSerializer)
    def post(self, request):
        serializer = ClassCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        classroom = services.create_class(teacher=request.user, **serializer.validated_data)
        return Response(ClassSerializer(classroom).data, status=status.HTTP_201_CREATED)


class TeacherClassListView(APIView):
    permission_classes = [IsAuthenticated, IsTeacher]

    def get(self, request):
        qs = Class.objects.filter(teacher=request.user).select_related("teacher")
        return Response({"classes": ClassSerializer(qs, many=True).data})


class ClassMemberRemoveView(APIView):
    permission_classes = [IsAuthenticated, IsTeacher, IsClassOwner]

    def delete(self, request, class_id, student_id):
        classroom = get_class_or_404(class_id)
        self.check_object_permissions(request, classroom)

        services.remove_member(classroom=classroom, student_id=student_id)
        return Response({"message": "student removed from class"})


# --------------------------------------------------
# Student
# --------------------------------------------------

class AvailableClassListView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = Class.objects.all().select_related("teacher")
        return Response({"classes": ClassSerializer(qs, many=True).data})


class JoinClassView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    @swagger_auto_schema(request_body=JoinClassSerializer)
    def post(self, request):
        serializer = JoinClassSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        membership = services.join_class(
            student=request.user,
            class_id=serializer.validated_data["class_id"],
        )
        return Response(
            JoinedClassSerializer(membership).data,
            status=status.HTTP_201_CREATED,
        )


class StudentClassListView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = (
            ClassMembership.objects
            .filter(student=request.user)
            .select_related("classroom", "classroom__teacher")
        )
        return Response({"classes": JoinedClassSerializer(qs, many=True).data})


# --------------------------------------------------
# Owner or member
# --------------------------------------------------

class ClassDetailView(APIView):
    permission_classes = [IsAuthenticated, IsClassParticipant]

    def get(self, request, class_id):
        classroom = get_class_or_404(class_id)
        self.check_object_permissions(request, classroom)

        members = classroom.memberships.select_related("student")
        return Response(
            {
                "class": ClassSerializer(classroom).data,
                "members": MemberSerializer(members, many=True).data,
            }
        )


class ClassRankingsView(APIView):
    permission_classes = [IsAuthenticated, IsClassParticipant]

    def get(self, request, class_id):
        classroom = get_class_or_404(class_id)
        self.check_object_permissions(request, classroom)

        return Response({"rankings": points_service.rankings(classroom.id)})
