#apps/core/permissions.py

from rest_framework.permissions import BasePermission


class IsTeacher(BasePermission):
    """
    교사 전용 Permission
    - 로그인 필수
    - role == teacher
    """
    message = "Teacher account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and user.is_teacher
        )


class IsStudent(BasePermission):
    """
    학생 전용 Permission
    - 로그인 필수
    - role == student
    """
    message = "Student account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and user.is_student
        )
