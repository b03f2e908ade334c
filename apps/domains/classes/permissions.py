from rest_framework.permissions import BasePermission

from . import access


def _classroom_of(obj):
    """Class 자체이거나 classroom 속성을 가진 객체(Task, Pet ...)"""
    return getattr(obj, "classroom", obj)


class IsClassOwner(BasePermission):
    """
    학급 소유 교사만 허용
    """
    message = "You do not own this class."

    def has_object_permission(self, request, view, obj):
        return access.is_owner(request.user, _classroom_of(obj))


class IsClassParticipant(BasePermission):
    """
    학급 소유 교사 또는 가입 학생만 허용
    """
    message = "You are not a member of this class."

    def has_object_permission(self, request, view, obj):
        return access.is_participant(request.user, _classroom_of(obj))
