from rest_framework.permissions import BasePermission


class IsTaskOwner(BasePermission):
    """
    과제를 게시한 교사만 허용
    """
    message = "You do not have permission to access this task."

    def has_object_permission(self, request, view, obj):
        user = request.user
        return bool(user and user.is_authenticated and obj.teacher_id == user.id)
