from rest_framework.permissions import BasePermission


class IsPetOwner(BasePermission):
    """
    펫을 입양한 학생 본인만 허용
    """
    message = "You do not own this pet."

    def has_object_permission(self, request, view, obj):
        user = request.user
        return bool(user and user.is_authenticated and obj.student_id == user.id)
