from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.core.permissions import IsStudent
from apps.domains.classes.access import get_class_or_404
from apps.domains.classes.permissions import IsClassParticipant

from . import services


class MyClassPointsView(APIView):
    """
    GET /api/v1/points/classes/<class_id>/me/
    학생 본인의 학급 포인트 (적립 / 사용 / 잔여)
    """

    permission_classes = [IsAuthenticated, IsStudent, IsClassParticipant]

    def get(self, request, class_id):
        classroom = get_class_or_404(class_id)
        self.check_object_permissions(request, classroom)

        data = services.balance(student_id=request.user.id, class_id=classroom.id)
        return Response({"class_id": classroom.id, **data})
