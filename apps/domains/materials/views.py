from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.filters import SearchFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet
from django_filters.rest_framework import DjangoFilterBackend

from drf_yasg.utils import swagger_auto_schema

from apps.core.permissions import IsTeacher

from .filters import MaterialFilter
from .models import LearningMaterial
from .serializers import (
    LearningMaterialSerializer,
    MaterialUploadSerializer,
    BatchDeleteSerializer,
)
from . import services


class LearningMaterialViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    GenericViewSet,
):
    """
    list / retrieve : 로그인 사용자 전체
    upload / my_materials / destroy / batch_delete : 교사
    destroy 는 본인 소유만 조회되므로 타인 자료는 404
    """

    serializer_class = LearningMaterialSerializer
    lookup_value_regex = r"\d+"

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = MaterialFilter
    search_fields = ["name"]

    def get_queryset(self):
        qs = (
            LearningMaterial.objects
            .select_related("teacher")
            .prefetch_related("tags")
        )
        if getattr(self, "swagger_fake_view", False):
            return qs.none()
        if self.action in ("destroy", "my_materials"):
            qs = qs.filter(teacher=self.request.user)
        return qs

    def get_permissions(self):
        if self.action in ("upload", "my_materials", "destroy", "batch_delete"):
            return [IsAuthenticated(), IsTeacher()]
        return [IsAuthenticated()]

    @swagger_auto_schema(request_body=MaterialUploadSerializer)
    @action(detail=False, methods=["post"], url_path="upload")
    def upload(self, request):
        serializer = MaterialUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        material = services.create_material(teacher=request.user, **serializer.validated_data)
        return Response(
            LearningMaterialSerializer(material).data,
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"], url_path="teacher/my-materials")
    def my_materials(self, request):
        qs = self.filter_queryset(self.get_queryset())
        return Response(LearningMaterialSerializer(qs, many=True).data)

    @swagger_auto_schema(request_body=BatchDeleteSerializer)
    @action(detail=False, methods=["delete"], url_path="batch/delete")
    def batch_delete(self, request):
        serializer = BatchDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        deleted = services.batch_delete(
            teacher=request.user,
            ids=serializer.validated_data["ids"],
        )
        return Response({"success": True, "deleted_count": deleted})

    def destroy(self, request, *args, **kwargs):
        super().destroy(request, *args, **kwargs)
        return Response({"success": True, "message": "material deleted"})
