import logging

from django.conf import settings
from django.http import StreamingHttpResponse
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.errors import ForbiddenError, NotFoundError

from .models import Visibility
from .serializers import (
    UploadUrlRequestSerializer,
    ConfirmUploadSerializer,
    ObjectAclPolicySerializer,
)
from .service import ObjectStorageService

logger = logging.getLogger(__name__)


class UploadUrlView(APIView):
    """POST /storage/upload-url/ → presigned PUT url + object_path"""

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=UploadUrlRequestSerializer)
    def post(self, request):
        serializer = UploadUrlRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = ObjectStorageService().create_upload_url(
            extension=serializer.validated_data["file_extension"],
        )
        return Response(data)


class ConfirmUploadView(APIView):
    """POST /storage/confirm-upload/ → 업로드한 객체에 ACL 기록 (owner = 요청자)"""

    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=ConfirmUploadSerializer)
    def post(self, request):
        serializer = ConfirmUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        policy = ObjectStorageService().confirm_upload(
            actor_id=request.user.id,
            **serializer.validated_data,
        )
        return Response(ObjectAclPolicySerializer(policy).data, status=status.HTTP_200_OK)


class ObjectListView(APIView):
    permission_classes = [IsAdminUser]

    def get(self, request):
        return Response({"objects": ObjectStorageService().list_objects()})


class ObjectView(APIView):
    """
    GET    /storage/objects/<key>  다운로드 (로그인 선택)
    DELETE /storage/objects/<key>  소유자 삭제

    비로그인 요청은 거부 사유와 무관하게 404 (존재 여부 비노출).
    """

    permission_classes = [AllowAny]

    def get(self, request, key):
        actor_id = request.user.id if request.user.is_authenticated else None

        try:
            stored, policy = ObjectStorageService().open_for_read(
                actor_id=actor_id,
                object_path=f"/objects/{key}",
            )
        except (NotFoundError, ForbiddenError) as e:
            logger.info("[storage.download] denied key=%s actor=%s code=%s", key, actor_id, e.code)
            if actor_id is None or isinstance(e, NotFoundError):
                raise NotFoundError("Object not found.")
            raise

        cache_scope = "public" if policy.visibility == Visibility.PUBLIC else "private"
        response = StreamingHttpResponse(stored.chunks, content_type=stored.content_type)
        response["Cache-Control"] = f"{cache_scope}, max-age={settings.OBJECT_DOWNLOAD_CACHE_TTL}"
        if stored.content_length is not None:
            response["Content-Length"] = str(stored.content_length)
        return response

    def delete(self, request, key):
        if not request.user.is_authenticated:
            raise NotFoundError("Object not found.")

        ObjectStorageService().delete_object(
            actor_id=request.user.id,
            object_path=f"/objects/{key}",
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
