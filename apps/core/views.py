# apps/core/views.py

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.auth_jwt import issue_tokens_for_user
from apps.core.serializers import (
    UserSerializer,
    RegisterSerializer,
    ProfileSerializer,
)
from apps.core.services import register_user


# --------------------------------------------------
# Auth: /auth/register/
# --------------------------------------------------

class RegisterView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(request_body=RegisterSerializer)
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = register_user(**serializer.validated_data)
        tokens = issue_tokens_for_user(user)

        return Response(
            {
                "token": tokens["access"],
                "refresh": tokens["refresh"],
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED,
        )


# --------------------------------------------------
# Auth: /auth/me/
# --------------------------------------------------

class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserSerializer(request.user)
        return Response(serializer.data)


# --------------------------------------------------
# Profile: /auth/update-profile/
# --------------------------------------------------

class UpdateProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=ProfileSerializer)
    def put(self, request):
        serializer = ProfileSerializer(request.user, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
