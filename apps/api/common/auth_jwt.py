# JWT 발급: phone + password + role 삼중 검증 후 role 클레임을 담은 토큰 발급.
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from apps.core.serializers import LoginSerializer, UserSerializer
from apps.core.services import InvalidCredentials, authenticate_user


def issue_tokens_for_user(user) -> dict:
    """
    simplejwt RefreshToken 에 role 클레임 추가.
    access 토큰은 refresh 의 클레임을 그대로 복사한다.
    """
    refresh = RefreshToken.for_user(user)
    refresh["role"] = user.role
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


class PhoneRoleLoginView(APIView):
    """
    POST /api/v1/auth/login/
    - 전화번호/비밀번호 불일치: 401 invalid phone or password
    - 역할 불일치: 401 role mismatch
    """

    permission_classes = [AllowAny]

    @swagger_auto_schema(request_body=LoginSerializer)
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = authenticate_user(**serializer.validated_data)
        except InvalidCredentials as e:
            raise AuthenticationFailed(e.detail)

        tokens = issue_tokens_for_user(user)
        return Response(
            {
                "token": tokens["access"],
                "refresh": tokens["refresh"],
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_200_OK,
        )
