# PATH: apps/core/services.py
# 회원가입 / 로그인 도메인 로직

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from apps.api.common.errors import ConflictError
from libs.phone_util import mask_phone, normalize_phone

logger = logging.getLogger(__name__)

User = get_user_model()


class InvalidCredentials(Exception):
    """전화번호/비밀번호 불일치 또는 역할 불일치"""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


def register_user(*, phone: str, name: str, school: str, password: str, role: str):
    """
    신규 계정 생성.
    - phone 중복 시 ConflictError (사전 조회 + DB unique 제약)
    - 비밀번호는 Django 해시로만 저장
    """
    if User.objects.filter(phone=phone).exists():
        raise ConflictError("phone number already registered")

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                phone=phone,
                password=password,
                name=name,
                school=school,
                role=role,
            )
    except IntegrityError:
        raise ConflictError("phone number already registered")

    logger.info("[auth.register] user_id=%s role=%s phone=%s", user.id, role, mask_phone(phone))
    return user


def authenticate_user(*, phone: str, password: str, role: str):
    """
    phone + password + role 세 가지 모두 일치해야 로그인.
    불일치 사유는 InvalidCredentials.detail 로 구분한다.
    """
    normalized = normalize_phone(phone) or ""
    user = User.objects.filter(phone=normalized).first()

    if user is None or not user.check_password(password):
        logger.info("[auth.login] rejected reason=credentials phone=%s", mask_phone(normalized))
        raise InvalidCredentials("invalid phone or password")

    if user.role != role:
        logger.info("[auth.login] rejected reason=role user_id=%s", user.id)
        raise InvalidCredentials("role mismatch")

    if not user.is_active:
        raise InvalidCredentials("account is disabled")

    logger.info("[auth.login] user_id=%s role=%s", user.id, user.role)
    return user
