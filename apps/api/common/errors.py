# PATH: apps/api/common/errors.py
"""
LearnPet 도메인 오류: 순수 파이썬 + DRF 경계 변환

서비스 계층은 아래 예외만 던진다. HTTP 상태 코드 매핑은
learnpet_exception_handler 한 곳에서 처리한다.

- DomainValidationError : 400 (필수값 누락/형식 오류, 상태 변경 전 거부)
- ForbiddenError        : 403 (역할/소유/소속 위반)
- NotFoundError         : 404 (클래스/과제/자료/객체/ACL 없음)
- ConflictError         : 409 (중복 가입/제출/펫/전화번호)
- UpstreamServiceError  : 502 (AI/객체 스토리지 실패, 재시도 없음)
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class LearnPetError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "error"
    default_detail = "Request failed."

    def __init__(self, detail: str | None = None, *, code: str | None = None):
        self.detail = detail or self.default_detail
        self.code = code or self.default_code
        super().__init__(self.detail)


class DomainValidationError(LearnPetError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "invalid"
    default_detail = "Invalid request."


class ForbiddenError(LearnPetError):
    status_code = status.HTTP_403_FORBIDDEN
    default_code = "forbidden"
    default_detail = "You do not have permission to perform this action."


class NotFoundError(LearnPetError):
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"
    default_detail = "Not found."


class ConflictError(LearnPetError):
    status_code = status.HTTP_409_CONFLICT
    default_code = "conflict"
    default_detail = "Resource already exists."


class UpstreamServiceError(LearnPetError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_code = "upstream_failed"
    default_detail = "Upstream service failed."


def learnpet_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER: 도메인 오류 → {"detail", "code"} JSON."""
    if isinstance(exc, LearnPetError):
        view = context.get("view")
        log = logger.warning if exc.status_code >= 500 else logger.info
        log(
            "[api.error] view=%s status=%s code=%s detail=%s",
            view.__class__.__name__ if view else None,
            exc.status_code,
            exc.code,
            exc.detail,
        )
        return Response(
            {"detail": exc.detail, "code": exc.code},
            status=exc.status_code,
        )
    return drf_exception_handler(exc, context)
