# PATH: apps/support/storage/errors.py
"""
객체 스토리지 오류.

ObjectNotFoundError 와 AclPolicyNotFoundError 는 둘 다 HTTP 404 이지만
code 로 원인을 구분한다 (로그/진단용).
"""

from apps.api.common.errors import ForbiddenError, NotFoundError


class ObjectNotFoundError(NotFoundError):
    default_code = "object_not_found"
    default_detail = "Object not found."


class AclPolicyNotFoundError(NotFoundError):
    default_code = "acl_policy_not_found"
    default_detail = "Object not found."


class ObjectAccessDenied(ForbiddenError):
    default_code = "object_access_denied"
    default_detail = "You do not have permission to access this object."
