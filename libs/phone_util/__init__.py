"""
전화번호 정규화 및 검증 유틸리티

중국 휴대폰 번호 표준화:
- 입력: 138-1234-5678, 13812345678, +86 138 1234 5678 등
- 출력: 13812345678 (구분자 제거, 국가코드 제거)
"""

from .normalizer import normalize_phone, validate_phone, mask_phone, PhoneValidationError

__all__ = ["normalize_phone", "validate_phone", "mask_phone", "PhoneValidationError"]
