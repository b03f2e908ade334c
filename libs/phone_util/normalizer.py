"""
전화번호 정규화 및 검증 모듈

중국 휴대폰 번호 형식:
- 11자리, 1로 시작, 두 번째 자리 3~9 (13x, 15x, 18x, 19x ...)
- 국가코드 +86 / 86 / 0086 허용 후 제거
"""

import re
from typing import Optional


class PhoneValidationError(ValueError):
    """전화번호 검증 오류"""
    pass


_MOBILE_PATTERN = re.compile(r"^1[3-9]\d{9}$")


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    전화번호를 표준 형식으로 정규화

    Args:
        phone: 입력 전화번호 (다양한 형식 허용)

    Returns:
        정규화된 전화번호 (13812345678 형식) 또는 None

    Examples:
        >>> normalize_phone("138-1234-5678")
        '13812345678'
        >>> normalize_phone("+86 138 1234 5678")
        '13812345678'
        >>> normalize_phone("")
    """
    if not phone:
        return None

    phone_str = str(phone).strip()
    if not phone_str:
        return None

    # 하이픈, 공백, 괄호 제거
    phone_str = re.sub(r"[\s\-\(\)]", "", phone_str)

    # 국가코드 제거
    if phone_str.startswith("+86"):
        phone_str = phone_str[3:]
    elif phone_str.startswith("0086"):
        phone_str = phone_str[4:]
    elif phone_str.startswith("86") and len(phone_str) == 13:
        phone_str = phone_str[2:]

    phone_str = re.sub(r"[^\d]", "", phone_str)

    if not phone_str:
        return None

    return phone_str


def validate_phone(phone: Optional[str], allow_empty: bool = False) -> str:
    """
    전화번호 검증 및 정규화

    Raises:
        PhoneValidationError: 유효하지 않은 전화번호인 경우

    Examples:
        >>> validate_phone("13812345678")
        '13812345678'
        >>> validate_phone(None, allow_empty=True)
        ''
    """
    normalized = normalize_phone(phone)

    if not normalized:
        if allow_empty:
            return ""
        raise PhoneValidationError("Phone number is required")

    if _MOBILE_PATTERN.match(normalized):
        return normalized

    raise PhoneValidationError(f"Invalid phone number format: {phone}")


def mask_phone(phone: Optional[str]) -> str:
    """로깅용 전화번호 마스킹 (앞3·뒤4만 노출)"""
    if not phone or len(phone) < 7:
        return "***"
    return f"{phone[:3]}****{phone[-4:]}"
