# PATH: apps/support/ai/client.py
"""
AI 생성 게이트웨이 (OpenAI SDK)

- 요청당 1회 호출, 자동 재시도 없음 (max_retries=0)
- timeout 은 settings.AI_REQUEST_TIMEOUT_SECONDS
- SDK 오류 / 빈 응답은 모두 UpstreamServiceError
"""

from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from openai import OpenAI, OpenAIError

from apps.api.common.errors import UpstreamServiceError

logger = logging.getLogger(__name__)

_client: Optional[OpenAI] = None


def _get_client() -> OpenAI:
    global _client
    if _client is not None:
        return _client

    if not settings.OPENAI_API_KEY:
        raise UpstreamServiceError("AI service is not configured")

    _client = OpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL or None,
        timeout=settings.AI_REQUEST_TIMEOUT_SECONDS,
        max_retries=0,
    )
    return _client


def generate_image(prompt: str) -> str:
    """이미지 1장 생성 → base64 문자열"""
    client = _get_client()
    try:
        response = client.images.generate(
            model=settings.AI_IMAGE_MODEL,
            prompt=prompt,
            n=1,
            size=settings.AI_IMAGE_SIZE,
        )
    except OpenAIError as e:
        logger.warning("[ai.image] failed model=%s err=%s", settings.AI_IMAGE_MODEL, e)
        raise UpstreamServiceError("failed to generate image")

    data = getattr(response, "data", None) or []
    b64 = getattr(data[0], "b64_json", None) if data else None
    if not b64:
        logger.warning("[ai.image] empty response model=%s", settings.AI_IMAGE_MODEL)
        raise UpstreamServiceError("failed to generate image")

    return b64


def generate_text(system_prompt: str, user_prompt: str, *, max_tokens: int = 150) -> str:
    client = _get_client()
    try:
        response = client.chat.completions.create(
            model=settings.AI_TEXT_MODEL,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_completion_tokens=max_tokens,
        )
    except OpenAIError as e:
        logger.warning("[ai.text] failed model=%s err=%s", settings.AI_TEXT_MODEL, e)
        raise UpstreamServiceError("failed to generate text")

    choices = getattr(response, "choices", None) or []
    content = choices[0].message.content if choices else None
    if not content or not content.strip():
        logger.warning("[ai.text] empty response model=%s", settings.AI_TEXT_MODEL)
        raise UpstreamServiceError("failed to generate text")

    return content.strip()
