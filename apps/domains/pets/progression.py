# PATH: apps/domains/pets/progression.py
# 경험치 → 레벨 (순수 함수). level 은 항상 experience 로부터 계산한다.

from __future__ import annotations

from apps.api.common.errors import DomainValidationError

EXPERIENCE_PER_LEVEL = 100


def level_for(experience: int) -> int:
    """
    >>> level_for(0)
    1
    >>> level_for(100)
    2
    """
    return experience // EXPERIENCE_PER_LEVEL + 1


def apply_feed(experience: int, points: int) -> tuple[int, int]:
    """(new_experience, new_level)"""
    if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
        raise DomainValidationError("points must be a positive integer")

    new_experience = experience + points
    return new_experience, level_for(new_experience)
