# PATH: apps/domains/pets/services.py
"""
펫 입양 / 먹이 / 조언

adopt : 소속 확인 → 중복 확인 → AI 이미지 → 스토리지 업로드 → public ACL → 생성
        이미지 생성/업로드 실패 시 펫 행은 만들지 않는다.
feed  : 펫 행 잠금 → 포인트 사용 → experience/level 동시 저장 (한 트랜잭션)
"""

from __future__ import annotations

import base64
import binascii
import logging

from django.db import IntegrityError, transaction

from apps.api.common.errors import ConflictError, NotFoundError, UpstreamServiceError
from apps.domains.classes.access import require_member
from apps.domains.classes.models import Class
from apps.domains.points import services as points_service
from apps.support.ai import client as ai
from apps.support.ai.prompts import build_pet_advice_prompts, build_pet_image_prompt
from apps.support.storage import acl
from apps.support.storage.models import Visibility
from apps.support.storage.service import ObjectStorageService

from .models import Pet
from .progression import apply_feed

logger = logging.getLogger(__name__)

PET_IMAGE_CONTENT_TYPE = "image/png"


def _decode_image(b64: str) -> bytes:
    try:
        return base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError):
        raise UpstreamServiceError("AI service returned an invalid image")


def adopt(*, student, classroom: Class, name: str, description: str) -> Pet:
    require_member(student, classroom)

    if Pet.objects.filter(student=student, classroom=classroom).exists():
        raise ConflictError("you already have a pet in this class")

    logger.info("[pets.adopt] generating image student_id=%s class_id=%s", student.id, classroom.id)
    image = _decode_image(ai.generate_image(build_pet_image_prompt(name, description)))

    object_path = ObjectStorageService().upload_bytes(
        image,
        content_type=PET_IMAGE_CONTENT_TYPE,
        extension=".png",
    )
    acl.set_policy(object_path, owner=student.id, visibility=Visibility.PUBLIC)

    try:
        with transaction.atomic():
            pet = Pet.objects.create(
                student=student,
                classroom=classroom,
                name=name,
                description=description,
                image_url=object_path,
                level=1,
                experience=0,
            )
    except IntegrityError:
        raise ConflictError("you already have a pet in this class")

    logger.info("[pets.adopt] pet_id=%s student_id=%s class_id=%s", pet.id, student.id, classroom.id)
    return pet


@transaction.atomic
def feed(*, pet_id, student, points: int) -> Pet:
    # 검증 실패는 어떤 변경보다 먼저
    apply_feed(0, points)

    pet = Pet.objects.select_for_update().filter(id=pet_id, student=student).first()
    if pet is None:
        raise NotFoundError("pet not found")

    points_service.spend(student_id=student.id, class_id=pet.classroom_id, amount=points)

    pet.experience, pet.level = apply_feed(pet.experience, points)
    pet.save(update_fields=["experience", "level", "updated_at"])

    logger.info(
        "[pets.feed] pet_id=%s points=%s experience=%s level=%s",
        pet.id,
        points,
        pet.experience,
        pet.level,
    )
    return pet


def advice(pet: Pet) -> str:
    system, user = build_pet_advice_prompts(
        student_name=pet.student.name,
        level=pet.level,
        experience=pet.experience,
    )
    return ai.generate_text(system, user)
