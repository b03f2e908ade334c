import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.api.common.auth_jwt import issue_tokens_for_user
from apps.domains.classes.models import Class, ClassMembership
from apps.support.storage.service import get_storage

User = get_user_model()


@pytest.fixture(autouse=True)
def storage():
    """테스트마다 비어 있는 메모리 스토리지"""
    get_storage.cache_clear()
    yield get_storage()
    get_storage.cache_clear()


@pytest.fixture
def make_user(db):
    seq = {"n": 0}

    def _make(role="student", name=None, password="secret123", **extra):
        seq["n"] += 1
        return User.objects.create_user(
            phone=extra.pop("phone", f"1380000{seq['n']:04d}"),
            password=password,
            name=name or f"{role}-{seq['n']}",
            school="No.1 Middle School",
            role=role,
            **extra,
        )

    return _make


@pytest.fixture
def teacher(make_user):
    return make_user(role="teacher", name="Teacher Wang")


@pytest.fixture
def student(make_user):
    return make_user(role="student", name="Student Li")


@pytest.fixture
def other_student(make_user):
    return make_user(role="student", name="Student Zhao")


def _client_for(user):
    client = APIClient()
    if user is not None:
        token = issue_tokens_for_user(user)["access"]
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    return _client_for


@pytest.fixture
def teacher_client(teacher):
    return _client_for(teacher)


@pytest.fixture
def student_client(student):
    return _client_for(student)


@pytest.fixture
def other_student_client(other_student):
    return _client_for(other_student)


@pytest.fixture
def classroom(teacher):
    return Class.objects.create(
        teacher=teacher,
        year="2025",
        class_name="Grade 8 Class 1",
        subject="Chinese",
    )


@pytest.fixture
def membership(classroom, student):
    return ClassMembership.objects.create(classroom=classroom, student=student)
