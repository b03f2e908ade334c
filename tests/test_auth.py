import pytest
from django.contrib.auth import get_user_model
from rest_framework_simplejwt.tokens import AccessToken

from apps.api.common.errors import ConflictError
from apps.core.services import register_user
from tests.support import hide_existing

User = get_user_model()

pytestmark = pytest.mark.django_db

REGISTER_URL = "/api/v1/auth/register/"
LOGIN_URL = "/api/v1/auth/login/"
ME_URL = "/api/v1/auth/me/"
PROFILE_URL = "/api/v1/auth/update-profile/"


def _payload(**overrides):
    data = {
        "phone": "13812345678",
        "name": "Li Lei",
        "school": "No.2 Middle School",
        "password": "secret123",
        "role": "student",
    }
    data.update(overrides)
    return data


class TestRegister:
    def test_register_creates_user_with_hashed_password(self, api_client):
        resp = api_client.post(REGISTER_URL, _payload(), format="json")

        assert resp.status_code == 201
        assert resp.data["user"]["phone"] == "13812345678"
        assert resp.data["user"]["role"] == "student"
        assert "token" in resp.data

        user = User.objects.get(phone="13812345678")
        assert user.password != "secret123"
        assert user.check_password("secret123")

    def test_register_normalizes_phone(self, api_client):
        resp = api_client.post(REGISTER_URL, _payload(phone="+86 138-1234-5678"), format="json")

        assert resp.status_code == 201
        assert User.objects.filter(phone="13812345678").exists()

    def test_duplicate_phone_is_conflict(self, api_client):
        api_client.post(REGISTER_URL, _payload(), format="json")
        resp = api_client.post(REGISTER_URL, _payload(name="Other", role="teacher"), format="json")

        assert resp.status_code == 409
        assert resp.data["code"] == "conflict"
        assert User.objects.filter(phone="13812345678").count() == 1

    def test_concurrent_register_resolved_by_unique_constraint(self, api_client):
        api_client.post(REGISTER_URL, _payload(), format="json")

        with hide_existing(User), pytest.raises(ConflictError):
            register_user(
                phone="13812345678",
                name="Other",
                school="No.3 Middle School",
                password="secret456",
                role="teacher",
            )

        assert User.objects.filter(phone="13812345678").count() == 1
        assert User.objects.get(phone="13812345678").name == "Li Lei"

    @pytest.mark.parametrize("missing", ["phone", "name", "school", "password", "role"])
    def test_missing_field_rejected(self, api_client, missing):
        data = _payload()
        data.pop(missing)

        resp = api_client.post(REGISTER_URL, data, format="json")

        assert resp.status_code == 400
        assert not User.objects.exists()

    def test_unknown_role_rejected(self, api_client):
        resp = api_client.post(REGISTER_URL, _payload(role="admin"), format="json")
        assert resp.status_code == 400

    def test_password_shorter_than_six_rejected(self, api_client):
        resp = api_client.post(REGISTER_URL, _payload(password="12345"), format="json")

        assert resp.status_code == 400
        assert "password" in resp.data
        assert not User.objects.exists()

    def test_non_mobile_phone_rejected(self, api_client):
        resp = api_client.post(REGISTER_URL, _payload(phone="010-1234-5678"), format="json")

        assert resp.status_code == 400
        assert "phone" in resp.data


class TestLogin:
    def test_login_issues_token_with_role_claim(self, api_client, make_user):
        user = make_user(role="teacher", phone="13900000001")

        resp = api_client.post(
            LOGIN_URL,
            {"phone": "13900000001", "password": "secret123", "role": "teacher"},
            format="json",
        )

        assert resp.status_code == 200
        token = AccessToken(resp.data["token"])
        assert token["user_id"] in (user.id, str(user.id))
        assert token["role"] == "teacher"
        assert resp.data["user"]["id"] == user.id

    def test_wrong_password(self, api_client, make_user):
        make_user(role="student", phone="13900000002")

        resp = api_client.post(
            LOGIN_URL,
            {"phone": "13900000002", "password": "wrong-pass", "role": "student"},
            format="json",
        )

        assert resp.status_code == 401
        assert resp.data["detail"] == "invalid phone or password"

    def test_unknown_phone(self, api_client):
        resp = api_client.post(
            LOGIN_URL,
            {"phone": "13900000009", "password": "secret123", "role": "student"},
            format="json",
        )
        assert resp.status_code == 401

    def test_role_mismatch(self, api_client, make_user):
        make_user(role="student", phone="13900000003")

        resp = api_client.post(
            LOGIN_URL,
            {"phone": "13900000003", "password": "secret123", "role": "teacher"},
            format="json",
        )

        assert resp.status_code == 401
        assert resp.data["detail"] == "role mismatch"


class TestSession:
    def test_missing_token(self, api_client):
        assert api_client.get(ME_URL).status_code == 401

    def test_invalid_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
        assert api_client.get(ME_URL).status_code == 401

    def test_me(self, student_client, student):
        resp = student_client.get(ME_URL)

        assert resp.status_code == 200
        assert resp.data["id"] == student.id
        assert resp.data["role"] == "student"

    def test_update_profile_keeps_role_and_phone(self, student_client, student):
        resp = student_client.put(
            PROFILE_URL,
            {"name": "New Name", "school": "New School", "role": "teacher", "phone": "13999999999"},
            format="json",
        )

        assert resp.status_code == 200
        student.refresh_from_db()
        assert student.name == "New Name"
        assert student.school == "New School"
        assert student.role == "student"
        assert student.phone != "13999999999"

    def test_update_profile_requires_both_fields(self, student_client):
        resp = student_client.put(PROFILE_URL, {"name": "Only Name"}, format="json")
        assert resp.status_code == 400
