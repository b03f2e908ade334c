# apps/core/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model

from libs.phone_util import validate_phone, PhoneValidationError

User = get_user_model()


# ------------------------------------
# User Base
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id",
            "phone",
            "name",
            "school",
            "role",
        ]


# ------------------------------------
# Register
# ------------------------------------

class RegisterSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=50)
    school = serializers.CharField(max_length=100)
    password = serializers.CharField(min_length=6, max_length=128, write_only=True)
    role = serializers.ChoiceField(choices=User.Role.choices)

    def validate_phone(self, value):
        try:
            return validate_phone(value)
        except PhoneValidationError as e:
            raise serializers.ValidationError(str(e))


# ------------------------------------
# Login
# ------------------------------------

class LoginSerializer(serializers.Serializer):
    phone = serializers.CharField(max_length=20)
    password = serializers.CharField(write_only=True)
    role = serializers.ChoiceField(choices=User.Role.choices)


# ------------------------------------
# Profile
# ------------------------------------

class ProfileSerializer(serializers.ModelSerializer):
    """name / school 만 수정 가능 (phone, role 은 불변)"""

    name = serializers.CharField(max_length=50)
    school = serializers.CharField(max_length=100)

    class Meta:
        model = User
        fields = ["id", "phone", "name", "school", "role"]
        read_only_fields = ["id", "phone", "role"]
