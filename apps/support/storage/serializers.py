from rest_framework import serializers

from .models import ObjectAclPolicy, Visibility


class UploadUrlRequestSerializer(serializers.Serializer):
    file_extension = serializers.CharField(max_length=20, required=False, allow_blank=True, default="")


class ConfirmUploadSerializer(serializers.Serializer):
    object_path = serializers.CharField(max_length=512)
    visibility = serializers.ChoiceField(choices=Visibility.choices, default=Visibility.PRIVATE)


class ObjectAclPolicySerializer(serializers.ModelSerializer):
    class Meta:
        model = ObjectAclPolicy
        fields = ["object_path", "owner", "visibility", "created_at", "updated_at"]
