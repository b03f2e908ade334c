from rest_framework import serializers

from .models import Pet


class PetSerializer(serializers.ModelSerializer):
    student_id = serializers.IntegerField(read_only=True)
    class_id = serializers.IntegerField(source="classroom_id", read_only=True)

    class Meta:
        model = Pet
        fields = [
            "id",
            "student_id",
            "class_id",
            "name",
            "description",
            "image_url",
            "level",
            "experience",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AdoptSerializer(serializers.Serializer):
    class_id = serializers.IntegerField(min_value=1)
    name = serializers.CharField(max_length=50)
    description = serializers.CharField()


class FeedSerializer(serializers.Serializer):
    points = serializers.IntegerField(min_value=1)
