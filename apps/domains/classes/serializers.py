from rest_framework import serializers

from .models import Class, ClassMembership


class ClassSerializer(serializers.ModelSerializer):
    teacher_id = serializers.IntegerField(read_only=True)
    teacher_name = serializers.CharField(source="teacher.name", read_only=True)

    class Meta:
        model = Class
        fields = [
            "id",
            "teacher_id",
            "teacher_name",
            "year",
            "class_name",
            "subject",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]


class ClassCreateSerializer(serializers.Serializer):
    year = serializers.CharField(max_length=20)
    class_name = serializers.CharField(max_length=100)
    subject = serializers.CharField(max_length=50)


class JoinClassSerializer(serializers.Serializer):
    class_id = serializers.IntegerField(min_value=1)


class JoinedClassSerializer(serializers.ModelSerializer):
    """학생 시점: 가입한 학급 + 가입 시각"""

    id = serializers.IntegerField(source="classroom.id", read_only=True)
    teacher_id = serializers.IntegerField(source="classroom.teacher_id", read_only=True)
    teacher_name = serializers.CharField(source="classroom.teacher.name", read_only=True)
    year = serializers.CharField(source="classroom.year", read_only=True)
    class_name = serializers.CharField(source="classroom.class_name", read_only=True)
    subject = serializers.CharField(source="classroom.subject", read_only=True)

    class Meta:
        model = ClassMembership
        fields = [
            "id",
            "teacher_id",
            "teacher_name",
            "year",
            "class_name",
            "subject",
            "joined_at",
        ]


class MemberSerializer(serializers.ModelSerializer):
    """교사 시점: 학급 멤버"""

    id = serializers.IntegerField(source="student.id", read_only=True)
    name = serializers.CharField(source="student.name", read_only=True)
    phone = serializers.CharField(source="student.phone", read_only=True)
    school = serializers.CharField(source="student.school", read_only=True)

    class Meta:
        model = ClassMembership
        fields = ["id", "name", "phone", "school", "joined_at"]
