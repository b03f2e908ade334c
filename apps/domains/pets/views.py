from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.errors import NotFoundError
from apps.core.permissions import IsStudent
from apps.domains.classes.access import get_class_or_404
from apps.domains.points import services as points_service

from .models import Pet
from .permissions import IsPetOwner
from .serializers import PetSerializer, AdoptSerializer, FeedSerializer
from . import services


def _get_pet_or_404(pet_id) -> Pet:
    try:
        return Pet.objects.select_related("student").get(id=pet_id)
    except Pet.DoesNotExist:
        raise NotFoundError("pet not found")


class AdoptPetView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    @swagger_auto_schema(request_body=AdoptSerializer)
    def post(self, request):
        serializer = AdoptSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        classroom = get_class_or_404(data["class_id"])
        pet = services.adopt(
            student=request.user,
            classroom=classroom,
            name=data["name"],
            description=data["description"],
        )
        return Response(PetSerializer(pet).data, status=status.HTTP_201_CREATED)


class MyPetListView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        qs = Pet.objects.filter(student=request.user)
        return Response(PetSerializer(qs, many=True).data)


class ClassPetView(APIView):
    """학생 본인의 해당 학급 펫"""

    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, class_id):
        pet = Pet.objects.filter(student=request.user, classroom_id=class_id).first()
        if pet is None:
            raise NotFoundError("no pet found in this class")
        return Response(PetSerializer(pet).data)


class PetDetailView(APIView):
    permission_classes = [IsAuthenticated, IsPetOwner]

    def get(self, request, pet_id):
        pet = _get_pet_or_404(pet_id)
        self.check_object_permissions(request, pet)
        return Response(PetSerializer(pet).data)


class FeedPetView(APIView):
    permission_classes = [IsAuthenticated, IsStudent, IsPetOwner]

    @swagger_auto_schema(request_body=FeedSerializer)
    def post(self, request, pet_id):
        serializer = FeedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        pet = _get_pet_or_404(pet_id)
        self.check_object_permissions(request, pet)

        pet = services.feed(
            pet_id=pet.id,
            student=request.user,
            points=serializer.validated_data["points"],
        )
        balance = points_service.balance(student_id=request.user.id, class_id=pet.classroom_id)
        return Response({**PetSerializer(pet).data, "points": balance})


class PetAdviceView(APIView):
    permission_classes = [IsAuthenticated, IsPetOwner]

    def get(self, request, pet_id):
        pet = _get_pet_or_404(pet_id)
        self.check_object_permissions(request, pet)
        return Response({"advice": services.advice(pet)})
