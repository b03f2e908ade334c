from django.urls import path

from .views import (
    AdoptPetView,
    MyPetListView,
    ClassPetView,
    PetDetailView,
    FeedPetView,
    PetAdviceView,
)

urlpatterns = [
    path("adopt/", AdoptPetView.as_view(), name="pet-adopt"),
    path("my-pets/", MyPetListView.as_view(), name="pet-my-list"),
    path("class/<int:class_id>/", ClassPetView.as_view(), name="pet-class"),
    path("<int:pet_id>/", PetDetailView.as_view(), name="pet-detail"),
    path("<int:pet_id>/feed/", FeedPetView.as_view(), name="pet-feed"),
    path("<int:pet_id>/advice/", PetAdviceView.as_view(), name="pet-advice"),
]
