# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Auth / Account
    # =========================
    path("auth/", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("classes/", include("apps.domains.classes.urls")),
    path("materials/", include("apps.domains.materials.urls")),
    path("tasks/", include("apps.domains.tasks.urls")),
    path("points/", include("apps.domains.points.urls")),
    path("pets/", include("apps.domains.pets.urls")),

    # =========================
    # Object storage
    # =========================
    path("storage/", include("apps.support.storage.urls")),
]
