from django.urls import path

from .views import MyClassPointsView

urlpatterns = [
    path("classes/<int:class_id>/me/", MyClassPointsView.as_view(), name="points-my-class"),
]
