from django.urls import path

from .views import (
    ClassCreateView,
    TeacherClassListView,
    AvailableClassListView,
    JoinClassView,
    StudentClassListView,
    ClassDetailView,
    ClassMemberRemoveView,
    ClassRankingsView,
)

urlpatterns = [
    path("create/", ClassCreateView.as_view(), name="class-create"),
    path("teacher/", TeacherClassListView.as_view(), name="class-teacher-list"),
    path("available/", AvailableClassListView.as_view(), name="class-available-list"),
    path("join/", JoinClassView.as_view(), name="class-join"),
    path("student/", StudentClassListView.as_view(), name="class-student-list"),
    path("<int:class_id>/", ClassDetailView.as_view(), name="class-detail"),
    path(
        "<int:class_id>/members/<int:student_id>/",
        ClassMemberRemoveView.as_view(),
        name="class-member-remove",
    ),
    path("<int:class_id>/rankings/", ClassRankingsView.as_view(), name="class-rankings"),
]
