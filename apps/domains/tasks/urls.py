from django.urls import path

from .views import (
    TaskPublishView,
    ClassTaskListView,
    TaskDetailView,
    TaskSubmitView,
    TaskSubmissionListView,
    MySubmissionView,
)

urlpatterns = [
    path("publish/", TaskPublishView.as_view(), name="task-publish"),
    path("class/<int:class_id>/", ClassTaskListView.as_view(), name="task-class-list"),
    path("<int:task_id>/", TaskDetailView.as_view(), name="task-detail"),
    path("<int:task_id>/submit/", TaskSubmitView.as_view(), name="task-submit"),
    path("<int:task_id>/submissions/", TaskSubmissionListView.as_view(), name="task-submissions"),
    path("<int:task_id>/my-submission/", MySubmissionView.as_view(), name="task-my-submission"),
]
