from django.urls import path

from .views import UploadUrlView, ConfirmUploadView, ObjectListView, ObjectView

urlpatterns = [
    path("upload-url/", UploadUrlView.as_view(), name="storage-upload-url"),
    path("confirm-upload/", ConfirmUploadView.as_view(), name="storage-confirm-upload"),
    path("objects/", ObjectListView.as_view(), name="storage-object-list"),
    path("objects/<path:key>", ObjectView.as_view(), name="storage-object"),
]
