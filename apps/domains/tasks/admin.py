from django.contrib import admin

from .models import Task, TaskSubmission


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "classroom", "teacher", "points", "deadline", "created_at")
    list_filter = ("classroom",)
    search_fields = ("title",)


@admin.register(TaskSubmission)
class TaskSubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "task", "student", "submitted_at")
    list_filter = ("task__classroom",)
