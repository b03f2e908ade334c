from django.contrib import admin

from .models import UserPoints


@admin.register(UserPoints)
class UserPointsAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "classroom", "total_points", "spent_points", "updated_at")
    list_filter = ("classroom",)
    readonly_fields = ("total_points", "spent_points", "updated_at")
