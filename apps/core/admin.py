# PATH: apps/core/admin.py
from django.contrib import admin

from apps.core.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "phone", "name", "school", "role", "is_active", "date_joined")
    list_filter = ("role", "is_active")
    search_fields = ("phone", "name", "school")
    readonly_fields = ("password", "last_login", "date_joined")
