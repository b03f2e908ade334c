from django.contrib import admin

from .models import Pet


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "student", "classroom", "level", "experience", "updated_at")
    list_filter = ("classroom",)
    readonly_fields = ("level", "experience")
