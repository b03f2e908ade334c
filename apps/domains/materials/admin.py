from django.contrib import admin

from .models import LearningMaterial, MaterialTag


class MaterialTagInline(admin.TabularInline):
    model = MaterialTag
    extra = 0


@admin.register(LearningMaterial)
class LearningMaterialAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "file_type", "file_extension", "teacher", "created_at")
    search_fields = ("name",)
    inlines = [MaterialTagInline]
