from django.contrib import admin

from .models import Class, ClassMembership


@admin.register(Class)
class ClassAdmin(admin.ModelAdmin):
    list_display = ("id", "class_name", "year", "subject", "teacher", "created_at")
    search_fields = ("class_name", "subject", "teacher__name")


@admin.register(ClassMembership)
class ClassMembershipAdmin(admin.ModelAdmin):
    list_display = ("id", "classroom", "student", "joined_at")
    list_filter = ("classroom",)
