from django.contrib import admin

from .models import ObjectAclPolicy


@admin.register(ObjectAclPolicy)
class ObjectAclPolicyAdmin(admin.ModelAdmin):
    list_display = ("id", "object_path", "owner", "visibility", "updated_at")
    list_filter = ("visibility",)
    search_fields = ("object_path", "owner")
