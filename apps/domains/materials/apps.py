from django.apps import AppConfig


class MaterialsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.materials"
    label = "materials"
    verbose_name = "Learning Materials"
