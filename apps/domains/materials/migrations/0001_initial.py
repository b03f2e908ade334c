import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="LearningMaterial",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("file_type", models.CharField(max_length=50)),
                ("file_extension", models.CharField(blank=True, default="", max_length=20)),
                ("file_url", models.CharField(max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "teacher",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="materials",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "learning_materials",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="MaterialTag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50)),
                (
                    "material",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tags",
                        to="materials.learningmaterial",
                    ),
                ),
            ],
            options={
                "db_table": "learning_material_tags",
                "ordering": ["id"],
                "constraints": [
                    models.UniqueConstraint(fields=("material", "name"), name="unique_material_tag"),
                ],
            },
        ),
    ]
