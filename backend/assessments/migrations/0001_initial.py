import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AssessmentHistory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entry_id", models.CharField(max_length=36, unique=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("data", models.JSONField()),
                ("result", models.JSONField()),
                (
                    "risk_level",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High")],
                        max_length=10,
                    ),
                ),
                ("stage", models.PositiveSmallIntegerField(default=0)),
            ],
            options={
                "ordering": ["-id"],
                "verbose_name_plural": "assessment history",
            },
        ),
    ]
