from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                (
                    "handle",
                    models.CharField(max_length=25, primary_key=True, serialize=False),
                ),
                ("name", models.TextField(unique=True)),
                ("description", models.TextField()),
                ("num_employees", models.IntegerField(blank=True, null=True)),
                ("logo_url", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "companies",
                "ordering": ["name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("num_employees__gte", 0)),
                        name="companies_num_employees_gte_0",
                    )
                ],
            },
        ),
    ]
