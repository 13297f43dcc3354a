from __future__ import annotations

import django.db.models.deletion
import django.db.models.functions.datetime
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("company", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Job",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("title", models.TextField()),
                ("salary", models.IntegerField(blank=True, null=True)),
                (
                    "equity",
                    models.DecimalField(
                        blank=True, decimal_places=3, max_digits=4, null=True
                    ),
                ),
                (
                    "company",
                    models.ForeignKey(
                        db_column="company_handle",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="jobs",
                        to="company.company",
                    ),
                ),
            ],
            options={
                "db_table": "jobs",
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("salary__gte", 0)),
                        name="jobs_salary_gte_0",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("equity__lte", 1)),
                        name="jobs_equity_lte_1",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Application",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        db_default=django.db.models.functions.datetime.Now()
                    ),
                ),
                (
                    "job",
                    models.ForeignKey(
                        db_column="job_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to="job.job",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        db_column="username",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to=settings.AUTH_USER_MODEL,
                        to_field="username",
                    ),
                ),
            ],
            options={
                "db_table": "applications",
                "constraints": [
                    models.UniqueConstraint(
                        fields=("user", "job"), name="uniq_application_user_job"
                    )
                ],
            },
        ),
    ]
