from django.conf import settings
from django.db import models
from django.db.models.functions import Now


class Job(models.Model):
    title = models.TextField()
    salary = models.IntegerField(null=True, blank=True)
    equity = models.DecimalField(max_digits=4, decimal_places=3, null=True, blank=True)
    company = models.ForeignKey(
        "company.Company",
        on_delete=models.CASCADE,
        db_column="company_handle",
        related_name="jobs",
    )

    class Meta:
        db_table = "jobs"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(salary__gte=0), name="jobs_salary_gte_0"
            ),
            models.CheckConstraint(
                condition=models.Q(equity__lte=1), name="jobs_equity_lte_1"
            ),
        ]

    def __str__(self):
        return f"{self.company_id} - {self.title}"


class Application(models.Model):
    """사용자의 채용 공고 지원 내역 (username + job_id 유일)"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        to_field="username",
        db_column="username",
        related_name="applications",
    )
    job = models.ForeignKey(
        Job,
        on_delete=models.CASCADE,
        db_column="job_id",
        related_name="applications",
    )
    created_at = models.DateTimeField(db_default=Now())

    class Meta:
        db_table = "applications"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "job"], name="uniq_application_user_job"
            ),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.job_id}"
