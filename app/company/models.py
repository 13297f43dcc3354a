from django.db import models


class Company(models.Model):
    handle = models.CharField(max_length=25, primary_key=True)
    name = models.TextField(unique=True)
    description = models.TextField()
    num_employees = models.IntegerField(null=True, blank=True)
    logo_url = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "companies"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(num_employees__gte=0),
                name="companies_num_employees_gte_0",
            ),
        ]

    def __str__(self):
        return f"{self.handle} - {self.name}"
