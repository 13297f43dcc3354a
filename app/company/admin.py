from company.models import Company
from django.contrib import admin


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ["handle", "name", "num_employees"]
    search_fields = ["handle", "name"]
    ordering = ["name"]
    list_per_page = 100
