from django.contrib import admin
from job.models import Application, Job


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "company", "salary", "equity"]
    search_fields = ["title", "company__name"]
    list_filter = ["company"]
    ordering = ["company", "id"]
    list_per_page = 100


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "job", "created_at"]
    search_fields = ["user__username", "job__title"]
    ordering = ["-created_at"]
