from django.urls import include, path
from job.views import JobViewSet
from rest_framework.routers import DefaultRouter

router = DefaultRouter()
router.register(r"jobs", JobViewSet, basename="job")

urlpatterns = [
    path("", include(router.urls)),
]
