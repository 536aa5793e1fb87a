from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/health", health, name="health"),

    # Assessments API (scoring + history + report + assistant)
    path("api/assessments/", include("assessments.urls")),
]
