from django.contrib import admin

from .models import AssessmentHistory


@admin.register(AssessmentHistory)
class AssessmentHistoryAdmin(admin.ModelAdmin):
    list_display = ("id", "entry_id", "risk_level", "stage", "created_at")
    list_filter = ("risk_level", "stage", "created_at")
    search_fields = ("entry_id",)
    readonly_fields = ("entry_id", "created_at", "data", "result")
