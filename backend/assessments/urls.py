from django.urls import path

from .views import (
    AssessmentChatView,
    AssessmentDetailView,
    AssessmentExplanationView,
    AssessmentHistoryView,
    AssessmentReportView,
    AssessmentScoreView,
)

urlpatterns = [
    # Scoring
    path("score/", AssessmentScoreView.as_view(), name="assessment-score"),

    # History
    path("", AssessmentHistoryView.as_view(), name="assessment-history"),
    path("<str:entry_id>/", AssessmentDetailView.as_view(), name="assessment-detail"),

    # Export / explanation
    path("<str:entry_id>/report/", AssessmentReportView.as_view(), name="assessment-report"),
    path("<str:entry_id>/explanation/", AssessmentExplanationView.as_view(), name="assessment-explanation"),
    path("<str:entry_id>/chat/", AssessmentChatView.as_view(), name="assessment-chat"),
]
