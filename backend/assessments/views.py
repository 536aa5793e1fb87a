import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .assistant import build_greeting, build_result_explanation, reply
from .report import build_report
from .scoring import get_risk_scorer
from .serializers import AssessmentIntakeSerializer, ChatMessageSerializer
from .storage import get_history_store, new_entry

logger = logging.getLogger(__name__)


def _not_found():
    return Response({"detail": "Assessment not found."}, status=status.HTTP_404_NOT_FOUND)


class AssessmentScoreView(APIView):
    """Score a questionnaire without saving it."""

    def post(self, request):
        serializer = AssessmentIntakeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = get_risk_scorer().score(serializer.to_record())
        return Response({"result": result.to_dict()}, status=status.HTTP_200_OK)


class AssessmentHistoryView(APIView):
    def get(self, request):
        entries = get_history_store().list_all()
        return Response([e.to_dict() for e in entries], status=status.HTTP_200_OK)

    def post(self, request):
        serializer = AssessmentIntakeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        record = serializer.to_record()
        entry = new_entry(record, get_risk_scorer().score(record))
        get_history_store().save(entry)

        return Response(entry.to_dict(), status=status.HTTP_201_CREATED)

    def delete(self, request):
        get_history_store().clear()
        return Response(status=status.HTTP_204_NO_CONTENT)


class AssessmentDetailView(APIView):
    def get(self, request, entry_id: str):
        entry = get_history_store().get(entry_id)
        if not entry:
            return _not_found()
        return Response(entry.to_dict(), status=status.HTTP_200_OK)


class AssessmentReportView(APIView):
    def get(self, request, entry_id: str):
        entry = get_history_store().get(entry_id)
        if not entry:
            return _not_found()

        document = build_report(entry)
        logger.info("Exported report for %s (%s pages)", entry.id, document.page_count)

        response = HttpResponse(document.render(), content_type="text/plain; charset=utf-8")
        response["Content-Disposition"] = f'attachment; filename="{document.filename}"'
        return response


class AssessmentExplanationView(APIView):
    def get(self, request, entry_id: str):
        entry = get_history_store().get(entry_id)
        if not entry:
            return _not_found()
        return Response({"explanation": build_result_explanation(entry)}, status=status.HTTP_200_OK)


class AssessmentChatView(APIView):
    def get(self, request, entry_id: str):
        entry = get_history_store().get(entry_id)
        if not entry:
            return _not_found()
        return Response({"reply": build_greeting(entry)}, status=status.HTTP_200_OK)

    def post(self, request, entry_id: str):
        entry = get_history_store().get(entry_id)
        if not entry:
            return _not_found()

        serializer = ChatMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        return Response(
            {"reply": reply(serializer.validated_data["message"], entry)},
            status=status.HTTP_200_OK,
        )
