from rest_framework import serializers

from .intake import calculate_bmi
from .scoring.contracts import AssessmentRecord


def _score_field():
    return serializers.IntegerField(min_value=0, max_value=10)


class AssessmentIntakeSerializer(serializers.Serializer):
    """
    Questionnaire payload. Either bmi or weight_kg + height_cm must be sent;
    biomarkers and history flags are optional.
    """
    # Basic info
    age = serializers.IntegerField(min_value=18, max_value=60)
    bmi = serializers.FloatField(required=False)
    weight_kg = serializers.FloatField(required=False, min_value=1, write_only=True)
    height_cm = serializers.FloatField(required=False, min_value=1, write_only=True)
    cycle_length = serializers.IntegerField(min_value=20, max_value=40)
    age_of_menarche = serializers.IntegerField(min_value=8, max_value=18)

    # Symptoms
    dysmenorrhea_score = _score_field()
    pelvic_pain_score = _score_field()
    dyspareunia_score = _score_field()
    dyschezia_score = _score_field()
    urinary_symptoms_score = _score_field()
    mental_health_score = _score_field()

    # History
    family_history = serializers.BooleanField(required=False, default=False)
    infertility_status = serializers.BooleanField(required=False, default=False)

    # Biomarkers
    ca125_level = serializers.FloatField(required=False, default=0.0, min_value=0)
    crp_level = serializers.FloatField(required=False, default=0.0, min_value=0)

    def validate_bmi(self, value: float) -> float:
        if value <= 0:
            raise serializers.ValidationError("bmi must be greater than 0.")
        return value

    def validate(self, attrs):
        weight = attrs.pop("weight_kg", None)
        height = attrs.pop("height_cm", None)

        if attrs.get("bmi") is None:
            if weight is None or height is None:
                raise serializers.ValidationError(
                    {"bmi": "Provide bmi, or weight_kg and height_cm to compute it."}
                )
            attrs["bmi"] = calculate_bmi(weight, height)

        return attrs

    def to_record(self) -> AssessmentRecord:
        return AssessmentRecord.from_dict(self.validated_data)


class ChatMessageSerializer(serializers.Serializer):
    # CharField trims whitespace and rejects blank input
    message = serializers.CharField(max_length=1000)
