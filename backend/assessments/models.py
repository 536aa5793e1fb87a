from django.db import models
from django.utils import timezone


class AssessmentHistory(models.Model):
    class RiskLevel(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"

    entry_id = models.CharField(max_length=36, unique=True)
    created_at = models.DateTimeField(default=timezone.now)

    data = models.JSONField()      # AssessmentRecord.to_dict()
    result = models.JSONField()    # RiskAssessmentResult.to_dict()

    # denormalized for admin filtering
    risk_level = models.CharField(max_length=10, choices=RiskLevel.choices)
    stage = models.PositiveSmallIntegerField(default=0)

    class Meta:
        ordering = ["-id"]
        verbose_name_plural = "assessment history"

    def __str__(self) -> str:
        return f"{self.entry_id} ({self.risk_level})"
