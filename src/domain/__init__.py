"""Domain models and the assessment ledger.

Taxpayer records are plain Pydantic models; ``AssessmentLedger`` owns them together with the
admin identity and enforces every registration, payment and authority rule.
"""

__all__ = [
    "assessment",
    "calls",
    "taxpayer",
]
