"""Pydantic schemas for request/response validation."""

from app.schemas.common import (
    ErrorResponse,
    HealthResponse,
)
from app.schemas.interaction import (
    # Enums
    AdministrationRoute,
    AdvisoryCategory,
    CompatibilityStatus,
    RiskLevel,
    Sex,
    TimeToOnset,
    # Catalog
    Drug,
    DrugEntry,
    # Patient
    AlcoholData,
    BloodPressure,
    ClinicalParameters,
    LiverEnzymes,
    MedicalHistory,
    PatientData,
    # Evidence
    Evidence,
    GuidelineReference,
    LiteratureCitation,
    RegulatoryWarning,
    # Interactions
    InteractionRecord,
    InteractionResult,
    KnownInteraction,
    RiskAdvisory,
    # Request / response
    AnalysisRequest,
    SafetyAssessmentResult,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Enums
    "AdministrationRoute",
    "AdvisoryCategory",
    "CompatibilityStatus",
    "RiskLevel",
    "Sex",
    "TimeToOnset",
    # Catalog
    "Drug",
    "DrugEntry",
    # Patient
    "AlcoholData",
    "BloodPressure",
    "ClinicalParameters",
    "LiverEnzymes",
    "MedicalHistory",
    "PatientData",
    # Evidence
    "Evidence",
    "GuidelineReference",
    "LiteratureCitation",
    "RegulatoryWarning",
    # Interactions
    "InteractionRecord",
    "InteractionResult",
    "KnownInteraction",
    "RiskAdvisory",
    # Request / response
    "AnalysisRequest",
    "SafetyAssessmentResult",
]
