"""
Drug Interaction Schemas

Pydantic models for the drug catalog, interaction knowledge base and
safety assessment results. Attributes are snake_case in Python and
camelCase on the wire, so request/response bodies are a direct JSON
projection of the data model.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ============================================================================
# ENUMS - Risk and Classification Types
# ============================================================================

class RiskLevel(str, Enum):
    """Interaction severity, ordered none < low < moderate < high < critical."""
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _RISK_ORDER.index(self)


_RISK_ORDER = [
    RiskLevel.NONE,
    RiskLevel.LOW,
    RiskLevel.MODERATE,
    RiskLevel.HIGH,
    RiskLevel.CRITICAL,
]


class CompatibilityStatus(str, Enum):
    """Whether a drug combination may be co-administered."""
    COMPATIBLE = "compatible"
    INCOMPATIBLE = "incompatible"


class TimeToOnset(str, Enum):
    """How quickly an interaction manifests."""
    IMMEDIATE = "immediate"
    SHORT_TERM = "short-term"
    DELAYED = "delayed"


class AdministrationRoute(str, Enum):
    """Route of administration for a drug entry."""
    ORAL = "oral"
    INTRAVENOUS = "intravenous"
    INTRAMUSCULAR = "intramuscular"
    SUBCUTANEOUS = "subcutaneous"
    TOPICAL = "topical"
    INHALATION = "inhalation"
    RECTAL = "rectal"
    TRANSDERMAL = "transdermal"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class AdvisoryCategory(str, Enum):
    """Source of a non-pairwise risk advisory."""
    PATIENT = "patient"
    FOOD = "food"
    ALCOHOL = "alcohol"


class CamelModel(BaseModel):
    """Base model serialising attributes as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# DRUG CATALOG MODELS
# ============================================================================

class Drug(CamelModel):
    """Catalog entry for a known substance."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Canonical lower-case drug identifier")
    name: str = Field(..., description="Display name")
    generic_name: Optional[str] = Field(None, description="Generic (INN) name")
    brand_name: Optional[str] = Field(None, description="Common brand name")
    description: Optional[str] = Field(None, description="Short description")
    drug_class: str = Field(..., description="Pharmacological class")
    renally_cleared: bool = Field(default=False, description="Primarily eliminated by the kidneys")


class DrugEntry(CamelModel):
    """A medication as entered by the user."""

    drug_id: str = Field(default="", description="Catalog id; empty until a suggestion is picked")
    drug_name: str = Field(default="", description="Display name as entered")
    dosage: str = Field(default="", description="Free-text dosage")
    route: Optional[AdministrationRoute] = Field(None, description="Administration route")
    frequency: str = Field(default="", description="Dosing frequency")

    @field_validator("route", mode="before")
    @classmethod
    def normalize_route(cls, v):
        """Treat blank routes as unset and accept any casing."""
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("drug_id", mode="before")
    @classmethod
    def default_drug_id(cls, v):
        return v if v is not None else ""


# ============================================================================
# PATIENT MODELS
# ============================================================================

class LiverEnzymes(CamelModel):
    alt: Optional[float] = Field(None, ge=0, description="Alanine aminotransferase (U/L)")
    ast: Optional[float] = Field(None, ge=0, description="Aspartate aminotransferase (U/L)")


class BloodPressure(CamelModel):
    systolic: Optional[float] = Field(None, ge=0, description="Systolic pressure (mmHg)")
    diastolic: Optional[float] = Field(None, ge=0, description="Diastolic pressure (mmHg)")


class ClinicalParameters(CamelModel):
    egfr: Optional[float] = Field(
        None,
        ge=0,
        alias="eGFR",
        description="Estimated glomerular filtration rate (mL/min/1.73m2)"
    )
    liver_enzymes: Optional[LiverEnzymes] = None
    blood_pressure: Optional[BloodPressure] = None


class MedicalHistory(CamelModel):
    conditions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    adverse_reactions: list[str] = Field(default_factory=list)


class PatientData(CamelModel):
    """
    Optional patient attributes.

    Every field is optional; an absent value means the attribute was not
    evaluated, never that it is zero.
    """

    name: Optional[str] = Field(None, description="Display name, not used in analysis")
    age: Optional[float] = Field(None, ge=0, le=150, description="Age in years")
    sex: Optional[Sex] = None
    weight: Optional[float] = Field(None, gt=0, description="Weight in kg")
    height: Optional[float] = Field(None, gt=0, description="Height in cm")
    clinical_parameters: Optional[ClinicalParameters] = None
    medical_history: Optional[MedicalHistory] = None
    current_medications: list[str] = Field(default_factory=list)
    supplements: list[str] = Field(default_factory=list)


class AlcoholData(CamelModel):
    has_interaction: bool = Field(default=False, description="Patient consumes alcohol")
    details: Optional[str] = Field(None, description="Free-text consumption details")


# ============================================================================
# EVIDENCE MODELS
# ============================================================================

class LiteratureCitation(CamelModel):
    title: str
    authors: str
    journal: str
    year: int
    url: Optional[str] = None


class GuidelineReference(CamelModel):
    organization: str
    recommendation: str
    year: int


class RegulatoryWarning(CamelModel):
    organization: str
    warning: str
    date: str


class Evidence(CamelModel):
    literature_citations: list[LiteratureCitation] = Field(default_factory=list)
    guidelines: list[GuidelineReference] = Field(default_factory=list)
    regulatory_warnings: list[RegulatoryWarning] = Field(default_factory=list)


# ============================================================================
# INTERACTION MODELS
# ============================================================================

class InteractionRecord(CamelModel):
    """Knowledge-base content for one drug pair, independent of display names."""

    model_config = ConfigDict(frozen=True)

    risk_level: RiskLevel
    compatibility_status: CompatibilityStatus
    time_to_onset: TimeToOnset
    confidence_score: int = Field(..., ge=1, le=5)
    mechanism: str
    effects: list[str] = Field(default_factory=list)
    dose_modification: Optional[str] = None
    monitoring_parameters: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)
    evidence: Evidence = Field(default_factory=Evidence)


class InteractionResult(InteractionRecord):
    """Interaction record bound to the pair of drugs it was resolved for."""

    model_config = ConfigDict(frozen=False)

    drug_pair: tuple[str, str] = Field(..., description="Display names, input order preserved")


class RiskAdvisory(CamelModel):
    """Patient, food or alcohol advisory feeding the overall risk level."""

    category: AdvisoryCategory
    risk_level: RiskLevel
    description: str
    recommendation: str
    drugs: list[str] = Field(default_factory=list, description="Display names involved")


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class AnalysisRequest(CamelModel):
    """Request body for an interaction analysis."""

    drugs: list[DrugEntry] = Field(..., min_length=1, description="Medications to analyze")
    patient_data: Optional[PatientData] = None
    food_items: list[str] = Field(default_factory=list)
    alcohol: Optional[AlcoholData] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "drugs": [
                    {"drugId": "warfarin", "drugName": "Warfarin", "dosage": "5 mg",
                     "route": "oral", "frequency": "once daily"},
                    {"drugId": "aspirin", "drugName": "Aspirin", "dosage": "81 mg",
                     "route": "oral", "frequency": "once daily"}
                ],
                "patientData": {"age": 70, "clinicalParameters": {"eGFR": 55}},
                "foodItems": ["Grapefruit"],
                "alcohol": {"hasInteraction": True}
            }
        }
    )


class SafetyAssessmentResult(CamelModel):
    """Complete outcome of one analysis call."""

    interaction_results: list[InteractionResult] = Field(
        default_factory=list,
        description="One record per analyzed pair, in enumeration order"
    )
    advisories: list[RiskAdvisory] = Field(default_factory=list)
    overall_risk_level: RiskLevel
    overall_compatibility_status: CompatibilityStatus
    database_version: str
    last_updated: str
    analyzed_at: datetime = Field(default_factory=datetime.utcnow)


class KnownInteraction(CamelModel):
    """Listing entry for a pair stored in the knowledge base."""

    drug_ids: tuple[str, str]
    risk_level: RiskLevel
    compatibility_status: CompatibilityStatus
