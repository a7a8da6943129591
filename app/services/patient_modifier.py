"""
Patient Risk Modifier

Fixed rules that inspect patient attributes, food intake and alcohol use.
Each rule sees the same snapshot (patient data, resolved drugs, pair-level
risk) and returns its own outcome; no rule reads another rule's output.
"""

from typing import Callable, NamedTuple, Optional, Sequence

from app.schemas.interaction import (
    AdvisoryCategory,
    AlcoholData,
    PatientData,
    RiskAdvisory,
    RiskLevel,
)
from app.services.knowledge_base import AuxiliaryKnowledgeBase
from app.services.pair_resolver import ResolvedDrug

# Thresholds
ELDERLY_AGE = 65
REDUCED_EGFR = 60
ELEVATED_ALT = 40
ELEVATED_SYSTOLIC = 140

AGE_SENSITIVE_CLASSES = frozenset({"anticoagulant", "antiarrhythmic", "beta_blocker"})

# (condition substring, drug id, description, recommendation)
CONDITION_RULES = [
    (
        "diabetes",
        "aspirin",
        "Aspirin use in a patient with diabetes: antiplatelet benefit must be weighed against bleeding risk.",
        "Confirm the indication for aspirin and review glycaemic control.",
    ),
    (
        "atrial fibrillation",
        "warfarin",
        "Warfarin prescribed for atrial fibrillation: stroke prevention depends on a stable INR.",
        "Keep INR within the 2.0-3.0 target range and review other interacting drugs.",
    ),
]


class RiskSnapshot(NamedTuple):
    """Inputs every rule evaluates against."""
    patient: PatientData
    drugs: tuple[ResolvedDrug, ...]
    base_level: RiskLevel


class RuleOutcome(NamedTuple):
    escalation: Optional[RiskLevel] = None
    advisories: tuple[RiskAdvisory, ...] = ()


def escalate(level: RiskLevel) -> RiskLevel:
    """
    Move exactly one step up the severity scale, saturating at critical.

    ``none`` stays ``none``: there is no interaction signal to amplify.
    """
    if level in (RiskLevel.NONE, RiskLevel.CRITICAL):
        return level
    return list(RiskLevel)[level.rank + 1]


def _names(drugs: Sequence[ResolvedDrug]) -> list[str]:
    seen: list[str] = []
    for d in drugs:
        if d.display_name not in seen:
            seen.append(d.display_name)
    return seen


def _patient_advisory(level: RiskLevel, description: str, recommendation: str,
                      drugs: Sequence[ResolvedDrug] = ()) -> RiskAdvisory:
    return RiskAdvisory(
        category=AdvisoryCategory.PATIENT,
        risk_level=level,
        description=description,
        recommendation=recommendation,
        drugs=_names(drugs),
    )


# ============================================================================
# PATIENT RULES
# ============================================================================

def age_rule(snapshot: RiskSnapshot) -> RuleOutcome:
    age = snapshot.patient.age
    if age is None or age <= ELDERLY_AGE:
        return RuleOutcome()

    sensitive = [d for d in snapshot.drugs if d.drug.drug_class in AGE_SENSITIVE_CLASSES]
    advisories = ()
    if sensitive:
        names = ", ".join(_names(sensitive))
        advisories = (_patient_advisory(
            RiskLevel.MODERATE,
            f"Higher sensitivity to {names} in patients over {ELDERLY_AGE}.",
            "Consider reduced dosage and monitor more frequently.",
            sensitive,
        ),)
    return RuleOutcome(escalation=escalate(snapshot.base_level), advisories=advisories)


def renal_rule(snapshot: RiskSnapshot) -> RuleOutcome:
    params = snapshot.patient.clinical_parameters
    egfr = params.egfr if params else None
    if egfr is None or egfr >= REDUCED_EGFR:
        return RuleOutcome()

    escalation = None
    if snapshot.base_level in (RiskLevel.LOW, RiskLevel.MODERATE):
        escalation = escalate(snapshot.base_level)

    renal = [d for d in snapshot.drugs if d.drug.renally_cleared]
    advisories = ()
    if renal:
        names = ", ".join(_names(renal))
        advisories = (_patient_advisory(
            RiskLevel.HIGH,
            f"Reduced renal clearance (eGFR {egfr:g}) may affect {names}.",
            "Consider dose adjustment based on eGFR.",
            renal,
        ),)
    return RuleOutcome(escalation=escalation, advisories=advisories)


def hepatic_rule(snapshot: RiskSnapshot) -> RuleOutcome:
    params = snapshot.patient.clinical_parameters
    alt = params.liver_enzymes.alt if params and params.liver_enzymes else None
    if alt is None or alt <= ELEVATED_ALT:
        return RuleOutcome()

    return RuleOutcome(advisories=(_patient_advisory(
        RiskLevel.MODERATE,
        f"Elevated ALT ({alt:g} U/L) suggests impaired hepatic function, which may reduce clearance of hepatically metabolised drugs.",
        "Review hepatically cleared medications and repeat liver function tests.",
    ),))


def blood_pressure_rule(snapshot: RiskSnapshot) -> RuleOutcome:
    params = snapshot.patient.clinical_parameters
    systolic = params.blood_pressure.systolic if params and params.blood_pressure else None
    if systolic is None or systolic <= ELEVATED_SYSTOLIC:
        return RuleOutcome()

    return RuleOutcome(advisories=(_patient_advisory(
        RiskLevel.LOW,
        f"Elevated systolic blood pressure ({systolic:g} mmHg).",
        "Monitor blood pressure; some combinations may further affect haemodynamics.",
    ),))


def condition_rule(snapshot: RiskSnapshot) -> RuleOutcome:
    history = snapshot.patient.medical_history
    if not history or not history.conditions:
        return RuleOutcome()

    conditions = [c.lower() for c in history.conditions]
    advisories = []
    for needle, drug_id, description, recommendation in CONDITION_RULES:
        if not any(needle in c for c in conditions):
            continue
        matching = [d for d in snapshot.drugs if d.drug.id == drug_id]
        if matching:
            advisories.append(_patient_advisory(RiskLevel.LOW, description, recommendation, matching))
    return RuleOutcome(advisories=tuple(advisories))


PatientRule = Callable[[RiskSnapshot], RuleOutcome]

PATIENT_RULES: tuple[PatientRule, ...] = (
    age_rule,
    renal_rule,
    hepatic_rule,
    blood_pressure_rule,
    condition_rule,
)


class PatientRiskModifier:
    """Evaluates patient rules and food/alcohol side tables."""

    def __init__(
        self,
        auxiliary: AuxiliaryKnowledgeBase,
        rules: Sequence[PatientRule] = PATIENT_RULES
    ):
        self.auxiliary = auxiliary
        self.rules = tuple(rules)

    def evaluate(
        self,
        patient: Optional[PatientData],
        drugs: Sequence[ResolvedDrug],
        base_level: RiskLevel
    ) -> list[RuleOutcome]:
        """Run every patient rule against one snapshot."""
        if patient is None:
            return []
        snapshot = RiskSnapshot(patient=patient, drugs=tuple(drugs), base_level=base_level)
        return [rule(snapshot) for rule in self.rules]

    def food_advisories(
        self,
        drugs: Sequence[ResolvedDrug],
        food_items: Sequence[str]
    ) -> list[RiskAdvisory]:
        """One moderate advisory per drug whose known food interactions were reported."""
        consumed = {f.strip().lower() for f in food_items if f.strip()}
        if not consumed:
            return []

        advisories = []
        for d in drugs:
            matching = [f for f in self.auxiliary.food_interactions(d.drug.id) if f.lower() in consumed]
            if matching:
                advisories.append(RiskAdvisory(
                    category=AdvisoryCategory.FOOD,
                    risk_level=RiskLevel.MODERATE,
                    description=f"{d.display_name} may interact with: {', '.join(matching)}",
                    recommendation="Consider taking this medication at least 2 hours before or after consuming these foods.",
                    drugs=[d.display_name],
                ))
        return advisories

    def alcohol_advisories(
        self,
        drugs: Sequence[ResolvedDrug],
        alcohol: Optional[AlcoholData]
    ) -> list[RiskAdvisory]:
        """A single high advisory when alcohol is consumed with alcohol-sensitive drugs."""
        if alcohol is None or not alcohol.has_interaction:
            return []

        sensitive = [d for d in drugs if self.auxiliary.has_alcohol_interaction(d.drug.id)]
        if not sensitive:
            return []

        names = _names(sensitive)
        return [RiskAdvisory(
            category=AdvisoryCategory.ALCOHOL,
            risk_level=RiskLevel.HIGH,
            description=f"Alcohol may interact with: {', '.join(names)}",
            recommendation="Avoid alcohol consumption when taking these medications.",
            drugs=names,
        )]
