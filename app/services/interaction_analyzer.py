"""
Drug Interaction Analyzer

Entry point of the analysis core: resolves every drug pair, applies patient,
food and alcohol rules, and folds everything into one SafetyAssessmentResult.

The analyzer is synchronous and holds only read-only collaborators, so a
single instance can serve concurrent requests.
"""

from functools import lru_cache
from typing import Optional, Sequence

from app.config import get_settings
from app.schemas.interaction import (
    AlcoholData,
    DrugEntry,
    PatientData,
    SafetyAssessmentResult,
)
from app.services.drug_catalog import DrugCatalog, get_drug_catalog
from app.services.knowledge_base import (
    AuxiliaryKnowledgeBase,
    InteractionKnowledgeBase,
    get_auxiliary_knowledge_base,
    get_knowledge_base,
)
from app.services.pair_resolver import PairwiseResolver
from app.services.patient_modifier import PatientRiskModifier
from app.services.risk_aggregator import RiskAggregator, max_risk


class InteractionAnalyzer:
    """Orchestrates resolver, patient modifier and aggregator."""

    def __init__(
        self,
        catalog: DrugCatalog,
        knowledge_base: InteractionKnowledgeBase,
        auxiliary: AuxiliaryKnowledgeBase,
        database_version: str,
        last_updated: str,
        strict: bool = False
    ):
        self.catalog = catalog
        self.knowledge_base = knowledge_base
        self.resolver = PairwiseResolver(catalog, knowledge_base, strict=strict)
        self.modifier = PatientRiskModifier(auxiliary)
        self.aggregator = RiskAggregator()
        self.database_version = database_version
        self.last_updated = last_updated

    def analyze(
        self,
        drugs: Sequence[DrugEntry],
        patient_data: Optional[PatientData] = None,
        food_items: Optional[Sequence[str]] = None,
        alcohol: Optional[AlcoholData] = None
    ) -> SafetyAssessmentResult:
        """
        Analyze a medication list.

        Args:
            drugs: Entries as submitted; only catalog-resolved entries are paired.
            patient_data: Optional patient attributes for rule evaluation.
            food_items: Foods the patient reports consuming.
            alcohol: Alcohol consumption details.

        Returns:
            A complete assessment with one record per drug pair.

        Raises:
            InsufficientInputError: Fewer than two drugs resolved.
            UnresolvedDrugError: Strict mode and an entry did not resolve.
        """
        resolved, interaction_results = self.resolver.resolve(drugs)

        base_level = max_risk(r.risk_level for r in interaction_results)
        outcomes = self.modifier.evaluate(patient_data, resolved, base_level)

        advisories = [a for outcome in outcomes for a in outcome.advisories]
        advisories.extend(self.modifier.food_advisories(resolved, food_items or []))
        advisories.extend(self.modifier.alcohol_advisories(resolved, alcohol))

        overall_risk, overall_compatibility = self.aggregator.aggregate(
            interaction_results,
            advisories,
            [outcome.escalation for outcome in outcomes],
        )

        return SafetyAssessmentResult(
            interaction_results=interaction_results,
            advisories=advisories,
            overall_risk_level=overall_risk,
            overall_compatibility_status=overall_compatibility,
            database_version=self.database_version,
            last_updated=self.last_updated,
        )


@lru_cache()
def get_interaction_analyzer() -> InteractionAnalyzer:
    """Process-wide analyzer wired to the static catalog and knowledge bases."""
    settings = get_settings()
    return InteractionAnalyzer(
        catalog=get_drug_catalog(),
        knowledge_base=get_knowledge_base(),
        auxiliary=get_auxiliary_knowledge_base(),
        database_version=settings.KNOWLEDGE_BASE_VERSION,
        last_updated=settings.KNOWLEDGE_BASE_UPDATED,
        strict=settings.STRICT_DRUG_RESOLUTION,
    )
