"""Services for the DrugSafe Interaction Engine."""

from app.services.analysis_service import AnalysisService
from app.services.drug_catalog import DrugCatalog, get_drug_catalog
from app.services.interaction_analyzer import InteractionAnalyzer, get_interaction_analyzer
from app.services.knowledge_base import (
    AuxiliaryKnowledgeBase,
    InteractionKnowledgeBase,
    get_auxiliary_knowledge_base,
    get_knowledge_base,
)
from app.services.pair_resolver import PairwiseResolver, sort_by_risk
from app.services.patient_modifier import PatientRiskModifier
from app.services.risk_aggregator import RiskAggregator

__all__ = [
    "AnalysisService",
    "AuxiliaryKnowledgeBase",
    "DrugCatalog",
    "InteractionAnalyzer",
    "InteractionKnowledgeBase",
    "PairwiseResolver",
    "PatientRiskModifier",
    "RiskAggregator",
    "get_auxiliary_knowledge_base",
    "get_drug_catalog",
    "get_interaction_analyzer",
    "get_knowledge_base",
    "sort_by_risk",
]
