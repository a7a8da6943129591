"""
Pairwise Resolver

Turns a list of drug entries into one interaction record per unordered pair.
"""

from typing import NamedTuple, Sequence

from app.core.exceptions import InsufficientInputError, UnresolvedDrugError
from app.schemas.interaction import (
    CompatibilityStatus,
    Drug,
    DrugEntry,
    Evidence,
    InteractionRecord,
    InteractionResult,
    LiteratureCitation,
    RiskLevel,
    TimeToOnset,
)
from app.services.drug_catalog import DrugCatalog
from app.services.knowledge_base import InteractionKnowledgeBase


class ResolvedDrug(NamedTuple):
    """A drug entry matched to its catalog record."""
    drug: Drug
    display_name: str


NO_INTERACTION_RECORD = InteractionRecord(
    risk_level=RiskLevel.NONE,
    compatibility_status=CompatibilityStatus.COMPATIBLE,
    time_to_onset=TimeToOnset.IMMEDIATE,
    confidence_score=3,
    mechanism="No documented interaction between these drugs was found in the reference database.",
    effects=["No clinically significant interaction expected"],
    evidence=Evidence(
        literature_citations=[
            LiteratureCitation(
                title="No interaction documented in reference database",
                authors="N/A",
                journal="N/A",
                year=2024,
            )
        ]
    ),
)


class PairwiseResolver:
    """
    Enumerates every unordered drug pair and resolves it against the
    knowledge base.

    Entries without a catalog match are dropped by default; with
    ``strict=True`` they raise UnresolvedDrugError instead.
    """

    def __init__(
        self,
        catalog: DrugCatalog,
        knowledge_base: InteractionKnowledgeBase,
        strict: bool = False
    ):
        self.catalog = catalog
        self.knowledge_base = knowledge_base
        self.strict = strict

    def resolve_drugs(self, entries: Sequence[DrugEntry]) -> list[ResolvedDrug]:
        """Match entries to catalog drugs, preserving input order."""
        resolved = []
        for entry in entries:
            drug = self.catalog.get_by_id(entry.drug_id) if entry.drug_id.strip() else None
            if drug is None:
                if self.strict:
                    raise UnresolvedDrugError(entry.drug_name or "<unnamed>", entry.drug_id.strip())
                continue
            display_name = entry.drug_name.strip() or drug.name
            resolved.append(ResolvedDrug(drug=drug, display_name=display_name))
        return resolved

    def resolve_pairs(self, drugs: Sequence[ResolvedDrug]) -> list[InteractionResult]:
        """
        Emit one record per pair (i, j), i < j, in enumeration order.

        Raises:
            InsufficientInputError: If fewer than two drugs are given.
        """
        if len(drugs) < 2:
            raise InsufficientInputError(len(drugs))

        results = []
        for i, first in enumerate(drugs):
            for second in drugs[i + 1:]:
                record = self.knowledge_base.lookup(first.drug.id, second.drug.id)
                if record is None:
                    record = NO_INTERACTION_RECORD
                results.append(InteractionResult(
                    drug_pair=(first.display_name, second.display_name),
                    **record.model_dump()
                ))
        return results

    def resolve(self, entries: Sequence[DrugEntry]) -> tuple[list[ResolvedDrug], list[InteractionResult]]:
        """Resolve entries and their pairs in one step."""
        drugs = self.resolve_drugs(entries)
        return drugs, self.resolve_pairs(drugs)


def sort_by_risk(results: Sequence[InteractionResult]) -> list[InteractionResult]:
    """Most severe first; ties keep their original order."""
    return sorted(results, key=lambda r: r.risk_level.rank, reverse=True)
