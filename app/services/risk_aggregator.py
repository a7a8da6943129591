"""
Risk Aggregator

Pure reduction of per-pair records, advisories and rule escalations into
one overall risk level and compatibility verdict.
"""

from typing import Iterable, Optional, Sequence

from app.schemas.interaction import (
    CompatibilityStatus,
    InteractionResult,
    RiskAdvisory,
    RiskLevel,
)


def max_risk(levels: Iterable[RiskLevel]) -> RiskLevel:
    """Highest level under none < low < moderate < high < critical."""
    return max(levels, key=lambda level: level.rank, default=RiskLevel.NONE)


class RiskAggregator:
    """
    Computes the overall verdict.

    Advisories and escalations raise the overall risk level but never
    change compatibility, which is decided by per-pair records alone.
    """

    def overall_risk(
        self,
        interaction_results: Sequence[InteractionResult],
        advisories: Sequence[RiskAdvisory] = (),
        escalations: Iterable[Optional[RiskLevel]] = ()
    ) -> RiskLevel:
        levels = [r.risk_level for r in interaction_results]
        levels.extend(a.risk_level for a in advisories)
        levels.extend(e for e in escalations if e is not None)
        return max_risk(levels)

    def overall_compatibility(
        self,
        interaction_results: Sequence[InteractionResult]
    ) -> CompatibilityStatus:
        if any(r.compatibility_status == CompatibilityStatus.INCOMPATIBLE for r in interaction_results):
            return CompatibilityStatus.INCOMPATIBLE
        return CompatibilityStatus.COMPATIBLE

    def aggregate(
        self,
        interaction_results: Sequence[InteractionResult],
        advisories: Sequence[RiskAdvisory] = (),
        escalations: Iterable[Optional[RiskLevel]] = ()
    ) -> tuple[RiskLevel, CompatibilityStatus]:
        return (
            self.overall_risk(interaction_results, advisories, escalations),
            self.overall_compatibility(interaction_results),
        )
