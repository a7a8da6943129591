"""
Tests for risk aggregation.
"""

import itertools

import pytest

from app.schemas.interaction import (
    AdvisoryCategory,
    CompatibilityStatus,
    InteractionResult,
    RiskAdvisory,
    RiskLevel,
    TimeToOnset,
)
from app.services.risk_aggregator import RiskAggregator, max_risk


def _result(level: RiskLevel, status=CompatibilityStatus.COMPATIBLE) -> InteractionResult:
    return InteractionResult(
        drug_pair=("A", "B"),
        risk_level=level,
        compatibility_status=status,
        time_to_onset=TimeToOnset.IMMEDIATE,
        confidence_score=3,
        mechanism="test",
    )


def _advisory(level: RiskLevel) -> RiskAdvisory:
    return RiskAdvisory(
        category=AdvisoryCategory.PATIENT,
        risk_level=level,
        description="test",
        recommendation="test",
    )


@pytest.fixture
def aggregator() -> RiskAggregator:
    return RiskAggregator()


def test_max_risk_total_order():
    assert max_risk([RiskLevel.LOW, RiskLevel.CRITICAL, RiskLevel.HIGH]) == RiskLevel.CRITICAL
    assert max_risk([RiskLevel.MODERATE, RiskLevel.NONE]) == RiskLevel.MODERATE
    assert max_risk([]) == RiskLevel.NONE


def test_overall_risk_includes_advisories_and_escalations(aggregator: RiskAggregator):
    results = [_result(RiskLevel.LOW)]

    assert aggregator.overall_risk(results) == RiskLevel.LOW
    assert aggregator.overall_risk(results, [_advisory(RiskLevel.MODERATE)]) == RiskLevel.MODERATE
    assert aggregator.overall_risk(results, [], [None, RiskLevel.HIGH]) == RiskLevel.HIGH


def test_overall_risk_never_below_pair_maximum(aggregator: RiskAggregator):
    results = [_result(RiskLevel.HIGH), _result(RiskLevel.NONE)]

    assert aggregator.overall_risk(results, [_advisory(RiskLevel.LOW)], [RiskLevel.MODERATE]) == RiskLevel.HIGH


def test_compatibility_from_pairs_only(aggregator: RiskAggregator):
    """Advisories never make a combination incompatible."""
    compatible = [_result(RiskLevel.LOW), _result(RiskLevel.NONE)]
    _, status = aggregator.aggregate(compatible, [_advisory(RiskLevel.HIGH)])

    assert status == CompatibilityStatus.COMPATIBLE

    mixed = compatible + [_result(RiskLevel.MODERATE, CompatibilityStatus.INCOMPATIBLE)]
    assert aggregator.overall_compatibility(mixed) == CompatibilityStatus.INCOMPATIBLE


def test_aggregate_is_order_independent(aggregator: RiskAggregator):
    results = [
        _result(RiskLevel.LOW),
        _result(RiskLevel.HIGH, CompatibilityStatus.INCOMPATIBLE),
        _result(RiskLevel.NONE),
    ]
    advisories = [_advisory(RiskLevel.MODERATE), _advisory(RiskLevel.LOW)]

    outcomes = {
        aggregator.aggregate(list(r), list(a))
        for r in itertools.permutations(results)
        for a in itertools.permutations(advisories)
    }

    assert outcomes == {(RiskLevel.HIGH, CompatibilityStatus.INCOMPATIBLE)}
