"""
Tests for the interaction and auxiliary knowledge bases.
"""

import pytest

from app.schemas.interaction import CompatibilityStatus, RiskLevel
from app.services.knowledge_base import (
    AuxiliaryKnowledgeBase,
    InteractionKnowledgeBase,
    get_auxiliary_knowledge_base,
)

_RECORD = {
    "risk_level": "moderate",
    "compatibility_status": "compatible",
    "time_to_onset": "short-term",
    "confidence_score": 3,
    "mechanism": "test mechanism",
}


def test_lookup_is_symmetric(knowledge_base: InteractionKnowledgeBase):
    """Every stored pair resolves to the same record in both orders."""
    for (first, second), record in knowledge_base.pairs():
        assert knowledge_base.lookup(first, second) is record
        assert knowledge_base.lookup(second, first) is record


def test_lookup_warfarin_aspirin(knowledge_base: InteractionKnowledgeBase):
    record = knowledge_base.lookup("aspirin", "warfarin")

    assert record.risk_level == RiskLevel.HIGH
    assert record.compatibility_status == CompatibilityStatus.INCOMPATIBLE
    assert record.evidence.literature_citations


def test_lookup_miss_returns_none(knowledge_base: InteractionKnowledgeBase):
    """A miss is the normal 'no documented interaction' case."""
    assert knowledge_base.lookup("warfarin", "lisinopril") is None
    assert knowledge_base.lookup("warfarin", "warfarin") is None
    assert knowledge_base.lookup("warfarin", "unknown") is None


def test_lookup_ignores_case(knowledge_base: InteractionKnowledgeBase):
    assert knowledge_base.lookup("Amiodarone", "SIMVASTATIN") is not None


def test_each_pair_stored_once(knowledge_base: InteractionKnowledgeBase):
    pairs = [frozenset(pair) for pair, _ in knowledge_base.pairs()]

    assert len(pairs) == len(set(pairs)) == len(knowledge_base)


def test_rejects_pair_stored_in_both_directions():
    with pytest.raises(ValueError):
        InteractionKnowledgeBase({
            "a": {"b": _RECORD},
            "b": {"a": _RECORD},
        })


def test_sample_data_tops_out_at_high(knowledge_base: InteractionKnowledgeBase):
    levels = {record.risk_level for _, record in knowledge_base.pairs()}

    assert RiskLevel.HIGH in levels
    assert RiskLevel.CRITICAL not in levels


def test_food_interactions():
    auxiliary = get_auxiliary_knowledge_base()

    assert auxiliary.food_interactions("warfarin") == ["Grapefruit", "Leafy greens"]
    assert auxiliary.food_interactions("Simvastatin") == ["Grapefruit"]
    assert auxiliary.food_interactions("metoprolol") == []


def test_alcohol_interactions():
    auxiliary = AuxiliaryKnowledgeBase({}, ["Aspirin"])

    assert auxiliary.has_alcohol_interaction("aspirin")
    assert not auxiliary.has_alcohol_interaction("warfarin")
