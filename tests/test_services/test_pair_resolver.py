"""
Tests for pairwise resolution.
"""

import pytest

from app.core.exceptions import InsufficientInputError, UnresolvedDrugError
from app.schemas.interaction import CompatibilityStatus, RiskLevel, TimeToOnset
from app.services.pair_resolver import PairwiseResolver, sort_by_risk


@pytest.fixture
def resolver(catalog, knowledge_base) -> PairwiseResolver:
    return PairwiseResolver(catalog, knowledge_base)


def test_enumeration_order(resolver: PairwiseResolver, make_entry):
    """Pairs follow (i, j), i < j, over the input order."""
    _, results = resolver.resolve([
        make_entry("warfarin"),
        make_entry("amiodarone"),
        make_entry("simvastatin"),
    ])

    assert [r.drug_pair for r in results] == [
        ("Warfarin", "Amiodarone"),
        ("Warfarin", "Simvastatin"),
        ("Amiodarone", "Simvastatin"),
    ]


@pytest.mark.parametrize("n", [2, 3, 5, 8, 15])
def test_pair_count(resolver: PairwiseResolver, catalog, make_entry, n):
    """n resolved drugs always yield n(n-1)/2 records."""
    entries = [make_entry(d.id) for d in catalog.list_all()[:n]]

    _, results = resolver.resolve(entries)

    assert len(results) == n * (n - 1) // 2


def test_found_record_is_copied_verbatim(resolver: PairwiseResolver, knowledge_base, make_entry):
    _, results = resolver.resolve([make_entry("aspirin"), make_entry("warfarin")])
    stored = knowledge_base.lookup("warfarin", "aspirin")

    assert results[0].model_dump(exclude={"drug_pair"}) == stored.model_dump()
    assert results[0].drug_pair == ("Aspirin", "Warfarin")


def test_missing_pair_gets_synthetic_record(resolver: PairwiseResolver, make_entry):
    _, results = resolver.resolve([make_entry("warfarin"), make_entry("lisinopril")])
    record = results[0]

    assert record.risk_level == RiskLevel.NONE
    assert record.compatibility_status == CompatibilityStatus.COMPATIBLE
    assert record.confidence_score == 3
    assert record.time_to_onset == TimeToOnset.IMMEDIATE
    assert record.mechanism
    assert record.effects
    assert record.evidence.literature_citations


def test_display_names_come_from_input(resolver: PairwiseResolver, make_entry):
    """The entry's name is shown; blank names fall back to the catalog name."""
    _, results = resolver.resolve([
        make_entry("warfarin", name="Coumadin"),
        make_entry("ASPIRIN", name="  "),
    ])

    assert results[0].drug_pair == ("Coumadin", "Aspirin")


def test_unresolved_entries_are_filtered(resolver: PairwiseResolver, make_entry):
    drugs, results = resolver.resolve([
        make_entry("warfarin"),
        make_entry("", name="Something typed"),
        make_entry("not-in-catalog"),
        make_entry("aspirin"),
    ])

    assert [d.drug.id for d in drugs] == ["warfarin", "aspirin"]
    assert len(results) == 1


def test_strict_mode_rejects_unresolved(catalog, knowledge_base, make_entry):
    resolver = PairwiseResolver(catalog, knowledge_base, strict=True)

    with pytest.raises(UnresolvedDrugError) as exc_info:
        resolver.resolve([make_entry("warfarin"), make_entry("", name="Mystery")])

    assert exc_info.value.drug_name == "Mystery"


def test_single_drug_is_insufficient(resolver: PairwiseResolver, make_entry):
    with pytest.raises(InsufficientInputError) as exc_info:
        resolver.resolve([make_entry("warfarin")])

    assert exc_info.value.resolved_count == 1


def test_unresolved_do_not_count_towards_minimum(resolver: PairwiseResolver, make_entry):
    with pytest.raises(InsufficientInputError):
        resolver.resolve([make_entry("warfarin"), make_entry("")])


def test_duplicate_drug_pairs_with_itself(resolver: PairwiseResolver, make_entry):
    _, results = resolver.resolve([make_entry("warfarin"), make_entry("warfarin")])

    assert len(results) == 1
    assert results[0].risk_level == RiskLevel.NONE


def test_sort_by_risk(resolver: PairwiseResolver, make_entry):
    _, results = resolver.resolve([
        make_entry("warfarin"),
        make_entry("simvastatin"),
        make_entry("lisinopril"),
        make_entry("aspirin"),
    ])

    ordered = sort_by_risk(results)

    assert [r.risk_level.rank for r in ordered] == sorted(
        (r.risk_level.rank for r in results), reverse=True
    )
    assert ordered[0].drug_pair == ("Warfarin", "Aspirin")
    # input list untouched
    assert results[0].drug_pair == ("Warfarin", "Simvastatin")
