"""
Drug Catalog Service

Read-only catalog of known substances with id lookup and name search
for autocomplete.
"""

from functools import lru_cache
from typing import Any, Iterable, Optional

from app.data import DRUG_CATALOG
from app.schemas.interaction import Drug


def normalize_id(drug_id: Optional[str]) -> str:
    """Canonical form of a drug identifier. Applied once at the catalog boundary."""
    return (drug_id or "").strip().lower()


class DrugCatalog:
    """
    Immutable drug catalog.

    Identifiers are normalized on load and on every lookup, so callers
    never need to care about casing.
    """

    def __init__(self, drugs: Iterable[dict[str, Any] | Drug]):
        ordered: list[Drug] = []
        by_id: dict[str, Drug] = {}

        for raw in drugs:
            drug = raw if isinstance(raw, Drug) else Drug(**raw)
            drug = drug.model_copy(update={"id": normalize_id(drug.id)})
            if drug.id in by_id:
                raise ValueError(f"Duplicate drug id in catalog: {drug.id}")
            by_id[drug.id] = drug
            ordered.append(drug)

        self._drugs = tuple(ordered)
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._drugs)

    def __contains__(self, drug_id: object) -> bool:
        return isinstance(drug_id, str) and normalize_id(drug_id) in self._by_id

    def list_all(self) -> list[Drug]:
        """Full catalog in definition order."""
        return list(self._drugs)

    def get_by_id(self, drug_id: Optional[str]) -> Optional[Drug]:
        """Find a drug by id, case-insensitively. Returns None when unknown."""
        return self._by_id.get(normalize_id(drug_id))

    def suggest(self, query: str) -> list[Drug]:
        """
        Case-insensitive substring search over name, generic name and brand name.

        Any query length is accepted; the minimum-length rule for autocomplete
        belongs to the caller.
        """
        needle = (query or "").strip().lower()

        matches = []
        for drug in self._drugs:
            haystack = [drug.name, drug.generic_name or "", drug.brand_name or ""]
            if any(needle in field.lower() for field in haystack):
                matches.append(drug)
        return matches


@lru_cache()
def get_drug_catalog() -> DrugCatalog:
    """Process-wide catalog built from the static data set."""
    return DrugCatalog(DRUG_CATALOG)
