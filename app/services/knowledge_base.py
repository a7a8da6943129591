"""
Interaction Knowledge Base

Sparse, directional table of drug-pair interaction records plus the food
and alcohol side tables. Queries are symmetric; a miss means "no documented
interaction" and is never an error.
"""

from functools import lru_cache
from typing import Any, Iterable, Mapping, Optional

from app.data import ALCOHOL_INTERACTIONS, FOOD_INTERACTIONS, INTERACTION_DATA
from app.schemas.interaction import InteractionRecord
from app.services.drug_catalog import normalize_id


class InteractionKnowledgeBase:
    """Read-only interaction store keyed by (first_id, second_id)."""

    def __init__(self, interactions: Mapping[str, Mapping[str, Mapping[str, Any] | InteractionRecord]]):
        table: dict[str, dict[str, InteractionRecord]] = {}

        for first_id, partners in interactions.items():
            first = normalize_id(first_id)
            for second_id, raw in partners.items():
                second = normalize_id(second_id)
                if self._find(table, first, second) is not None:
                    raise ValueError(f"Interaction stored twice: {first} / {second}")
                record = raw if isinstance(raw, InteractionRecord) else InteractionRecord(**raw)
                table.setdefault(first, {})[second] = record

        self._table = table

    def __len__(self) -> int:
        return sum(len(partners) for partners in self._table.values())

    @staticmethod
    def _find(
        table: Mapping[str, Mapping[str, InteractionRecord]],
        id_a: str,
        id_b: str
    ) -> Optional[InteractionRecord]:
        # Check both orderings
        record = table.get(id_a, {}).get(id_b)
        if record is None:
            record = table.get(id_b, {}).get(id_a)
        return record

    def lookup(self, id_a: str, id_b: str) -> Optional[InteractionRecord]:
        """Symmetric lookup: tries (a, b) then (b, a)."""
        return self._find(self._table, normalize_id(id_a), normalize_id(id_b))

    def pairs(self) -> list[tuple[tuple[str, str], InteractionRecord]]:
        """Stored pairs in storage order, each once."""
        return [
            ((first, second), record)
            for first, partners in self._table.items()
            for second, record in partners.items()
        ]


class AuxiliaryKnowledgeBase:
    """Food interactions per drug and the set of alcohol-sensitive drugs."""

    def __init__(
        self,
        food_interactions: Mapping[str, Iterable[str]],
        alcohol_interactions: Iterable[str]
    ):
        self._foods = {
            normalize_id(drug_id): tuple(foods)
            for drug_id, foods in food_interactions.items()
        }
        self._alcohol = frozenset(normalize_id(d) for d in alcohol_interactions)

    def food_interactions(self, drug_id: str) -> list[str]:
        return list(self._foods.get(normalize_id(drug_id), ()))

    def has_alcohol_interaction(self, drug_id: str) -> bool:
        return normalize_id(drug_id) in self._alcohol


@lru_cache()
def get_knowledge_base() -> InteractionKnowledgeBase:
    """Process-wide knowledge base built from the static data set."""
    return InteractionKnowledgeBase(INTERACTION_DATA)


@lru_cache()
def get_auxiliary_knowledge_base() -> AuxiliaryKnowledgeBase:
    return AuxiliaryKnowledgeBase(FOOD_INTERACTIONS, ALCOHOL_INTERACTIONS)
