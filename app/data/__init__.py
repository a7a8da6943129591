"""Static reference data loaded once at process start."""

from app.data.auxiliary_data import ALCOHOL_INTERACTIONS, FOOD_INTERACTIONS
from app.data.catalog_data import DRUG_CATALOG
from app.data.interaction_data import INTERACTION_DATA

__all__ = [
    "ALCOHOL_INTERACTIONS",
    "DRUG_CATALOG",
    "FOOD_INTERACTIONS",
    "INTERACTION_DATA",
]
