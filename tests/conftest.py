"""
Pytest fixtures for DrugSafe Interaction Engine tests.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Set environment variables before imports
os.environ["API_KEY"] = "test-api-key-12345"
os.environ["REDIS_URL"] = "redis://127.0.0.1:6390/0"
os.environ["DEBUG"] = "true"

from app.main import app
from app.core.rate_limit import limiter
from app.schemas.interaction import DrugEntry
from app.services.drug_catalog import get_drug_catalog
from app.services.interaction_analyzer import InteractionAnalyzer
from app.services.knowledge_base import get_auxiliary_knowledge_base, get_knowledge_base

limiter.enabled = False


@pytest.fixture
def test_client():
    """Create synchronous test client."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_key_headers():
    """Headers with valid API key."""
    return {"X-API-Key": "test-api-key-12345"}


@pytest.fixture
def catalog():
    return get_drug_catalog()


@pytest.fixture
def knowledge_base():
    return get_knowledge_base()


@pytest.fixture
def analyzer(catalog, knowledge_base) -> InteractionAnalyzer:
    """Analyzer wired to the static data set, non-strict."""
    return InteractionAnalyzer(
        catalog=catalog,
        knowledge_base=knowledge_base,
        auxiliary=get_auxiliary_knowledge_base(),
        database_version="test-1",
        last_updated="2024-01-01",
    )


@pytest.fixture
def make_entry():
    """Build a DrugEntry from a catalog id."""
    def _make(drug_id: str, name: str | None = None, **kwargs) -> DrugEntry:
        return DrugEntry(
            drug_id=drug_id,
            drug_name=name if name is not None else drug_id.title(),
            dosage=kwargs.get("dosage", "10 mg"),
            route=kwargs.get("route", "oral"),
            frequency=kwargs.get("frequency", "once daily"),
        )
    return _make


@pytest.fixture
def analysis_payload():
    """JSON body for the analyze endpoint."""
    def _payload(*drug_ids: str, **extra) -> dict:
        body = {
            "drugs": [
                {"drugId": d, "drugName": d.title(), "dosage": "10 mg",
                 "route": "oral", "frequency": "once daily"}
                for d in drug_ids
            ]
        }
        body.update(extra)
        return body
    return _payload
