"""
Structured errors raised by the interaction analysis core.

The core never formats or logs these; the API layer maps them to responses.
"""


class InteractionAnalysisError(Exception):
    """Base class for analysis failures."""

    error_type = "InteractionAnalysisError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InsufficientInputError(InteractionAnalysisError):
    """Fewer than two resolvable drugs were supplied."""

    error_type = "InsufficientInputError"

    def __init__(self, resolved_count: int) -> None:
        super().__init__(
            f"At least 2 resolved drugs are required for interaction analysis, got {resolved_count}"
        )
        self.resolved_count = resolved_count


class UnresolvedDrugError(InteractionAnalysisError):
    """A drug entry has no catalog id, or one the catalog does not know."""

    error_type = "UnresolvedDrugError"

    def __init__(self, drug_name: str, drug_id: str = "") -> None:
        if drug_id:
            message = f"Drug '{drug_name}' references unknown id '{drug_id}'"
        else:
            message = f"Drug '{drug_name}' has not been resolved to a catalog entry"
        super().__init__(message)
        self.drug_name = drug_name
        self.drug_id = drug_id
