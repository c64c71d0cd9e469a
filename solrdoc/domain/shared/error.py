"""Error hierarchy for solrdoc.

Error layers:
- SolrDocError: Base class for all solrdoc errors
- DomainError: Invalid input handed to the mapper or its value objects
- InfrastructureError: Misconfiguration and failures of the search server

A missing field value is never an error; the mapper omits the field instead.
"""


class SolrDocError(Exception):
    """Base class for all solrdoc errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(SolrDocError):
    """Base class for domain errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(SolrDocError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """Mapping configuration is invalid (unknown type, malformed boost or condition).

    Always fatal: it points at a programming mistake, not at bad data,
    so it is never retried.
    """


class ExternalServiceError(InfrastructureError):
    """The search server rejected a request or could not be reached."""
