"""
Error taxonomy for FlightDesk.

Whole-query failures abort only the current request. Per-row and per-worker
failures are contained where they happen and never abort a batch.
"""


class FlightDeskError(Exception):
    """Base class for application errors."""


class DatabaseError(FlightDeskError):
    """A query or connection failure. Surfaced to clients as a generic 500."""


class ValidationError(FlightDeskError):
    """A required request parameter is missing. Surfaced as a 400."""

    status_code = 400


class RowScanError(FlightDeskError):
    """A single result row could not be mapped to a record."""


class TemplateLoadError(FlightDeskError):
    """A required template is missing or does not compile."""
