"""Catalog error taxonomy.

Every error raised by the catalog core derives from `CatalogError` so the API
layer can translate it into an HTTP response in one place.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """Base class for catalog editing and persistence failures."""

    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class MissingRequiredFieldError(CatalogError):
    """A required field is blank after trimming.

    Attributes:
        field: the first missing field.
        field_errors: mapping of every missing field -> human-readable message.
    """

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        self.field = next(iter(self.field_errors), "")
        super().__init__(
            self.field_errors.get(self.field, "Required field missing"),
            payload={"field_errors": self.field_errors},
        )


class InvalidSpecFormatError(CatalogError):
    """Spec text is not a valid JSON object."""

    def __init__(self, message: str = "Spec must be valid JSON", *, text: str = "") -> None:
        super().__init__(message, payload={"field_errors": {"spec": message}})
        self.text = text


class DuplicateIdError(CatalogError):
    def __init__(self, record_id: str) -> None:
        super().__init__(f"Product with same ID already exists: {record_id}", payload={"id": record_id})
        self.record_id = record_id


class ImmutableIdError(CatalogError):
    def __init__(self, record_id: str, new_id: str) -> None:
        super().__init__(
            f"Product ID cannot be changed ({record_id} -> {new_id})",
            payload={"id": record_id, "new_id": new_id},
        )
        self.record_id = record_id
        self.new_id = new_id


class RecordNotFoundError(CatalogError):
    def __init__(self, record_id: str) -> None:
        super().__init__(f"Product not found: {record_id}", payload={"id": record_id})
        self.record_id = record_id


class SourceUnavailableError(CatalogError):
    """Every configured load source failed.

    Attributes:
        attempts: list of (source name, reason) pairs in the order tried.
    """

    def __init__(self, attempts: List[tuple]) -> None:
        self.attempts = list(attempts)
        detail = "; ".join(f"{name}: {reason}" for name, reason in self.attempts) or "no sources configured"
        super().__init__(
            f"Could not load products ({detail})",
            payload={"attempts": [{"source": name, "reason": reason} for name, reason in self.attempts]},
        )


class OperationInProgressError(CatalogError):
    def __init__(self, status: str) -> None:
        super().__init__(f"Another catalog operation is in progress ({status})", payload={"status": status})
        self.status = status


class ExportFailedError(CatalogError):
    """The sink was unavailable and the local export failed too; nothing was persisted."""

    def __init__(self, sink_error: str, export_error: str) -> None:
        super().__init__(
            f"Products were not saved: server write failed ({sink_error}) and local export failed ({export_error})",
            payload={"sink_error": sink_error, "export_error": export_error},
        )
        self.sink_error = sink_error
        self.export_error = export_error
