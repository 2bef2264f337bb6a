"""Validation for candidate records before they enter the catalog.

Runs after form decoding and before the merge, on both the add and edit paths.
On failure raise `MissingRequiredFieldError` (with `field_errors`) or
`InvalidSpecFormatError`, so the API can answer HTTP 422.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .errors import InvalidSpecFormatError, MissingRequiredFieldError
from .models import REQUIRED_FIELDS, SPEC_FIELD


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Mapping[str, Any], field: str, errors: Dict[str, str], *, label: Optional[str] = None) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, f"{label or field} is required")
    return value


def validate_record(candidate: Mapping[str, Any]) -> Mapping[str, Any]:
    errors: Dict[str, str] = {}
    for field, label in REQUIRED_FIELDS.items():
        require_str(candidate, field, errors, label=label)
    if errors:
        raise MissingRequiredFieldError(errors)

    if not isinstance(candidate.get(SPEC_FIELD, {}), dict):
        raise InvalidSpecFormatError("Spec must be a JSON object")

    return candidate
