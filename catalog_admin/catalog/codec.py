"""
Field codec: structured record fields <-> flat form text.

- tags are comma separated
- media / features hold one item per line
- spec is indented JSON
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping

from .errors import InvalidSpecFormatError
from .models import LINE_FIELDS, LIST_FIELDS, SCALAR_FIELDS, SPEC_FIELD, Record


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def _split(text: Any, sep: str) -> List[str]:
    return [item.strip() for item in _as_str(text).split(sep) if item.strip()]


def encode_list(values: Any) -> str:
    if isinstance(values, (list, tuple)):
        return ", ".join(_as_str(v) for v in values)
    return _as_str(values)


def decode_list(text: Any) -> List[str]:
    return _split(text, ",")


def encode_lines(values: Any) -> str:
    if isinstance(values, (list, tuple)):
        return "\n".join(_as_str(v) for v in values)
    return _as_str(values)


def decode_lines(text: Any) -> List[str]:
    return _split(text, "\n")


def encode_spec(spec: Any) -> str:
    if spec is None:
        return "{}"
    return json.dumps(spec, indent=2, ensure_ascii=False)


def decode_spec(text: Any) -> Dict[str, Any]:
    """Parse spec text into a mapping. Blank text is an empty spec."""
    raw = _strip(text)
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidSpecFormatError(f"Spec must be valid JSON: {e.msg}", text=raw) from e
    if not isinstance(value, dict):
        raise InvalidSpecFormatError("Spec must be a JSON object", text=raw)
    return value


def blank_form() -> Dict[str, str]:
    form = {f: "" for f in SCALAR_FIELDS + LIST_FIELDS + LINE_FIELDS}
    form[SPEC_FIELD] = "{}"
    return form


def encode_form(record: Mapping[str, Any]) -> Dict[str, str]:
    """Render an existing record as form text (edit prefill)."""
    form = {f: _as_str(record.get(f)) for f in SCALAR_FIELDS}
    for f in LIST_FIELDS:
        form[f] = encode_list(record.get(f))
    for f in LINE_FIELDS:
        form[f] = encode_lines(record.get(f))
    form[SPEC_FIELD] = encode_spec(record.get(SPEC_FIELD))
    return form


def decode_form(form: Mapping[str, Any]) -> Record:
    """Turn submitted form text into a candidate record.

    Raises:
        InvalidSpecFormatError: if the spec text does not parse to an object.
    """
    record: Record = {f: _strip(form.get(f)) for f in SCALAR_FIELDS}
    for f in LIST_FIELDS:
        record[f] = decode_list(form.get(f))
    for f in LINE_FIELDS:
        record[f] = decode_lines(form.get(f))
    record[SPEC_FIELD] = decode_spec(form.get(SPEC_FIELD, "{}"))
    return record
