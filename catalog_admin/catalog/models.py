"""
Record shape shared by the codec, validator, store and API.

Records themselves are plain JSON dictionaries so that fields written by other
tools survive an edit untouched. `RecordForm` is the flat text form an operator
fills in; every field is a string.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel

Record = Dict[str, Any]

# Single-line text fields
SCALAR_FIELDS = ("id", "name", "category", "brand", "model", "thumbnail", "description")

# Comma separated in the form
LIST_FIELDS = ("tags",)

# One item per line in the form
LINE_FIELDS = ("media", "features")

SPEC_FIELD = "spec"

EDITABLE_FIELDS = SCALAR_FIELDS + LIST_FIELDS + LINE_FIELDS + (SPEC_FIELD,)

REQUIRED_FIELDS = {
    "id": "Id",
    "name": "Name",
    "category": "Category",
}


class RecordForm(BaseModel):
    """Text form for adding or editing a product."""

    id: str = ""
    name: str = ""
    category: str = ""
    brand: str = ""
    model: str = ""
    thumbnail: str = ""
    description: str = ""
    tags: str = ""
    media: str = ""
    features: str = ""
    spec: str = "{}"
