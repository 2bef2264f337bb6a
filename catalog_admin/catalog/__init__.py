"""
In-memory catalog state: store, field codec, validation, filtering,
persistence and the editing session that ties them together.
"""

from .commands import AddCommand, CommandResult, DeleteCommand, EditCommand, FilterCommand
from .errors import (
    CatalogError,
    DuplicateIdError,
    ExportFailedError,
    ImmutableIdError,
    InvalidSpecFormatError,
    MissingRequiredFieldError,
    OperationInProgressError,
    RecordNotFoundError,
    SourceUnavailableError,
)
from .filters import CatalogFilter, filter_records, list_categories
from .persistence import (
    LoadResult,
    OperationStatus,
    PersistenceCoordinator,
    SaveOutcome,
    SaveResult,
    serialize_catalog,
)
from .session import CatalogSession
from .store import CatalogStore
from .validation import validate_record

__all__ = [
    # commands
    "AddCommand", "CommandResult", "DeleteCommand", "EditCommand", "FilterCommand",
    # errors
    "CatalogError", "DuplicateIdError", "ExportFailedError", "ImmutableIdError", "InvalidSpecFormatError",
    "MissingRequiredFieldError", "OperationInProgressError", "RecordNotFoundError",
    "SourceUnavailableError",
    # filtering
    "CatalogFilter", "filter_records", "list_categories",
    # persistence
    "LoadResult", "OperationStatus", "PersistenceCoordinator", "SaveOutcome", "SaveResult",
    "serialize_catalog",
    # state
    "CatalogSession", "CatalogStore", "validate_record",
]
