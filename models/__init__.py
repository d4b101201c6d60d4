from .entities import (
    CommandResult,
    EntityKind,
    ImportOptions,
    ImportSummary,
    SheetClassification,
    SheetGrid,
)
from .errors import (
    DateParseError,
    ExternalCommandFailure,
    ImporterError,
    MissingFileError,
    WorkbookParseError,
)

__all__ = [
    'CommandResult', 'EntityKind', 'ImportOptions', 'ImportSummary', 'SheetClassification',
    'SheetGrid', 'DateParseError', 'ExternalCommandFailure', 'ImporterError',
    'MissingFileError', 'WorkbookParseError',
]
