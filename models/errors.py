"""Exception classes for the workbook importer.

Exception Hierarchy:
    ImporterError (base)
    ├── MissingFileError
    ├── WorkbookParseError
    ├── DateParseError
    └── ExternalCommandFailure

Only the first three abort a run. ExternalCommandFailure exists so a caller
that wants strict behaviour can turn a failed CommandResult into an exception;
the dispatcher itself never raises it.
"""


class ImporterError(Exception):
    """Base class for all importer errors."""


class MissingFileError(ImporterError):
    """The workbook path is absent or not a regular file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"no XLSX file given or file not found: {path}")


class WorkbookParseError(ImporterError):
    """The spreadsheet decoder could not open or parse the workbook."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"could not parse workbook {path}: {reason}")


class DateParseError(ImporterError):
    """A Date/DateTime attribute value could not be interpreted as a date."""

    def __init__(self, value, attribute=None):
        self.value = value
        self.attribute = attribute
        where = f" for attribute '{attribute}'" if attribute else ""
        super().__init__(f"could not parse date{where}: {value!r}")


class ExternalCommandFailure(ImporterError):
    """A console invocation exited non-zero or could not be started."""

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"{result.subcommand} failed with exit code {result.returncode}"
        )
