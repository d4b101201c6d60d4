"""
Import orchestration: workbook in, console commands out.

    load entities → select kinds → dump mapped data → dispatch per kind

Functions:
    run_import: Run one complete import for the given options
"""

import json

from loaders import load_entities
from models.entities import ImportSummary
from .command_service import CommandService
from .selection import select_entity_kinds


def dump_entities(data):
    """Print the mapped entity data once, before any command runs."""
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def run_import(options, executor=None):
    """
    Import a workbook into the console.

    Kinds that are selected but have no sheet in the workbook are skipped
    silently. A DateParseError on any ci row aborts the remaining import;
    failing console commands do not.

    Args:
        options: ImportOptions
        executor: Command executor (default: ConsoleExecutor)

    Returns:
        ImportSummary: commands emitted per kind, plus the failed results
        of executed commands

    Raises:
        MissingFileError: options.xls is not a regular file
        WorkbookParseError: the workbook could not be decoded
        DateParseError: a Date/DateTime attribute could not be parsed

    Examples:
        >>> run_import(ImportOptions('import.xlsx', dry_run=True))
        ImportSummary(emitted={'agent': 1, 'ci': 1}, failures=[])
    """
    data = load_entities(options.xls, options.engine)

    selected = [
        kind for kind in select_entity_kinds(options.requested)
        if data.get(kind.value)
    ]
    dump_entities({kind.value: data[kind.value] for kind in selected})

    service = CommandService(executor=executor, dry_run=options.dry_run)
    summary = ImportSummary()
    for kind in selected:
        emitted = service.dispatch(kind, data[kind.value])
        summary.emitted[kind.value] = len(emitted)
        summary.failures.extend(
            result for _, result in emitted if result is not None and not result.ok
        )

    return summary
