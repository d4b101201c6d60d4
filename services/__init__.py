from .command_service import CommandService, ConsoleExecutor, build_arguments
from .import_service import run_import
from .selection import select_entity_kinds

__all__ = [
    'CommandService', 'ConsoleExecutor', 'build_arguments', 'run_import',
    'select_entity_kinds',
]
