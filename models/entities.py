"""
Value types shared by the loaders and the command services.

Entities themselves stay plain dicts (header text -> raw cell value) and an
entity collection is a plain dict of kind name -> list of entities; the types
here describe the pieces around them.
"""

from collections import namedtuple
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


class EntityKind(str, Enum):
    """The four object types the console can create, in processing order."""

    AGENT = 'agent'
    CUSTOMER = 'customer'
    CUSTOMER_USER = 'customer_user'
    CI = 'ci'

    @classmethod
    def ordered(cls) -> List['EntityKind']:
        """All kinds in fixed processing order."""
        return list(cls)


# One worksheet as delivered by a reader: name plus rows of raw cell values,
# None marking an absent cell.
SheetGrid = namedtuple('SheetGrid', ['name', 'rows'])

# Result of parsing a worksheet name, subclass is None when not present.
SheetClassification = namedtuple('SheetClassification', ['kind', 'subclass'])


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one console invocation."""

    subcommand: str
    args: List[str]
    returncode: Optional[int]
    output: str = ''

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class ImportOptions:
    """
    Run-time choices for one import.

    Attributes:
        xls: Path to the workbook
        requested: Kinds explicitly requested by the user; empty means all
        dry_run: Print commands without executing them
        engine: Workbook decoder, 'openpyxl' or 'pandas'; None picks the
            configured default
    """

    xls: str
    requested: FrozenSet[EntityKind] = field(default_factory=frozenset)
    dry_run: bool = False
    engine: Optional[str] = None

    @classmethod
    def from_flags(cls, xls, dry_run=False, engine=None, **flags):
        """
        Build options from one boolean flag per entity kind.

        Unknown flag names are ignored.

        Examples:
            >>> ImportOptions.from_flags('a.xlsx', ci=True, agent=False).requested
            frozenset({<EntityKind.CI: 'ci'>})
        """
        known = {kind.value for kind in EntityKind}
        requested = frozenset(
            EntityKind(name) for name, wanted in flags.items()
            if wanted and name in known
        )
        return cls(xls=xls, requested=requested, dry_run=dry_run, engine=engine)


@dataclass
class ImportSummary:
    """
    What one import emitted.

    Attributes:
        emitted: kind name -> number of commands printed (and run unless dry-run)
        failures: CommandResults of executed commands that did not succeed
    """

    emitted: Dict[str, int] = field(default_factory=dict)
    failures: List[CommandResult] = field(default_factory=list)
