"""
Worksheet name parsing.

A workbook names its sheets after the entity kind they hold. Configuration
item sheets may add a subclass after a hyphen:

    agent            -> ('agent', None)
    ci - Hardware    -> ('ci', 'Hardware')
    ci-Computer      -> ('ci', 'Computer')

Functions:
    classify_sheet_name: Split a sheet name into (kind, subclass)
"""

import re

from models.entities import SheetClassification
from .config import SHEET_NAME_PATTERN

_SHEET_NAME_RE = re.compile(SHEET_NAME_PATTERN)


def classify_sheet_name(name):
    """
    Split a worksheet name into entity kind and optional subclass.

    Only the first hyphen splits; whatever follows it (stripped) is the
    subclass. The kind is not checked against the known entity kinds.

    Args:
        name: Worksheet name as stored in the workbook

    Returns:
        SheetClassification(kind, subclass), subclass None when absent

    Examples:
        >>> classify_sheet_name('ci - Hardware')
        SheetClassification(kind='ci', subclass='Hardware')

        >>> classify_sheet_name('customer_user')
        SheetClassification(kind='customer_user', subclass=None)

        >>> classify_sheet_name('ci - Hard-ware')
        SheetClassification(kind='ci', subclass='Hard-ware')
    """
    match = _SHEET_NAME_RE.match(name)
    if not match:
        return SheetClassification(name, None)

    kind, subclass = match.groups()
    return SheetClassification(kind, subclass or None)
