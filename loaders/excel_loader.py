"""
Main workbook loading orchestration for the OTRS importer.

This module coordinates turning a workbook into entity collections:
    1. Read every worksheet into a cell grid
    2. Classify the sheet name into (kind, subclass)
    3. Map the header row and data rows into entity dicts
    4. Accumulate entities per kind, in sheet then row order

Functions:
    map_rows: Turn one sheet's rows into a list of entities
    build_entity_collection: Group the entities of all sheets by kind
    load_entities: Read a workbook file and return its entity collection
"""

from .config import CLASS_KEY
from .sheet_classifier import classify_sheet_name
from .workbook_reader import read_workbook


def read_header(header_row):
    """
    Map column index to header name for one header row.

    Absent header cells are left out, so data under them is skipped.

    Examples:
        >>> read_header(['name', None, 42])
        {0: 'name', 2: '42'}
    """
    return {
        col_idx: str(value)
        for col_idx, value in enumerate(header_row or [])
        if value is not None
    }


def map_rows(rows, subclass=None):
    """
    Convert a sheet's rows into entity dicts.

    Row 0 is the header. Every following row yields exactly one entity, even
    when all its cells are absent. Keys are the literal header text; a
    repeated header overwrites the earlier column's value.

    Args:
        rows: List of rows, each a list of raw cell values (None = absent)
        subclass: Optional subclass injected as 'class' into every entity

    Returns:
        list of dicts, one per data row

    Examples:
        >>> map_rows([['name', 'email'], ['Alice', 'a@x.com']])
        [{'name': 'Alice', 'email': 'a@x.com'}]

        >>> map_rows([['name'], ['Srv1'], [None]], subclass='Server')
        [{'class': 'Server', 'name': 'Srv1'}, {'class': 'Server'}]
    """
    if not rows:
        return []

    header = read_header(rows[0])
    entities = []

    for row in rows[1:]:
        entity = {}
        if subclass:
            entity[CLASS_KEY] = subclass

        for col_idx, value in enumerate(row):
            if value is None:
                continue
            header_name = header.get(col_idx)
            if header_name is None:
                continue
            entity[header_name] = value

        entities.append(entity)

    return entities


def build_entity_collection(sheets):
    """
    Group the entities of all sheets by entity kind.

    Sheets of the same kind (e.g. 'ci - Server' and 'ci - Computer')
    accumulate into one list, in sheet encounter order then row order.
    Unknown kinds are kept as-is; nothing downstream reads them.

    Args:
        sheets: Iterable of SheetGrid

    Returns:
        dict: kind name -> list of entity dicts
    """
    data = {}

    for sheet in sheets:
        kind, subclass = classify_sheet_name(sheet.name)
        entities = map_rows(sheet.rows, subclass)
        data.setdefault(kind, []).extend(entities)

    return data


def load_entities(path, engine=None):
    """
    Read a workbook and return its entity collection.

    Raises:
        MissingFileError: path does not name a regular file
        WorkbookParseError: the workbook could not be decoded

    Examples:
        >>> data = load_entities('import.xlsx')
        >>> sorted(data)
        ['agent', 'ci']
    """
    sheets = read_workbook(path, engine)
    return build_entity_collection(sheets)
