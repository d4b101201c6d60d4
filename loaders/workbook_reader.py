"""
Workbook decoding into plain cell grids.

Two engines turn an .xlsx file into a list of SheetGrid(name, rows):

    openpyxl: reads cells directly; the grid starts at the first populated
              row and column of each sheet
    pandas:   reads every sheet with pd.read_excel(header=None); leading blank
              rows are dropped so row 0 is still the header

In both, an absent cell is None, never an empty string.

Functions:
    ensure_workbook_path: Fail fast on a missing or non-regular file
    read_workbook: Decode a workbook with the chosen engine
"""

import warnings
from pathlib import Path

import openpyxl
import pandas as pd

from models.entities import SheetGrid
from models.errors import MissingFileError, WorkbookParseError
from .config import DEFAULT_ENGINE, ENGINES

# Suppress openpyxl warnings about styles/formatting (we only read data values)
warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')


def ensure_workbook_path(path):
    """
    Check that path names an existing regular file.

    Raises:
        MissingFileError: path is empty, absent, or a directory
    """
    if not path or not Path(path).is_file():
        raise MissingFileError(path)
    return Path(path)


def read_workbook(path, engine=None):
    """
    Decode all worksheets of a workbook, in workbook order.

    Args:
        path: Path to the .xlsx file
        engine: 'openpyxl' or 'pandas' (default from config)

    Returns:
        list of SheetGrid

    Raises:
        MissingFileError: path does not name a regular file
        WorkbookParseError: the decoder failed to open or parse the file

    Examples:
        >>> sheets = read_workbook('import.xlsx')
        >>> sheets[0].name, sheets[0].rows[0]
        ('agent', ['UserLogin', 'UserFirstname', 'UserEmail'])
    """
    path = ensure_workbook_path(path)
    engine = engine or DEFAULT_ENGINE
    if engine not in ENGINES:
        raise ValueError(f"unknown workbook engine '{engine}', use one of {ENGINES}")

    reader = _read_with_openpyxl if engine == 'openpyxl' else _read_with_pandas
    try:
        return reader(path)
    except Exception as e:
        raise WorkbookParseError(path, e) from e


def _read_with_openpyxl(path):
    wb = openpyxl.load_workbook(path, data_only=True)
    sheets = []
    try:
        for ws in wb.worksheets:
            rows = [
                list(row) for row in ws.iter_rows(
                    min_row=ws.min_row,
                    min_col=ws.min_column,
                    values_only=True,
                )
            ]
            sheets.append(SheetGrid(ws.title, rows))
    finally:
        wb.close()
    return sheets


def _read_with_pandas(path):
    frames = pd.read_excel(path, sheet_name=None, header=None, dtype=object)
    sheets = []
    for name, df in frames.items():
        rows = [
            [None if pd.isna(value) else value for value in row]
            for row in df.itertuples(index=False, name=None)
        ]
        # Leading blank rows would otherwise shift the header
        while rows and all(value is None for value in rows[0]):
            rows.pop(0)
        sheets.append(SheetGrid(name, rows))
    return sheets
