"""
Workbook loaders for the OTRS importer.

This package turns an .xlsx workbook into entity collections grouped by
entity kind, and rewrites configuration item dynamic-field columns into the
console's attribute convention.

Architecture:
    workbook_reader → sheet_classifier → excel_loader → attribute_flattener

Modules:
    config: Configuration constants
    workbook_reader: Decode a workbook into cell grids (openpyxl or pandas)
    sheet_classifier: Split sheet names into (kind, subclass)
    excel_loader: Map rows to entities and group them by kind
    attribute_flattener: attr*/attrDate*/attrDateTime* column rewriting
"""

from .excel_loader import load_entities, build_entity_collection, map_rows
from .sheet_classifier import classify_sheet_name
from .attribute_flattener import flatten_attribute, parse_natural_datetime
from .workbook_reader import read_workbook

__all__ = [
    'load_entities', 'build_entity_collection', 'map_rows',
    'classify_sheet_name', 'flatten_attribute', 'parse_natural_datetime',
    'read_workbook',
]
