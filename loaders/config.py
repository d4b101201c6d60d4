"""
Configuration constants for the OTRS workbook importer.

This module centralizes the console command, the entity-kind tables and the
naming patterns used while reading a workbook, so they can be adjusted
without touching core logic.
"""

# External console tool
CONSOLE_SCRIPT = "/opt/otrs/bin/otrs.Console.pl"
BASE_COMMAND = ["perl", CONSOLE_SCRIPT]

# Processing order of entity kinds (never request order)
ENTITY_ORDER = ['agent', 'customer', 'customer_user', 'ci']

# Entity kind -> console subcommand
SUBCOMMANDS = {
    'agent': 'Admin::User::Add',
    'customer': 'Admin::CustomerCompany::Add',
    'customer_user': 'Admin::CustomerUser::Add',
    'ci': 'Admin::ITSM::ConfigItem::Add',
}

# Sheet names like "ci - Hardware" carry a subclass after the first hyphen
SHEET_NAME_PATTERN = r'^\s*(\w+)\s*-\s*(.*?)\s*$'

# Key injected into every entity of a sheet with a subclass
CLASS_KEY = 'class'

# Dynamic-field columns of configuration items: attr-, attrDate-, attrDateTime-
ATTRIBUTE_KEY_PATTERN = r'^attr(?:Date(?:Time)?)?-'
ATTRIBUTE_KEY = 'attribute'

DATE_FORMAT = '%Y-%m-%d'
DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'

# Workbook decoders
ENGINES = ['openpyxl', 'pandas']
DEFAULT_ENGINE = 'openpyxl'
