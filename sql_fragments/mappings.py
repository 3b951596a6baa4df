"""Dialect kinds and per-type lookup tables for fragment generation."""

from enum import Enum
from typing import Dict, Union

class DialectKind(str, Enum):
    """Database backends with distinct casting rules."""
    MYSQL = 'mysql'
    POSTGRESQL = 'postgresql'
    SQLITE = 'sqlite'
    MSSQL = 'mssql'
    ORACLE = 'oracle'
    OTHER = 'other'

# Column type -> CAST target; 'integer' marks the dialect-dependent integer cast
cast_targets = {
    'date': 'DATE',
    'datetime': 'DATE',
    'time': 'TIME',
    'smallint': 'integer',
    'integer': 'integer',
    'bigint': 'integer',
    'float': 'DECIMAL',
    'decimal': 'DECIMAL',
}

# Column type -> neutral value
empty_values: Dict[str, Union[int, str]] = {
    'date': '1970-01-01',
    'datetime': '1970-01-01 00:00:00',
    'time': '00:00:00',
    'smallint': 0,
    'integer': 0,
    'bigint': 0,
    'float': 0,
    'decimal': 0,
}
