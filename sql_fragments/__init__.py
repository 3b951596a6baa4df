"""SQL fragment subpackage for anonymization conditions and values."""

from .mappings import DialectKind, cast_targets, empty_values
from .conditions import build_condition, integer_cast
from .empty_values import empty_value
from .debug import render_raw_sql

__all__ = [
    'DialectKind',
    'cast_targets',
    'empty_values',
    'build_condition',
    'integer_cast',
    'empty_value',
    'render_raw_sql'
]
