"""Typed replacement conditions for anonymization statements."""

import re
from typing import Any, Mapping
from .mappings import DialectKind, cast_targets

def integer_cast(unsigned: bool, dialect: DialectKind) -> str:
    """Get the CAST target for an integer column."""
    if dialect == DialectKind.MYSQL:
        return 'UNSIGNED' if unsigned else 'SIGNED'
    return 'INTEGER'

def build_condition(field: str, field_conf: Mapping[str, Any], dialect: DialectKind) -> str:
    """Build the replacement expression for a field, cast to the column type.

    The ``:field`` placeholder is bound by the caller to the new value.
    NULLs stay NULL.
    """
    if not re.fullmatch(r'\w+', field):
        raise ValueError(f'Invalid field name: {field}')
    col_type = str(field_conf.get('type') or '').lower()
    condition = f'(CASE {field} WHEN NULL THEN NULL ELSE :{field} END)'
    target = cast_targets.get(col_type)
    if target is None:
        return condition
    if target == 'integer':
        target = integer_cast(bool(field_conf.get('unsigned', False)), dialect)
    return f'CAST({condition} AS {target})'
