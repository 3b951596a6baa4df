"""Dialect resolution and reflected column type mappings."""

from typing import Any
from sqlalchemy import types as sqltypes
from sql_fragments.mappings import DialectKind

# SQLAlchemy dialect name -> DialectKind
dialect_names = {
    'mysql': DialectKind.MYSQL,
    'mariadb': DialectKind.MYSQL,
    'postgresql': DialectKind.POSTGRESQL,
    'postgres': DialectKind.POSTGRESQL,
    'sqlite': DialectKind.SQLITE,
    'mssql': DialectKind.MSSQL,
    'oracle': DialectKind.ORACLE,
}

# Reflected SQLAlchemy type -> column type vocabulary.
# Subclasses (BigInteger, Float, Text) must come before their bases.
type_names = [
    (sqltypes.DateTime, 'datetime'),
    (sqltypes.Date, 'date'),
    (sqltypes.Time, 'time'),
    (sqltypes.SmallInteger, 'smallint'),
    (sqltypes.BigInteger, 'bigint'),
    (sqltypes.Integer, 'integer'),
    (sqltypes.Float, 'float'),
    (sqltypes.Numeric, 'decimal'),
    (sqltypes.Boolean, 'boolean'),
    (sqltypes.Text, 'text'),
    (sqltypes.String, 'string'),
]

def resolve_dialect(name: str) -> DialectKind:
    """Map a SQLAlchemy dialect name to a DialectKind."""
    return dialect_names.get(name.lower(), DialectKind.OTHER)

def type_name(col_type: Any) -> str:
    """Map a reflected column type to the type vocabulary."""
    for cls, name in type_names:
        if isinstance(col_type, cls):
            return name
    return 'other'
