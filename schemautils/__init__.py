from .conn import SqlCon
from .errors import SchemaUtilsError, SchemaError, QueryError
from .introspect import SchemaIntrospector
from .mappings import DialectKind, resolve_dialect, type_name
from .utils import SchemaUtils

__all__ = [
    'SqlCon', 'SchemaUtilsError', 'SchemaError', 'QueryError',
    'SchemaIntrospector', 'DialectKind', 'resolve_dialect', 'type_name', 'SchemaUtils'
]
