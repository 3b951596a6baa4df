"""Exceptions raised by schema introspection and query helpers."""

import functools
import logging
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

logger = logging.getLogger(__name__)

class SchemaUtilsError(Exception):
    """Base class for all schemautils errors."""

class SchemaError(SchemaUtilsError):
    """Table is missing or has no usable primary key."""

class QueryError(SchemaUtilsError):
    """Database client rejected a query."""

def wrap_db_errors(fn):
    """Decorator to surface SQLAlchemy failures as QueryError/SchemaError."""
    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except NoSuchTableError as e:
            raise SchemaError(f'Table {e} does not exist') from e
        except SQLAlchemyError as e:
            logger.warning(f'{fn.__name__} failed: {e}')
            raise QueryError(f'{fn.__name__} failed: {e}') from e
    return wrapper
