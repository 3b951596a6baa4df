"""SQLAlchemy connection adapter used by the schema helpers."""

from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple, Union
from sqlalchemy import create_engine, func, inspect as sa_inspect, select, table as sa_table
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool
from sqlalchemy.sql import ClauseElement
from .errors import QueryError, wrap_db_errors
from .mappings import resolve_dialect, type_name
import logging

logger = logging.getLogger(__name__)

def split_table(table: str) -> Tuple[Optional[str], str]:
    """Split 'schema.table' on the last dot; schema is None when absent."""
    schema, _, name = table.rpartition('.')
    return schema or None, name

class SqlCon:
    """Connection adapter exposing the catalog and driver details of one database."""
    def __init__(
        self, conn: Union[str, Engine], pool_size: int = 5, pool_timeout: int = 30,
        echo: bool = False, debug: bool = False
    ):
        self.debug = debug
        if isinstance(conn, Engine):
            self.engine = conn
            self._owns_engine = False
        else:
            url = make_url(conn)
            kwargs = {}
            if url.get_backend_name() != 'sqlite':
                kwargs = dict(poolclass=QueuePool, pool_size=pool_size,
                              pool_timeout=pool_timeout, pool_recycle=3600)
            self.engine = create_engine(url, echo=echo, **kwargs)
            self._owns_engine = True
        self.url = self.engine.url
        self.dialect_kind = resolve_dialect(self.engine.dialect.name)
        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as e:
            if self._owns_engine:
                self.engine.dispose()
            raise QueryError(f'Cannot connect to {self.url.render_as_string(hide_password=True)}: {e}') from e

    @property
    def driver_name(self) -> str:
        """Driver identity, e.g. 'mysql+pymysql'."""
        return self.url.drivername

    def _log(self, sql: str, params: Any):
        """Log SQL and params if debug enabled."""
        if self.debug:
            logger.debug(f'SQL: {sql} | Params: {params}')

    @contextmanager
    def connect(self):
        """Context-managed connection."""
        conn = self.engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    @wrap_db_errors
    def count(self, table: str) -> int:
        """Run a row count on a table."""
        schema, name = split_table(table)
        stmt = select(func.count()).select_from(sa_table(name, schema=schema))
        self._log(stmt, {})
        with self.connect() as conn:
            return int(conn.execute(stmt).scalar_one())

    @wrap_db_errors
    def has_table(self, table: str) -> bool:
        """Check table existence."""
        schema, name = split_table(table)
        return sa_inspect(self.engine).has_table(name, schema=schema)

    @wrap_db_errors
    def table_names(self) -> List[str]:
        """List tables of the default schema."""
        return sa_inspect(self.engine).get_table_names()

    @wrap_db_errors
    def primary_key_columns(self, table: str) -> List[str]:
        """Get ordered primary key columns, empty when the table has none."""
        schema, name = split_table(table)
        pk = sa_inspect(self.engine).get_pk_constraint(name, schema=schema) or {}
        return list(pk.get('constrained_columns') or [])

    @wrap_db_errors
    def columns(self, table: str) -> List[Dict[str, Any]]:
        """Get column name, length, type and sign for a table."""
        out = []
        schema, name = split_table(table)
        for c in sa_inspect(self.engine).get_columns(name, schema=schema):
            col_type = c['type']
            out.append({
                'name': c['name'],
                'length': getattr(col_type, 'length', None),
                'type': type_name(col_type),
                'unsigned': bool(getattr(col_type, 'unsigned', False)),
            })
        return out

    def query_parts(self, query: Union[ClauseElement, Tuple[str, Dict[str, Any]]]) -> Tuple[str, Dict[str, Any]]:
        """Split a statement into named-style SQL text and its bound parameters."""
        if isinstance(query, tuple):
            sql, params = query
            return sql, dict(params or {})
        if isinstance(query, ClauseElement):
            compiled = query.compile()
            return compiled.string, dict(compiled.params)
        raise TypeError(f'Unsupported query type: {type(query)}')

    def close(self):
        """Dispose of engine resources when the engine was created here."""
        if self._owns_engine:
            self.engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
