"""Schema helpers handed to the anonymization engine."""

from typing import Any, Dict, List, Mapping, Tuple, Union
import pandas as pd
from sqlalchemy.sql import ClauseElement
from sql_fragments.conditions import build_condition
from sql_fragments.debug import render_raw_sql
from sql_fragments.empty_values import empty_value
from .conn import SqlCon
from .introspect import SchemaIntrospector
import logging

logger = logging.getLogger(__name__)

class SchemaUtils:
    """Generic helpers to interact with a database while anonymizing it.

    Holds the connection adapter and the dialect resolved from it; every
    call reads the current state of the database.
    """
    def __init__(self, con: SqlCon):
        self.con = con
        self.dialect = con.dialect_kind
        self.introspector = SchemaIntrospector(con)

    def count_results(self, table: str) -> int:
        """Do a simple count for a table."""
        return self.introspector.count_results(table)

    def get_primary_key(self, table: str) -> str:
        """Identify the single primary key column of a table."""
        return self.introspector.get_primary_key(table)

    def get_primary_keys(self, table: str) -> List[str]:
        return self.introspector.get_primary_keys(table)

    def get_table_cols(self, table: str) -> Dict[str, Dict[str, Any]]:
        """Get columns of a table with their type, length and sign."""
        return self.introspector.get_table_cols(table)

    def assert_table_exists(self, table: str) -> None:
        """Make sure a table exists."""
        self.introspector.assert_table_exists(table)

    def list_tables(self) -> List[str]:
        return self.introspector.list_tables()

    def describe(self, table: str) -> pd.DataFrame:
        return self.introspector.describe(table)

    def get_condition(self, field: str, field_conf: Mapping[str, Any]) -> str:
        """Build the condition for a field, casting the value if needed."""
        return build_condition(field, field_conf, self.dialect)

    def get_empty_value(self, col_type: str) -> Union[int, str]:
        """Give an empty value according to the field type (numeric = 0)."""
        return empty_value(col_type)

    def get_raw_sql(self, query: Union[ClauseElement, Tuple[str, Dict[str, Any]]]) -> str:
        """Build the final SQL of a statement, for debugging only (approximate)."""
        sql, params = self.con.query_parts(query)
        return render_raw_sql(sql, params)
