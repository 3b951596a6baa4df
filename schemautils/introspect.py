"""Row counts and table metadata read from the database catalog."""

from typing import Any, Dict, List
import pandas as pd
from .conn import SqlCon
from .errors import SchemaError
from sql_fragments.empty_values import empty_value
import logging

logger = logging.getLogger(__name__)

class SchemaIntrospector:
    """Reads primary keys, columns and row counts; nothing is cached."""
    def __init__(self, con: SqlCon):
        self.con = con

    def count_results(self, table: str) -> int:
        """Count rows in a table."""
        return self.con.count(table)

    def assert_table_exists(self, table: str) -> None:
        """Raise SchemaError if the table is absent."""
        if not self.con.has_table(table):
            raise SchemaError(f'Table {table} does not exist')

    def list_tables(self) -> List[str]:
        return self.con.table_names()

    def get_primary_keys(self, table: str) -> List[str]:
        """Get the ordered primary key columns of a table."""
        self.assert_table_exists(table)
        return self.con.primary_key_columns(table)

    def get_primary_key(self, table: str) -> str:
        """Get the single primary key column of a table.

        Composite keys are refused rather than truncated to their first
        column; use get_primary_keys() to read them.
        """
        keys = self.get_primary_keys(table)
        if not keys:
            raise SchemaError(f"Table '{table}' has no primary key")
        if len(keys) > 1:
            raise SchemaError(f"Composite primary key {keys} for '{table}' is not supported")
        return keys[0]

    def get_table_cols(self, table: str) -> Dict[str, Dict[str, Any]]:
        """Get {column: {length, type, unsigned}} for a table."""
        self.assert_table_exists(table)
        cols = {}
        for c in self.con.columns(table):
            cols[c['name']] = {'length': c['length'], 'type': c['type'], 'unsigned': c['unsigned']}
        logger.debug(f'{table}: {len(cols)} columns')
        return cols

    def describe(self, table: str) -> pd.DataFrame:
        """Column report with primary key flags and empty values."""
        cols = self.get_table_cols(table)
        keys = set(self.con.primary_key_columns(table))
        rows = [
            {
                'name': name, 'type': meta['type'], 'length': meta['length'],
                'unsigned': meta['unsigned'], 'primary_key': name in keys,
                'empty_value': empty_value(meta['type']),
            }
            for name, meta in cols.items()
        ]
        df = pd.DataFrame(rows, columns=['name', 'type', 'length', 'unsigned', 'primary_key', 'empty_value'])
        return df.astype({'length': 'Int64'})
