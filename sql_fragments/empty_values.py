"""Neutral values per column type."""

from typing import Union
from .mappings import empty_values

def empty_value(col_type: str) -> Union[int, str]:
    """Get an empty value for a column type (numeric = 0, dates = epoch, else '')."""
    return empty_values.get(str(col_type).lower(), '')
