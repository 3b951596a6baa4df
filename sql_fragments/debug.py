"""Approximate literal SQL for logs.

The output is NOT escaped and must never be executed.
"""

import re
from typing import Any, Dict

_rx_named = re.compile(r'(?<!:):([A-Za-z_]\w*)\b')

def _literal(value: Any) -> str:
    return 'NULL' if value is None else f"'{value}'"

def render_raw_sql(sql: str, params: Dict[str, Any]) -> str:
    """Replace each :name bound in params with its quoted value."""
    def repl(m: re.Match) -> str:
        name = m.group(1)
        return _literal(params[name]) if name in params else m.group(0)
    return _rx_named.sub(repl, sql)
