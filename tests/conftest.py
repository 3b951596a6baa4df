import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine, text
from schemautils import SqlCon, SchemaUtils, DialectKind

SCHEMA = [
    "CREATE TABLE users (id INTEGER PRIMARY KEY, email VARCHAR(255), birthdate DATE)",
    "CREATE TABLE orders (user_id INTEGER, line INTEGER, amount DECIMAL(10, 2), "
    "placed_at DATETIME, PRIMARY KEY (user_id, line))",
    "CREATE TABLE logs (message TEXT, at TIME, level SMALLINT, size BIGINT, ratio FLOAT)",
]

USERS = [
    {'id': 1, 'email': 'ada@example.com', 'birthdate': '1815-12-10'},
    {'id': 2, 'email': 'alan@example.com', 'birthdate': '1912-06-23'},
    {'id': 3, 'email': None, 'birthdate': None},
]

@pytest.fixture
def db_url(tmp_path):
    """File-backed SQLite database with users, orders and logs tables."""
    url = f"sqlite:///{tmp_path / 'anon.db'}"
    engine = create_engine(url)
    with engine.begin() as conn:
        for ddl in SCHEMA:
            conn.execute(text(ddl))
        conn.execute(text("INSERT INTO users (id, email, birthdate) VALUES (:id, :email, :birthdate)"), USERS)
    engine.dispose()
    return url

@pytest.fixture
def con(db_url):
    with SqlCon(db_url) as c:
        yield c

@pytest.fixture
def utils(con):
    return SchemaUtils(con)

@pytest.fixture
def mysql_utils():
    """SchemaUtils over a stand-in MySQL adapter."""
    con = MagicMock()
    con.dialect_kind = DialectKind.MYSQL
    return SchemaUtils(con)
