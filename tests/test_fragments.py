import pytest
from sqlalchemy import column, table, text, update
from sql_fragments import DialectKind, build_condition, empty_value, integer_cast, render_raw_sql
from schemautils import resolve_dialect

def test_condition_date(utils):
    assert utils.get_condition('birthdate', {'type': 'date'}) == \
        'CAST((CASE birthdate WHEN NULL THEN NULL ELSE :birthdate END) AS DATE)'

@pytest.mark.parametrize('col_type,target', [
    ('datetime', 'DATE'), ('time', 'TIME'), ('float', 'DECIMAL'), ('decimal', 'DECIMAL'),
])
def test_condition_cast_targets(col_type, target):
    sql = build_condition('f', {'type': col_type}, DialectKind.POSTGRESQL)
    assert sql == f'CAST((CASE f WHEN NULL THEN NULL ELSE :f END) AS {target})'

def test_condition_without_cast(utils):
    assert utils.get_condition('email', {'type': 'text'}) == \
        '(CASE email WHEN NULL THEN NULL ELSE :email END)'
    assert utils.get_condition('email', {'type': 'string', 'length': 255, 'unsigned': False}) == \
        '(CASE email WHEN NULL THEN NULL ELSE :email END)'

def test_condition_integer_mysql(mysql_utils):
    assert mysql_utils.get_condition('id', {'type': 'integer', 'unsigned': True}).endswith('AS UNSIGNED)')
    assert mysql_utils.get_condition('id', {'type': 'integer', 'unsigned': False}).endswith('AS SIGNED)')
    assert mysql_utils.get_condition('id', {'type': 'bigint'}).endswith('AS SIGNED)')

def test_condition_integer_other_dialects(utils):
    assert utils.get_condition('id', {'type': 'integer', 'unsigned': True}).endswith('AS INTEGER)')
    assert utils.get_condition('id', {'type': 'smallint', 'unsigned': False}).endswith('AS INTEGER)')

def test_condition_case_insensitive(mysql_utils):
    assert mysql_utils.get_condition('id', {'type': 'INTEGER', 'unsigned': True}) == \
        mysql_utils.get_condition('id', {'type': 'integer', 'unsigned': True})

def test_condition_invalid_field():
    with pytest.raises(ValueError):
        build_condition('id; DROP TABLE users', {'type': 'integer'}, DialectKind.SQLITE)

def test_integer_cast():
    assert integer_cast(True, DialectKind.MYSQL) == 'UNSIGNED'
    assert integer_cast(False, DialectKind.MYSQL) == 'SIGNED'
    assert integer_cast(True, DialectKind.ORACLE) == 'INTEGER'

def test_resolve_dialect():
    assert resolve_dialect('mysql') is DialectKind.MYSQL
    assert resolve_dialect('mariadb') is DialectKind.MYSQL
    assert resolve_dialect('PostgreSQL') is DialectKind.POSTGRESQL
    assert resolve_dialect('firebird') is DialectKind.OTHER

@pytest.mark.parametrize('col_type,value', [
    ('date', '1970-01-01'), ('datetime', '1970-01-01 00:00:00'), ('time', '00:00:00'),
    ('smallint', 0), ('integer', 0), ('bigint', 0), ('float', 0), ('decimal', 0),
    ('varchar', ''), ('other', ''),
])
def test_empty_value(col_type, value):
    assert empty_value(col_type) == value

def test_empty_value_case_insensitive(utils):
    assert utils.get_empty_value('INTEGER') == 0
    assert utils.get_empty_value('Date') == '1970-01-01'

def test_users_scenario(utils):
    cols = utils.get_table_cols('users')
    assert utils.get_primary_key('users') == 'id'
    assert utils.get_condition('birthdate', cols['birthdate']) == \
        'CAST((CASE birthdate WHEN NULL THEN NULL ELSE :birthdate END) AS DATE)'
    assert utils.get_empty_value(cols['birthdate']['type']) == '1970-01-01'
    assert utils.get_empty_value(cols['email']['type']) == ''

def test_raw_sql_text_clause(utils):
    stmt = text('UPDATE users SET email = :email WHERE id = :id').bindparams(email='x@example.com', id=1)
    assert utils.get_raw_sql(stmt) == "UPDATE users SET email = 'x@example.com' WHERE id = '1'"

def test_raw_sql_update_construct(utils):
    stmt = update(table('users', column('id'), column('email'))).where(column('id') == 2).values(email='a')
    sql = utils.get_raw_sql(stmt)
    assert "'a'" in sql and "'2'" in sql
    assert ':' not in sql

def test_raw_sql_tuple(utils):
    sql = utils.get_raw_sql(('SELECT * FROM users WHERE id = :id OR id = :id2', {'id': 1, 'id2': 2}))
    assert sql == "SELECT * FROM users WHERE id = '1' OR id = '2'"

def test_render_raw_sql_leaves_casts_and_unknowns():
    assert render_raw_sql('SELECT :v::int, :missing', {'v': 5}) == "SELECT '5'::int, :missing"
    assert render_raw_sql('SELECT :v', {'v': None}) == 'SELECT NULL'

def test_raw_sql_unsupported(utils):
    with pytest.raises(TypeError):
        utils.get_raw_sql('SELECT 1')

def test_condition_rejects_trailing_newline():
    with pytest.raises(ValueError):
        build_condition('id\n', {'type': 'integer'}, DialectKind.SQLITE)
