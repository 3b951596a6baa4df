"""Flask app exposing read-only schema diagnostics."""

from flask import Flask, request, jsonify, Response, g, current_app
from schemautils import SqlCon, SchemaUtils, SchemaError, QueryError
from werkzeug.exceptions import HTTPException
from typing import Dict, Any, List
import json
import logging
from config import DB_CONFIG

app = Flask(__name__)
logger = logging.getLogger(__name__)

def get_utils() -> SchemaUtils:
    """Get or create SchemaUtils instance in Flask context."""
    if 'db' not in g:
        conn_str = current_app.config.get('DB_CONN_STR', DB_CONFIG['conn_str'])
        g.db = SqlCon(conn_str, echo=DB_CONFIG['echo'], debug=DB_CONFIG['debug'])
    return SchemaUtils(g.db)

def validate_payload(payload: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    """Validate JSON payload."""
    if not isinstance(payload, dict):
        raise ValueError('JSON object expected')
    missing = [k for k in required if k not in payload]
    if missing:
        raise ValueError(f'Missing required fields: {missing}')
    return payload

@app.errorhandler(ValueError)
def handle_value_error(e: ValueError) -> Response:
    """Handle ValueError with 400 response."""
    return jsonify({'error': str(e)}), 400

@app.errorhandler(SchemaError)
def handle_schema_error(e: SchemaError) -> Response:
    """Handle missing tables and keys with 404 response."""
    return jsonify({'error': str(e)}), 404

@app.errorhandler(QueryError)
def handle_query_error(e: QueryError) -> Response:
    """Handle rejected queries with 502 response."""
    logger.error(f'Query error: {e}')
    return jsonify({'error': str(e)}), 502

@app.errorhandler(Exception)
def handle_general_error(e: Exception) -> Response:
    """Handle unexpected errors with 500 response."""
    if isinstance(e, HTTPException):
        return e
    logger.error(f'Server error: {e}')
    return jsonify({'error': 'Internal server error'}), 500

@app.route('/tables', methods=['GET'])
def list_tables():
    """List tables."""
    return jsonify({'tables': get_utils().list_tables()})

@app.route('/tables/<table>/count', methods=['GET'])
def count_table(table: str):
    """Count rows of a table."""
    return jsonify({'table': table, 'count': get_utils().count_results(table)})

@app.route('/tables/<table>/columns', methods=['GET'])
def table_columns(table: str):
    """Columns and primary key of a table."""
    utils = get_utils()
    cols = utils.get_table_cols(table)
    return jsonify({'table': table, 'columns': cols, 'primary_key': utils.get_primary_keys(table)})

@app.route('/tables/<table>/describe', methods=['GET'])
def describe_table(table: str):
    """Column report of a table."""
    df = get_utils().describe(table)
    return jsonify({'table': table, 'columns': json.loads(df.to_json(orient='records'))})

@app.route('/condition', methods=['POST'])
def condition():
    """Build the replacement condition and empty value for a field."""
    payload = validate_payload(request.get_json(silent=True), ['field', 'type'])
    utils = get_utils()
    unsigned = payload.get('unsigned', False)
    if not isinstance(unsigned, bool):
        raise ValueError(f'unsigned must be a boolean, got {unsigned!r}')
    field_conf = {'type': payload['type'], 'unsigned': unsigned}
    return jsonify({
        'condition': utils.get_condition(payload['field'], field_conf),
        'empty_value': utils.get_empty_value(payload['type'])
    })

@app.teardown_appcontext
def close_db(error):
    """Close SqlCon instance on app context teardown."""
    if 'db' in g:
        g.pop('db').close()

if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG if DB_CONFIG['debug'] else logging.INFO)
    app.run(debug=DB_CONFIG['debug'])
