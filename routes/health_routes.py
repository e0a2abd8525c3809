from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from extensions import db

health_bp = Blueprint('health', __name__)


@health_bp.route('', methods=['GET'])
def index():
    return jsonify({
        'message': 'Hello from One-on-One Log API!',
        'status': 'running',
        'environment': current_app.config.get('ENVIRONMENT'),
    }), 200


@health_bp.route('/health', methods=['GET'])
def health():
    """Liveness plus a database probe; never fails because the database is down."""
    try:
        db.session.execute(text("SELECT 1"))
        database = 'connected'
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.warning(f"[WARN] Database health check failed: {e}")
        database = 'disconnected'

    return jsonify({'status': 'OK', 'database': database}), 200
