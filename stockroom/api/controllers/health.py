"""
Health check endpoint for the store service
"""

from flask import Blueprint, jsonify
from datetime import datetime, timezone
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import os
import time
import logging
from stockroom.database import db

logger = logging.getLogger(__name__)

# Create blueprint for health endpoints
health_bp = Blueprint('health', __name__)


def check_database_health():
    """Check database connectivity"""
    try:
        start_time = time.time()
        db.session.execute(text('SELECT 1'))
        response_time = (time.time() - start_time) * 1000  # Convert to milliseconds
        return {
            'status': 'healthy',
            'response_time': round(response_time, 2),
        }
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Database health check failed: {e}")
        return {
            'status': 'unhealthy',
            'message': str(e),
        }


@health_bp.route('/health', methods=['GET'])
def health():
    """Main health check endpoint"""
    database = check_database_health()
    healthy = database['status'] == 'healthy'
    return jsonify({
        'status': 'healthy' if healthy else 'unhealthy',
        'service': os.environ.get('NAME', 'stockroom'),
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'database': database,
    }), 200 if healthy else 503
