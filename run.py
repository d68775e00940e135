#!/usr/bin/env python3
"""
Stockroom
Flask-based service for managing categories and products.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import application factory
from stockroom import create_app, init_database

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    env = os.environ.get('FLASK_ENV', 'production')

    logger.info(f"Starting Stockroom in {env} mode")

    app = create_app(env)

    # Initialize database tables
    try:
        init_database(app)
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 5000))
    debug = env == 'development'

    logger.info(f"Starting Stockroom on {host}:{port}")

    app.run(
        host=host,
        port=port,
        debug=debug
    )


if __name__ == '__main__':
    main()
