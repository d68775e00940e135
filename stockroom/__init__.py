import logging
from flask import Flask
from flask_cors import CORS


def create_app(config_name='default'):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    # Load configuration
    from config import config, get_database_uri
    app.config.from_object(config[config_name])
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = get_database_uri()

    # Initialize database
    from stockroom.database import init_db
    init_db(app)

    # CORS setup
    CORS(app, origins=app.config.get('CORS_ORIGINS', ['*']))

    # Configure logging
    if not app.testing:
        logging.basicConfig(
            level=getattr(logging, app.config['LOG_LEVEL']),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )

    # Register blueprints
    from stockroom.api.controllers import api_bp, health_bp
    app.register_blueprint(api_bp, url_prefix='/api/v1')
    app.register_blueprint(health_bp)
    app.logger.info("Controllers registered successfully")

    # Register error handlers
    from stockroom.utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    return app


def init_database(app):
    """Create tables if missing - call this explicitly when ready"""
    from stockroom.models import db
    with app.app_context():
        db.create_all()
        app.logger.info("Database tables created successfully")
