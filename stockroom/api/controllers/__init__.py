"""
Controllers package initialization
"""

from flask import Blueprint
from flask_restx import Api

from stockroom.api.controllers.categories import categories_ns
from stockroom.api.controllers.products import products_ns
from stockroom.api.controllers.health import health_bp

# Create blueprint
api_bp = Blueprint('api', __name__)
api = Api(api_bp, version='1.0', title='Stockroom API',
          description='Category and product management endpoints', doc='/docs/')

api.add_namespace(categories_ns)
api.add_namespace(products_ns)

__all__ = ['api_bp', 'health_bp']
