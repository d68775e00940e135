"""
Category Controller - Handles category CRUD operations
"""

from flask import request
from flask_restx import Namespace, Resource, fields
from marshmallow import ValidationError
from stockroom.models import Category
from stockroom.services import InventoryService
from stockroom.utils.schemas import (
    CategoryRequestSchema, CategoryResponseSchema, ProductResponseSchema
)
from .common import result_response
import logging

logger = logging.getLogger(__name__)

categories_ns = Namespace('categories', description='Category operations')

# Initialize schemas
category_request_schema = CategoryRequestSchema()
category_response_schema = CategoryResponseSchema()
product_response_schema = ProductResponseSchema()

category_model = categories_ns.model('Category', {
    'code': fields.String(required=True, description='Unique category code'),
    'name': fields.String(required=True, description='Category name'),
})


@categories_ns.route('/')
class CategoryList(Resource):
    @categories_ns.doc('list_categories')
    def get(self):
        """Get all categories"""
        result = InventoryService().find_all_categories()
        return result_response(result, category_response_schema, many=True)

    @categories_ns.doc('create_category')
    @categories_ns.expect(category_model)
    def post(self):
        """Create new category"""
        try:
            data = category_request_schema.load(request.get_json(silent=True) or {})
        except ValidationError as e:
            logger.debug(f"Rejected request body: {e.messages}")
            return {'error': 'Validation failed', 'details': e.messages}, 400

        result = InventoryService().add_category(Category(**data))
        return result_response(result, category_response_schema, success_code=201)


@categories_ns.route('/code/<string:code>')
class CategoryByCode(Resource):
    @categories_ns.doc('get_category_by_code')
    def get(self, code):
        """Get category by code"""
        result = InventoryService().find_category_by_code(code)
        return result_response(result, category_response_schema)

    @categories_ns.doc('modify_category')
    @categories_ns.expect(category_model)
    def put(self, code):
        """Modify category; omitted fields keep their current value"""
        try:
            data = category_request_schema.load(request.get_json(silent=True) or {}, partial=True)
        except ValidationError as e:
            logger.debug(f"Rejected request body: {e.messages}")
            return {'error': 'Validation failed', 'details': e.messages}, 400

        service = InventoryService()
        found = service.find_category_by_code(code)
        if not found:
            return result_response(found)

        old = found.value
        new = Category(code=data.get('code', old.code), name=data.get('name', old.name))
        result = service.modify_category(old, new)
        return result_response(result, category_response_schema)

    @categories_ns.doc('remove_category')
    def delete(self, code):
        """Remove category (refused while it has products)"""
        service = InventoryService()
        found = service.find_category_by_code(code)
        if not found:
            return result_response(found)

        result = service.drop_category(found.value)
        return result_response(result)


@categories_ns.route('/name/<string:name>')
class CategoryByName(Resource):
    @categories_ns.doc('get_category_by_name')
    def get(self, name):
        """Get category by name"""
        result = InventoryService().find_category_by_name(name)
        return result_response(result, category_response_schema)


@categories_ns.route('/code/<string:code>/products')
class CategoryProducts(Resource):
    @categories_ns.doc('list_category_products')
    def get(self, code):
        """Get all products of a category"""
        service = InventoryService()
        found = service.find_category_by_code(code)
        if not found:
            return result_response(found)

        result = service.find_products_by_category(found.value)
        return result_response(result, product_response_schema, many=True)
