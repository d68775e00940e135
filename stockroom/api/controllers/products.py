"""
Product Controller - Handles product CRUD operations and stock queries
"""

from flask import request
from flask_restx import Namespace, Resource, fields
from marshmallow import ValidationError
from stockroom.models import Product
from stockroom.services import InventoryService
from stockroom.utils.schemas import ProductRequestSchema, ProductResponseSchema
from .common import result_response, parse_bool
import logging

logger = logging.getLogger(__name__)

products_ns = Namespace('products', description='Product operations')

# Initialize schemas
product_request_schema = ProductRequestSchema()
product_response_schema = ProductResponseSchema()

product_model = products_ns.model('Product', {
    'code': fields.String(required=True, description='Unique product code'),
    'name': fields.String(required=True, description='Product name'),
    'stock': fields.Integer(description='Units in stock'),
    'price': fields.Float(description='Unit price'),
    'category_id': fields.Integer(required=True, description='Owning category id'),
})


@products_ns.route('/')
class ProductList(Resource):
    @products_ns.doc('list_products')
    def get(self):
        """Get all products"""
        result = InventoryService().find_all_products()
        return result_response(result, product_response_schema, many=True)

    @products_ns.doc('create_product')
    @products_ns.expect(product_model)
    def post(self):
        """Create new product"""
        try:
            data = product_request_schema.load(request.get_json(silent=True) or {})
        except ValidationError as e:
            logger.debug(f"Rejected request body: {e.messages}")
            return {'error': 'Validation failed', 'details': e.messages}, 400

        result = InventoryService().add_product(Product(**data))
        return result_response(result, product_response_schema, success_code=201)


@products_ns.route('/code/<string:code>')
class ProductByCode(Resource):
    @products_ns.doc('get_product_by_code', params={'with_category': 'Include the full category record'})
    def get(self, code):
        """Get product by code"""
        service = InventoryService()
        result = service.find_product_by_code(code)
        if result and parse_bool(request.args.get('with_category', 'false')):
            result = service.find_product_with_category(result.value)
        return result_response(result, product_response_schema)

    @products_ns.doc('modify_product')
    @products_ns.expect(product_model)
    def put(self, code):
        """Modify product; omitted fields keep their current value"""
        try:
            data = product_request_schema.load(request.get_json(silent=True) or {}, partial=True)
        except ValidationError as e:
            logger.debug(f"Rejected request body: {e.messages}")
            return {'error': 'Validation failed', 'details': e.messages}, 400

        service = InventoryService()
        found = service.find_product_by_code(code)
        if not found:
            return result_response(found)

        old = found.value
        new = Product(
            code=data.get('code', old.code),
            name=data.get('name', old.name),
            stock=data.get('stock'),
            price=data.get('price'),
            category_id=data.get('category_id'),
        )
        result = service.modify_product(old, new)
        return result_response(result, product_response_schema)

    @products_ns.doc('remove_product')
    def delete(self, code):
        """Remove product"""
        service = InventoryService()
        found = service.find_product_by_code(code)
        if not found:
            return result_response(found)

        result = service.drop_product(found.value)
        return result_response(result)


@products_ns.route('/name/<string:name>')
class ProductByName(Resource):
    @products_ns.doc('get_product_by_name')
    def get(self, name):
        """Get product by name"""
        result = InventoryService().find_product_by_name(name)
        return result_response(result, product_response_schema)


@products_ns.route('/min-stock/<int:threshold>')
class ProductsByMinStock(Resource):
    @products_ns.doc('list_products_by_min_stock')
    def get(self, threshold):
        """Get products with at least threshold units in stock"""
        result = InventoryService().find_product_by_min_stock(threshold)
        return result_response(result, product_response_schema, many=True)
