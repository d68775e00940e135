from marshmallow import Schema, fields, validate, pre_load


class CategoryRequestSchema(Schema):
    """Schema for creating/updating categories"""
    code = fields.Str(required=True, validate=validate.Length(min=1, max=20))
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))

    @pre_load
    def strip_strings(self, data, **kwargs):
        return {
            key: value.strip() if isinstance(value, str) else value
            for key, value in data.items()
        }


class CategoryResponseSchema(Schema):
    """Schema for category responses"""
    id = fields.Int(dump_only=True)
    code = fields.Str()
    name = fields.Str()


class ProductRequestSchema(Schema):
    """Schema for creating/updating products"""
    code = fields.Str(required=True, validate=validate.Length(min=1, max=20))
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    stock = fields.Int(validate=validate.Range(min=0), load_default=0)
    price = fields.Float(validate=validate.Range(min=0), load_default=0.0)
    category_id = fields.Int(required=True, validate=validate.Range(min=1))

    @pre_load
    def strip_strings(self, data, **kwargs):
        return {
            key: value.strip() if isinstance(value, str) else value
            for key, value in data.items()
        }


class ProductResponseSchema(Schema):
    """Schema for product responses"""
    id = fields.Int(dump_only=True)
    code = fields.Str()
    name = fields.Str()
    stock = fields.Int()
    price = fields.Float()
    category = fields.Dict()  # {'id'} or the full category once joined
