"""
Models package - Database models for the store
"""

# Import database instance
from stockroom.database import db

# Import enums first
from .enums import ResultStatus

# Import models
from .category import Category
from .product import Product

# Export all models and enums
__all__ = [
    'db',
    'ResultStatus',
    'Category',
    'Product'
]
