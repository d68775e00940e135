"""
Repositories package - Data access layer for the store
"""

# Import interfaces
from .base import CategoryRepositoryInterface, ProductRepositoryInterface

# Import concrete implementations
from .category_repository import CategoryRepository
from .product_repository import ProductRepository

# Export all interfaces and implementations
__all__ = [
    'CategoryRepositoryInterface',
    'ProductRepositoryInterface',
    'CategoryRepository',
    'ProductRepository'
]
