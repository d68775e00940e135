"""
Services package - Business logic layer for the store
"""

from .results import ServiceResult
from .inventory_service import InventoryService

__all__ = ['ServiceResult', 'InventoryService']
