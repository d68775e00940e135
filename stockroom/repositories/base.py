"""
Base Repository Interface - Abstract base classes
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union
from stockroom.models import Category, Product


class CategoryRepositoryInterface(ABC):
    """Abstract base class for category repository"""

    @abstractmethod
    def select_all(self) -> List[Category]:
        pass

    @abstractmethod
    def select(self, category: Union[Category, int]) -> Optional[Category]:
        pass

    @abstractmethod
    def select_where_code(self, code: str) -> Optional[Category]:
        pass

    @abstractmethod
    def select_where_name(self, name: str) -> Optional[Category]:
        pass

    @abstractmethod
    def insert(self, category: Category) -> Category:
        pass

    @abstractmethod
    def update(self, old: Category, new: Category) -> bool:
        pass

    @abstractmethod
    def delete(self, category: Category) -> bool:
        pass


class ProductRepositoryInterface(ABC):
    """Abstract base class for product repository"""

    @abstractmethod
    def select_all(self) -> List[Product]:
        pass

    @abstractmethod
    def select(self, product: Union[Product, int]) -> Optional[Product]:
        pass

    @abstractmethod
    def select_where_code(self, code: str) -> Optional[Product]:
        pass

    @abstractmethod
    def select_where_name(self, name: str) -> Optional[Product]:
        pass

    @abstractmethod
    def select_where_min_stock(self, threshold: int) -> List[Product]:
        pass

    @abstractmethod
    def select_where_category(self, category: Union[Category, int]) -> List[Product]:
        pass

    @abstractmethod
    def insert(self, product: Product) -> Product:
        pass

    @abstractmethod
    def update(self, old: Product, new: Product) -> bool:
        pass

    @abstractmethod
    def delete(self, product: Product) -> bool:
        pass
