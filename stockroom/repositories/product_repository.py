"""
Product Repository Implementation
"""

import logging
from typing import List, Optional, Union
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from stockroom.database import db
from stockroom.exceptions import ConstraintViolationError, DuplicateKeyError, StorageError
from stockroom.models import Category, Product
from .base import ProductRepositoryInterface
from .category_repository import identity_of

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('code', 'name', 'stock', 'price', 'category_id')


class ProductRepository(ProductRepositoryInterface):
    """Concrete implementation of product repository"""

    def select_all(self) -> List[Product]:
        """Get all products ordered by id"""
        try:
            return Product.query.order_by(Product.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting products: {e}")
            raise StorageError(str(e)) from e

    def select(self, product: Union[Product, int]) -> Optional[Product]:
        """Get product by id"""
        product_id = identity_of(product)
        if product_id is None:
            return None
        try:
            return db.session.get(Product, product_id)
        except SQLAlchemyError as e:
            logger.error(f"Error selecting product {product_id}: {e}")
            raise StorageError(str(e)) from e

    def select_where_code(self, code: str) -> Optional[Product]:
        """Get product by code"""
        try:
            return Product.query.filter_by(code=code).first()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting product with code {code}: {e}")
            raise StorageError(str(e)) from e

    def select_where_name(self, name: str) -> Optional[Product]:
        """Get first product with the given name"""
        try:
            return Product.query.filter_by(name=name).order_by(Product.id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting product with name {name}: {e}")
            raise StorageError(str(e)) from e

    def select_where_min_stock(self, threshold: int) -> List[Product]:
        """Get products with at least threshold units in stock"""
        try:
            return Product.query.filter(
                Product.stock >= threshold
            ).order_by(Product.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting products with stock >= {threshold}: {e}")
            raise StorageError(str(e)) from e

    def select_where_category(self, category: Union[Category, int]) -> List[Product]:
        """Get products of a category; only the category id is used"""
        category_id = identity_of(category)
        try:
            return Product.query.filter_by(
                category_id=category_id
            ).order_by(Product.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting products of category {category_id}: {e}")
            raise StorageError(str(e)) from e

    def insert(self, product: Product) -> Product:
        """Create new product; the store assigns its id"""
        code = product.code
        try:
            db.session.add(product)
            db.session.commit()
            return product
        except IntegrityError as e:
            db.session.rollback()
            raise self._classify_integrity_error(code, None, e) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error inserting product {product.code}: {e}")
            raise StorageError(str(e)) from e

    def update(self, old: Product, new: Product) -> bool:
        """Overwrite the row identified by old with the values of new"""
        own_id = identity_of(old)
        try:
            row = self.select(old)
            if not row:
                return False

            for key in UPDATABLE_FIELDS:
                value = getattr(new, key)
                if value is not None:
                    setattr(row, key, value)

            # A joined category record no longer matches once the product moves
            if row.category is not None and row.category.id != row.category_id:
                row.category = None

            db.session.commit()
            return True
        except IntegrityError as e:
            db.session.rollback()
            raise self._classify_integrity_error(new.code, own_id, e) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error updating product {identity_of(old)}: {e}")
            raise StorageError(str(e)) from e

    def delete(self, product: Product) -> bool:
        """Delete product by id"""
        try:
            row = self.select(product)
            if not row:
                return False

            db.session.delete(row)
            db.session.commit()
            return True
        except IntegrityError as e:
            db.session.rollback()
            logger.error(f"Delete of product {identity_of(product)} rejected by the store: {e.orig}")
            raise ConstraintViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error deleting product {identity_of(product)}: {e}")
            raise StorageError(str(e)) from e

    def _classify_integrity_error(self, code, own_id, error):
        """Tell a taken code apart from any other constraint the write broke"""
        try:
            owner = Product.query.filter_by(code=code).first()
        except SQLAlchemyError as e:
            return StorageError(str(e))
        if owner is not None and owner.id != own_id:
            return DuplicateKeyError('Product', code)
        logger.error(f"Product {code} rejected by the store: {error.orig}")
        return ConstraintViolationError(str(error.orig))
