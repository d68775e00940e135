"""
Category Repository Implementation
"""

import logging
from typing import List, Optional, Union
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from stockroom.database import db
from stockroom.exceptions import ConstraintViolationError, DuplicateKeyError, StorageError
from stockroom.models import Category
from .base import CategoryRepositoryInterface

logger = logging.getLogger(__name__)


def identity_of(holder) -> Optional[int]:
    """Return the id carried by an entity, or the value itself if it is already an id"""
    if holder is None:
        return None
    if isinstance(holder, int):
        return holder
    return getattr(holder, 'id', None)


class CategoryRepository(CategoryRepositoryInterface):
    """Concrete implementation of category repository"""

    def select_all(self) -> List[Category]:
        """Get all categories ordered by id"""
        try:
            return Category.query.order_by(Category.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting categories: {e}")
            raise StorageError(str(e)) from e

    def select(self, category: Union[Category, int]) -> Optional[Category]:
        """Get category by id"""
        category_id = identity_of(category)
        if category_id is None:
            return None
        try:
            return db.session.get(Category, category_id)
        except SQLAlchemyError as e:
            logger.error(f"Error selecting category {category_id}: {e}")
            raise StorageError(str(e)) from e

    def select_where_code(self, code: str) -> Optional[Category]:
        """Get category by code"""
        try:
            return Category.query.filter_by(code=code).first()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting category with code {code}: {e}")
            raise StorageError(str(e)) from e

    def select_where_name(self, name: str) -> Optional[Category]:
        """Get first category with the given name"""
        try:
            return Category.query.filter_by(name=name).order_by(Category.id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error selecting category with name {name}: {e}")
            raise StorageError(str(e)) from e

    def insert(self, category: Category) -> Category:
        """Create new category; the store assigns its id"""
        code = category.code
        try:
            db.session.add(category)
            db.session.commit()
            return category
        except IntegrityError as e:
            db.session.rollback()
            raise self._classify_integrity_error(code, None, e) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error inserting category {category.code}: {e}")
            raise StorageError(str(e)) from e

    def update(self, old: Category, new: Category) -> bool:
        """Overwrite the row identified by old with the values of new"""
        own_id = identity_of(old)
        try:
            row = self.select(old)
            if not row:
                return False

            for key in ('code', 'name'):
                value = getattr(new, key)
                if value is not None:
                    setattr(row, key, value)

            db.session.commit()
            return True
        except IntegrityError as e:
            db.session.rollback()
            raise self._classify_integrity_error(new.code, own_id, e) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error updating category {identity_of(old)}: {e}")
            raise StorageError(str(e)) from e

    def delete(self, category: Category) -> bool:
        """Delete category by id"""
        try:
            row = self.select(category)
            if not row:
                return False

            db.session.delete(row)
            db.session.commit()
            return True
        except IntegrityError as e:
            db.session.rollback()
            logger.error(f"Delete of category {identity_of(category)} rejected by the store: {e.orig}")
            raise ConstraintViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error deleting category {identity_of(category)}: {e}")
            raise StorageError(str(e)) from e

    def _classify_integrity_error(self, code, own_id, error):
        """Tell a taken code apart from any other constraint the write broke"""
        try:
            owner = Category.query.filter_by(code=code).first()
        except SQLAlchemyError as e:
            return StorageError(str(e))
        if owner is not None and owner.id != own_id:
            return DuplicateKeyError('Category', code)
        logger.error(f"Category {code} rejected by the store: {error.orig}")
        return ConstraintViolationError(str(error.orig))
