"""
Inventory Service - Validation and orchestration between callers and repositories
"""

from typing import Optional
import logging

from stockroom.exceptions import ConstraintViolationError, DuplicateKeyError, StorageError
from stockroom.models import Category, Product
from stockroom.repositories import (
    CategoryRepository, CategoryRepositoryInterface,
    ProductRepository, ProductRepositoryInterface
)
from stockroom.repositories.category_repository import identity_of
from .results import ServiceResult

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class InventoryService:
    """Business rules for categories and products.

    Every operation returns a ServiceResult. Repository storage failures
    are logged and reported as STORAGE_ERROR; they never escape the service.
    """

    def __init__(self, category_repo: Optional[CategoryRepositoryInterface] = None,
                 product_repo: Optional[ProductRepositoryInterface] = None):
        self.category_repo = category_repo or CategoryRepository()
        self.product_repo = product_repo or ProductRepository()

    # Categories

    def add_category(self, category: Category) -> ServiceResult:
        """Add a category, rejecting missing fields and duplicate codes"""
        if category is None:
            return ServiceResult.validation_failed("Category is required")
        if _is_blank(category.code):
            return ServiceResult.validation_failed("Category code is required")
        if _is_blank(category.name):
            return ServiceResult.validation_failed("Category name is required")

        try:
            if self.category_repo.select_where_code(category.code) is not None:
                logger.info(f"Rejected category {category.code}: code already exists")
                return ServiceResult.validation_failed(
                    f"Category with code {category.code} already exists")

            created = self.category_repo.insert(category)
            logger.info(f"Category {created.code} added with id {created.id}")
            return ServiceResult.ok(created)

        except DuplicateKeyError as e:
            logger.warning(f"Category insert hit unique index: {e}")
            return ServiceResult.validation_failed(str(e))
        except ConstraintViolationError as e:
            return ServiceResult.validation_failed(f"Rejected by the store: {e}")
        except StorageError as e:
            logger.error(f"Error adding category {category.code}: {e}")
            return ServiceResult.storage_error(str(e))

    def modify_category(self, old: Category, new: Category) -> ServiceResult:
        """Overwrite old with new; the new code must not belong to another category"""
        if old is None or new is None:
            return ServiceResult.validation_failed("Old and new category are required")
        if _is_blank(new.code) or _is_blank(new.name):
            return ServiceResult.validation_failed("Category code and name are required")

        try:
            owner = self.category_repo.select_where_code(new.code)
            if owner is not None and owner.id != identity_of(old):
                return ServiceResult.validation_failed(
                    f"Category with code {new.code} already exists")

            if not self.category_repo.update(old, new):
                return ServiceResult.not_found("Category not found")

            logger.info(f"Category {identity_of(old)} modified")
            return ServiceResult.ok(self.category_repo.select(old))

        except DuplicateKeyError as e:
            return ServiceResult.validation_failed(str(e))
        except ConstraintViolationError as e:
            return ServiceResult.validation_failed(f"Rejected by the store: {e}")
        except StorageError as e:
            logger.error(f"Error modifying category {identity_of(old)}: {e}")
            return ServiceResult.storage_error(str(e))

    def drop_category(self, category: Category) -> ServiceResult:
        """Delete a category that no product belongs to"""
        if category is None:
            return ServiceResult.validation_failed("Category is required")

        try:
            products = self.product_repo.select_where_category(category)
            if products:
                logger.info(
                    f"Refused to drop category {identity_of(category)}: "
                    f"{len(products)} product(s) still reference it")
                return ServiceResult.validation_failed(
                    f"Category has {len(products)} product(s) and cannot be removed")

            if not self.category_repo.delete(category):
                return ServiceResult.not_found("Category not found")

            logger.info(f"Category {identity_of(category)} dropped")
            return ServiceResult.ok()

        except ConstraintViolationError as e:
            return ServiceResult.validation_failed(f"Rejected by the store: {e}")
        except StorageError as e:
            logger.error(f"Error dropping category {identity_of(category)}: {e}")
            return ServiceResult.storage_error(str(e))

    def find_all_categories(self) -> ServiceResult:
        try:
            return ServiceResult.ok(self.category_repo.select_all())
        except StorageError as e:
            logger.error(f"Error listing categories: {e}")
            return ServiceResult.storage_error(str(e))

    def find_category_by_code(self, code: str) -> ServiceResult:
        if code is None:
            return ServiceResult.not_found("No code given")
        try:
            category = self.category_repo.select_where_code(code)
        except StorageError as e:
            logger.error(f"Error finding category with code {code}: {e}")
            return ServiceResult.storage_error(str(e))
        if category is None:
            return ServiceResult.not_found(f"Category with code {code} not found")
        return ServiceResult.ok(category)

    def find_category_by_name(self, name: str) -> ServiceResult:
        if name is None:
            return ServiceResult.not_found("No name given")
        try:
            category = self.category_repo.select_where_name(name)
        except StorageError as e:
            logger.error(f"Error finding category with name {name}: {e}")
            return ServiceResult.storage_error(str(e))
        if category is None:
            return ServiceResult.not_found(f"Category with name {name} not found")
        return ServiceResult.ok(category)

    # Products

    def add_product(self, product: Product) -> ServiceResult:
        """Add a product with a unique code whose category exists.

        Nothing is written unless every check passes.
        """
        if product is None:
            return ServiceResult.validation_failed("Product is required")
        if _is_blank(product.code):
            return ServiceResult.validation_failed("Product code is required")
        if _is_blank(product.name):
            return ServiceResult.validation_failed("Product name is required")

        try:
            if self.product_repo.select_where_code(product.code) is not None:
                logger.info(f"Rejected product {product.code}: code already exists")
                return ServiceResult.validation_failed(
                    f"Product with code {product.code} already exists")

            if self.category_repo.select(product.category_id) is None:
                logger.info(
                    f"Rejected product {product.code}: category {product.category_id} does not exist")
                return ServiceResult.validation_failed(
                    f"Category {product.category_id} does not exist")

            created = self.product_repo.insert(product)
            logger.info(f"Product {created.code} added with id {created.id}")
            return ServiceResult.ok(created)

        except DuplicateKeyError as e:
            logger.warning(f"Product insert hit unique index: {e}")
            return ServiceResult.validation_failed(str(e))
        except ConstraintViolationError as e:
            return ServiceResult.validation_failed(f"Rejected by the store: {e}")
        except StorageError as e:
            logger.error(f"Error adding product {product.code}: {e}")
            return ServiceResult.storage_error(str(e))

    def modify_product(self, old: Product, new: Product) -> ServiceResult:
        """Overwrite old with new, keeping codes unique and the category valid"""
        if old is None or new is None:
            return ServiceResult.validation_failed("Old and new product are required")
        if _is_blank(new.code) or _is_blank(new.name):
            return ServiceResult.validation_failed("Product code and name are required")

        try:
            owner = self.product_repo.select_where_code(new.code)
            if owner is not None and owner.id != identity_of(old):
                return ServiceResult.validation_failed(
                    f"Product with code {new.code} already exists")

            if new.category_id is not None and self.category_repo.select(new.category_id) is None:
                return ServiceResult.validation_failed(
                    f"Category {new.category_id} does not exist")

            if not self.product_repo.update(old, new):
                return ServiceResult.not_found("Product not found")

            logger.info(f"Product {identity_of(old)} modified")
            return ServiceResult.ok(self.product_repo.select(old))

        except DuplicateKeyError as e:
            return ServiceResult.validation_failed(str(e))
        except ConstraintViolationError as e:
            return ServiceResult.validation_failed(f"Rejected by the store: {e}")
        except StorageError as e:
            logger.error(f"Error modifying product {identity_of(old)}: {e}")
            return ServiceResult.storage_error(str(e))

    def drop_product(self, product: Product) -> ServiceResult:
        if product is None:
            return ServiceResult.validation_failed("Product is required")
        try:
            if not self.product_repo.delete(product):
                return ServiceResult.not_found("Product not found")
        except ConstraintViolationError as e:
            return ServiceResult.validation_failed(f"Rejected by the store: {e}")
        except StorageError as e:
            logger.error(f"Error dropping product {identity_of(product)}: {e}")
            return ServiceResult.storage_error(str(e))

        logger.info(f"Product {identity_of(product)} dropped")
        return ServiceResult.ok()

    def find_all_products(self) -> ServiceResult:
        try:
            return ServiceResult.ok(self.product_repo.select_all())
        except StorageError as e:
            logger.error(f"Error listing products: {e}")
            return ServiceResult.storage_error(str(e))

    def find_product_by_code(self, code: str) -> ServiceResult:
        if code is None:
            return ServiceResult.not_found("No code given")
        try:
            product = self.product_repo.select_where_code(code)
        except StorageError as e:
            logger.error(f"Error finding product with code {code}: {e}")
            return ServiceResult.storage_error(str(e))
        if product is None:
            return ServiceResult.not_found(f"Product with code {code} not found")
        return ServiceResult.ok(product)

    def find_product_by_name(self, name: str) -> ServiceResult:
        if name is None:
            return ServiceResult.not_found("No name given")
        try:
            product = self.product_repo.select_where_name(name)
        except StorageError as e:
            logger.error(f"Error finding product with name {name}: {e}")
            return ServiceResult.storage_error(str(e))
        if product is None:
            return ServiceResult.not_found(f"Product with name {name} not found")
        return ServiceResult.ok(product)

    def find_product_by_min_stock(self, threshold: int) -> ServiceResult:
        """Products with stock >= threshold; a threshold <= 0 is an invalid query"""
        if threshold is None or threshold <= 0:
            return ServiceResult.validation_failed("Minimum stock must be greater than zero")
        try:
            return ServiceResult.ok(self.product_repo.select_where_min_stock(threshold))
        except StorageError as e:
            logger.error(f"Error finding products with stock >= {threshold}: {e}")
            return ServiceResult.storage_error(str(e))

    # Category-product relationship

    def find_products_by_category(self, category: Category) -> ServiceResult:
        """Products belonging to category; only its id is used"""
        if category is None:
            return ServiceResult.validation_failed("Category is required")
        try:
            return ServiceResult.ok(self.product_repo.select_where_category(category))
        except StorageError as e:
            logger.error(f"Error finding products of category {identity_of(category)}: {e}")
            return ServiceResult.storage_error(str(e))

    def find_product_with_category(self, product: Product) -> ServiceResult:
        """Load a product and attach its full category record.

        An orphaned product (category row gone) is returned without enrichment.
        """
        if product is None:
            return ServiceResult.validation_failed("Product is required")
        try:
            found = self.product_repo.select(product)
            if found is None:
                return ServiceResult.not_found("Product not found")

            category = self.category_repo.select(found.category_id)
            if category is None:
                logger.warning(f"Product {found.code} references missing category {found.category_id}")
                return ServiceResult.ok(found)

            # Detached copy; the session's row stays id-only for other lookups
            enriched = Product(
                id=found.id, code=found.code, name=found.name,
                stock=found.stock, price=found.price, category_id=found.category_id
            )
            enriched.category = category
            return ServiceResult.ok(enriched)

        except StorageError as e:
            logger.error(f"Error finding product {identity_of(product)} with category: {e}")
            return ServiceResult.storage_error(str(e))
