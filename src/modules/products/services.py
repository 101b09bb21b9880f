"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected repositories and returning
``ProductOutputDTO`` projections.

Business rules enforced here:
- A product's owner must exist before it is created.
- Every requested category must exist; resolution happens before any
  mutation, so a failed create/update never writes anything.
- Patch updates overwrite only the supplied scalar fields, while a
  supplied category set always replaces the stored one.
- Deletion is physical.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryNotFound
from modules.categories.services import CategoryResolver
from modules.products.dtos import ProductOutputDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.users.exceptions import UserNotFound

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.dtos import (
        CreateProductDTO,
        ReplaceProductDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives the product, user and category repositories via constructor
    injection (DIP).
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        user_repository: IUserRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = product_repository
        self._users = user_repository
        self._categories = category_repository
        self._resolver = CategoryResolver(category_repository)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Create a product for an existing owner.

        Raises:
            UserNotFound: if the owner does not exist.
            CategoryNotFound: if any requested category does not exist.
        """
        log = logger.bind(owner_id=str(dto.owner_id))

        owner = self._users.get_by_id(str(dto.owner_id))
        if owner is None:
            log.warning("product.owner_not_found")
            raise UserNotFound(dto.owner_id)

        categories = self._resolver.resolve(dto.category_ids)

        product = Product(
            name=dto.name,
            price=dto.price,
            description=dto.description,
            owner=owner,
        )
        product = self._repo.save(product, categories=categories)
        log.info(
            "product.created",
            product_id=str(product.id),
            category_count=len(categories),
        )
        return self._project(product, categories)

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> ProductOutputDTO:
        """Apply a partial update.

        Supplied scalars overwrite stored values; omitted ones are kept.
        A supplied ``category_ids`` replaces the whole category set.

        Raises:
            ProductNotFound: if the product does not exist.
            CategoryNotFound: if any requested category does not exist.
        """
        product = self._get_or_raise(id)
        log = logger.bind(product_id=str(id))

        categories: Optional[set[Category]] = None
        if dto.is_set("category_ids"):
            categories = self._resolver.resolve(dto.category_ids)

        changes = dto.scalar_changes()
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product, categories=categories)
        log.info(
            "product.updated",
            fields=sorted(changes),
            categories_replaced=categories is not None,
        )
        return self._project(product, categories)

    @transaction.atomic
    def replace_product(self, id: str, dto: ReplaceProductDTO) -> ProductOutputDTO:
        """Overwrite every mutable field of a product.

        The owner is immutable and is never touched.

        Raises:
            ProductNotFound: if the product does not exist.
            CategoryNotFound: if any requested category does not exist.
        """
        product = self._get_or_raise(id)

        categories = self._resolver.resolve(dto.category_ids)

        product.name = dto.name
        product.price = dto.price
        product.description = dto.description

        product = self._repo.save(product, categories=categories)
        logger.info("product.replaced", product_id=str(id))
        return self._project(product, categories)

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Physically delete a product and its category links.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductOutputDTO]:
        """Return every product."""
        return [self._project(product) for product in self._repo.list()]

    def get_product(self, id: str) -> ProductOutputDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=str(id))
        return self._project(product)

    def list_products_by_user(self, user_id: str) -> List[ProductOutputDTO]:
        """Return the products owned by a user (possibly none).

        Raises:
            UserNotFound: if the user does not exist.
        """
        if not self._users.exists_by_id(str(user_id)):
            raise UserNotFound(user_id)
        return [
            self._project(product)
            for product in self._repo.list_by_owner(str(user_id))
        ]

    def list_products_by_category(self, category_id: str) -> List[ProductOutputDTO]:
        """Return the products tagged with a category.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        if not self._categories.exists_by_id(str(category_id)):
            raise CategoryNotFound(category_id)
        return [
            self._project(product)
            for product in self._repo.list_by_category(str(category_id))
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Product:
        product = self._repo.get_by_id(str(id))
        if product is None:
            raise ProductNotFound(id)
        return product

    @staticmethod
    def _project(
        product: Product, categories: Optional[Iterable[Category]] = None
    ) -> ProductOutputDTO:
        if categories is None:
            categories = product.categories.all()
        return ProductOutputDTO.from_entity(product, product.owner, categories)
