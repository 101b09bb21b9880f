"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain exception.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.categories.models import Category
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _queryset() -> models.QuerySet[Product]:
        # Projection reads owner and categories for every row.
        return Product.objects.select_related("owner").prefetch_related("categories")

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def exists_by_id(self, id: str) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self) -> List[Product]:
        return list(self._queryset())

    def list_by_owner(self, owner_id: str) -> List[Product]:
        return list(self._queryset().filter(owner_id=owner_id))

    def list_by_category(self, category_id: str) -> List[Product]:
        return list(self._queryset().filter(categories__id=category_id).distinct())

    @transaction.atomic
    def save(
        self, entity: Product, categories: Optional[Iterable[Category]] = None
    ) -> Product:
        """Persist (create or update) a product and, optionally, its categories."""
        is_new = entity._state.adding
        entity.save()
        if categories is not None:
            entity.categories.set(list(categories))
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            owner_id=str(entity.owner_id),
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        """Physically remove a product together with its category links."""
        product_id = str(entity.id)
        entity.categories.clear()
        entity.delete()
        logger.info("product.deleted", product_id=product_id)
