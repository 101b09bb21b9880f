"""Django ORM implementation of the Category repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Category]:
        """Retrieve a category by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Category.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def exists_by_id(self, id: str) -> bool:
        try:
            return Category.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self) -> List[Category]:
        return list(Category.objects.all())

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        is_new = entity._state.adding
        entity.save()
        logger.info("category.saved", category_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: Category) -> None:
        category_id = str(entity.id)
        entity.delete()
        logger.info("category.deleted", category_id=category_id)
