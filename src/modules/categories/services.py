"""Category resolution for product mutations.

Turns a collection of requested category IDs into the matching
``Category`` rows, or fails before the caller touches anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Set
from uuid import UUID

import structlog

from modules.categories.exceptions import CategoryNotFound

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryResolver:
    """Resolve category IDs against an ``ICategoryRepository``."""

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    def resolve(self, ids: Iterable[UUID | str]) -> Set[Category]:
        """Return the categories for ``ids`` as a set.

        Duplicate IDs collapse into one entry and an empty input yields an
        empty set.  IDs are checked in sorted order so the reported missing
        ID is the same on every call.

        Raises:
            CategoryNotFound: for the first ID with no matching category.
        """
        categories: Set[Category] = set()
        for category_id in sorted({str(i) for i in ids}):
            category = self._repo.get_by_id(category_id)
            if category is None:
                logger.warning("category.not_found", category_id=category_id)
                raise CategoryNotFound(category_id)
            categories.add(category)
        return categories
