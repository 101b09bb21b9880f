"""Product repository interface.

Extends ``IRepository[Product]`` with the foreign-key look-ups used by the
product service (by owner, by category) and a ``save`` that also carries
the product's category association.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def save(
        self, entity: Product, categories: Optional[Iterable[Category]] = None
    ) -> Product:
        """Persist a product.

        When ``categories`` is given it replaces the product's category set;
        ``None`` leaves the stored association untouched.
        """

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> List[Product]:
        """List the products owned by a user."""

    @abstractmethod
    def list_by_category(self, category_id: str) -> List[Product]:
        """List the products tagged with a category."""
