"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial (patch) updates.
- ``ReplaceProductDTO``: input for full updates.
- ``ProductOutputDTO``: response projection with nested owner and categories.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterable, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.products.models import Product
    from modules.users.models import User

CENT = Decimal("0.01")
PATCHABLE_FIELDS = ("name", "price", "description")


def _clean_name(value: Optional[str]) -> str:
    if value is None:
        raise ValueError("Name cannot be null.")
    value = value.strip()
    if not value:
        raise ValueError("Name must not be empty.")
    return value


def _clean_price(value: Optional[Decimal]) -> Decimal:
    if value is None:
        raise ValueError("Price cannot be null.")
    if value < 0:
        raise ValueError("Price cannot be negative.")
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string (surrounding whitespace stripped).
    - ``price`` is a non-negative Decimal, stored with two decimal places.
    """

    model_config = ConfigDict(frozen=True)

    owner_id: UUID
    name: str = Field(max_length=255)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    description: Optional[str] = None
    category_ids: FrozenSet[UUID] = frozenset()

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _clean_name(v)

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        return _clean_price(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for partial product updates.

    Every field is optional.  Presence is tracked by ``model_fields_set``,
    so an omitted field and one sent as ``null`` are told apart: only
    ``description`` may be cleared with ``null``.
    ``category_ids``, when present, replaces the whole category set.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, max_length=255)
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    description: Optional[str] = None
    category_ids: Optional[FrozenSet[UUID]] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: Optional[str]) -> str:
        return _clean_name(v)

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Optional[Decimal]) -> Decimal:
        return _clean_price(v)

    @field_validator("category_ids")
    @classmethod
    def category_ids_must_not_be_null(
        cls, v: Optional[FrozenSet[UUID]]
    ) -> FrozenSet[UUID]:
        if v is None:
            raise ValueError("category_ids cannot be null; send [] to clear.")
        return v

    def is_set(self, field: str) -> bool:
        """Return ``True`` when ``field`` was supplied by the caller."""
        return field in self.model_fields_set

    def scalar_changes(self) -> Dict[str, Any]:
        """The supplied scalar fields and their new values."""
        return {
            field: getattr(self, field)
            for field in PATCHABLE_FIELDS
            if self.is_set(field)
        }


class ReplaceProductDTO(BaseModel):
    """Immutable DTO for full product updates.

    ``name`` and ``price`` are required; an omitted ``description`` clears
    it and an omitted ``category_ids`` clears the category set.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=255)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    description: Optional[str] = None
    category_ids: FrozenSet[UUID] = frozenset()

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _clean_name(v)

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        return _clean_price(v)


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OwnerSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    email: str


class CategorySummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    price: Decimal
    description: Optional[str]
    owner: OwnerSummaryDTO
    categories: List[CategorySummaryDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls,
        product: Product,
        owner: User,
        categories: Iterable[Category],
    ) -> ProductOutputDTO:
        """Project a product, its owner and its categories.

        Categories are sorted by name; ``sorted`` is stable, so equal names
        keep the order in which ``categories`` yielded them.
        """
        summaries = [
            CategorySummaryDTO(
                id=category.id,
                name=category.name,
                description=category.description,
            )
            for category in categories
        ]
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            owner=OwnerSummaryDTO(id=owner.id, name=owner.name, email=owner.email),
            categories=sorted(summaries, key=lambda c: c.name),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
