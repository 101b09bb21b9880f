"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: validation, name stripping, price quantizing, immutability.
- UpdateProductDTO: presence tracking, null handling.
- ReplaceProductDTO: required fields and defaults.
- ProductOutputDTO: from_entity projection and category ordering.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    CreateProductDTO,
    ProductOutputDTO,
    ReplaceProductDTO,
    UpdateProductDTO,
)

pytestmark = pytest.mark.unit

OWNER_ID = uuid.uuid4()


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(owner_id=OWNER_ID, name="Pen", price=Decimal("1.5"))
        assert dto.owner_id == OWNER_ID
        assert dto.name == "Pen"
        assert dto.price == Decimal("1.50")
        assert dto.description is None
        assert dto.category_ids == frozenset()

    def test_accepts_json_like_input(self):
        cat = uuid.uuid4()
        dto = CreateProductDTO.model_validate(
            {
                "owner_id": str(OWNER_ID),
                "name": "Pen",
                "price": 1.5,
                "category_ids": [str(cat), str(cat)],
            }
        )
        assert dto.price == Decimal("1.50")
        assert dto.category_ids == frozenset({cat})

    def test_name_is_stripped(self):
        dto = CreateProductDTO(owner_id=OWNER_ID, name="  Pen  ", price=Decimal("1"))
        assert dto.name == "Pen"

    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(owner_id=OWNER_ID, name="   ", price=Decimal("1"))

    def test_zero_price_is_allowed(self):
        dto = CreateProductDTO(owner_id=OWNER_ID, name="Gift", price=Decimal("0"))
        assert dto.price == Decimal("0.00")

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            CreateProductDTO(owner_id=OWNER_ID, name="Pen", price=Decimal("-0.01"))

    def test_too_many_decimal_places_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(owner_id=OWNER_ID, name="Pen", price=Decimal("1.005"))

    def test_invalid_owner_id_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(owner_id="nope", name="Pen", price=Decimal("1"))

    def test_is_immutable(self):
        dto = CreateProductDTO(owner_id=OWNER_ID, name="Pen", price=Decimal("1"))
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_nothing_set_by_default(self):
        dto = UpdateProductDTO()
        assert dto.scalar_changes() == {}
        assert not dto.is_set("category_ids")

    def test_only_supplied_fields_are_set(self):
        dto = UpdateProductDTO(name="X")
        assert dto.scalar_changes() == {"name": "X"}
        assert dto.is_set("name")
        assert not dto.is_set("price")

    def test_explicit_null_description_is_a_change(self):
        dto = UpdateProductDTO.model_validate({"description": None})
        assert dto.is_set("description")
        assert dto.scalar_changes() == {"description": None}

    def test_explicit_null_name_raises(self):
        with pytest.raises(ValidationError, match="Name cannot be null"):
            UpdateProductDTO.model_validate({"name": None})

    def test_explicit_null_price_raises(self):
        with pytest.raises(ValidationError, match="Price cannot be null"):
            UpdateProductDTO.model_validate({"price": None})

    def test_explicit_null_category_ids_raises(self):
        with pytest.raises(ValidationError, match="category_ids cannot be null"):
            UpdateProductDTO.model_validate({"category_ids": None})

    def test_empty_category_ids_is_set(self):
        dto = UpdateProductDTO.model_validate({"category_ids": []})
        assert dto.is_set("category_ids")
        assert dto.category_ids == frozenset()

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            UpdateProductDTO(price=Decimal("-1"))

    def test_price_quantized(self):
        assert UpdateProductDTO(price=Decimal("2")).price == Decimal("2.00")

    def test_is_immutable(self):
        dto = UpdateProductDTO(name="Test")
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# ReplaceProductDTO
# ===========================================================================


class TestReplaceProductDTO:
    def test_name_and_price_required(self):
        with pytest.raises(ValidationError) as excinfo:
            ReplaceProductDTO.model_validate({})
        missing = {error["loc"][0] for error in excinfo.value.errors()}
        assert missing == {"name", "price"}

    def test_defaults_clear_optional_fields(self):
        dto = ReplaceProductDTO(name="Pen", price=Decimal("3"))
        assert dto.description is None
        assert dto.category_ids == frozenset()


# ===========================================================================
# ProductOutputDTO
# ===========================================================================


def _category(name: str, description: str = "") -> SimpleNamespace:
    return SimpleNamespace(id=uuid.uuid4(), name=name, description=description)


@pytest.fixture()
def owner():
    return SimpleNamespace(id=uuid.uuid4(), name="Ana", email="ana@example.com")


@pytest.fixture()
def product():
    stamp = datetime(2025, 1, 15, 10, 0, tzinfo=timezone.utc)
    return SimpleNamespace(
        id=uuid.uuid4(),
        name="Pen",
        price=Decimal("1.50"),
        description=None,
        created_at=stamp,
        updated_at=stamp,
    )


class TestProductOutputDTO:
    def test_copies_scalars_and_timestamps(self, product, owner):
        dto = ProductOutputDTO.from_entity(product, owner, [])
        assert dto.id == product.id
        assert dto.name == "Pen"
        assert dto.price == Decimal("1.50")
        assert dto.description is None
        assert dto.created_at == product.created_at
        assert dto.updated_at == product.updated_at
        assert dto.categories == []

    def test_nests_owner_summary(self, product, owner):
        dto = ProductOutputDTO.from_entity(product, owner, [])
        assert dto.owner.model_dump() == {
            "id": owner.id,
            "name": "Ana",
            "email": "ana@example.com",
        }

    def test_categories_sorted_by_name(self, product, owner):
        categories = [_category("Zebra"), _category("Apple"), _category("Mango")]
        dto = ProductOutputDTO.from_entity(product, owner, categories)
        assert [c.name for c in dto.categories] == ["Apple", "Mango", "Zebra"]

    def test_order_independent_of_input_order(self, product, owner):
        categories = [_category("Zebra"), _category("Apple"), _category("Mango")]
        forward = ProductOutputDTO.from_entity(product, owner, categories)
        backward = ProductOutputDTO.from_entity(product, owner, reversed(categories))
        assert forward.categories == backward.categories

    def test_equal_names_keep_iteration_order(self, product, owner):
        first, second = _category("Same", "first"), _category("Same", "second")
        dto = ProductOutputDTO.from_entity(product, owner, [first, _category("A"), second])
        assert [c.description for c in dto.categories] == ["", "first", "second"]

    def test_uppercase_sorts_before_lowercase(self, product, owner):
        dto = ProductOutputDTO.from_entity(
            product, owner, [_category("apple"), _category("Banana")]
        )
        assert [c.name for c in dto.categories] == ["Banana", "apple"]

    def test_json_dump(self, product, owner):
        cat = _category("Office", "Supplies")
        data = ProductOutputDTO.from_entity(product, owner, [cat]).model_dump(mode="json")
        assert data["price"] == "1.50"
        assert data["categories"] == [
            {"id": str(cat.id), "name": "Office", "description": "Supplies"}
        ]
        assert data["owner"]["id"] == str(owner.id)
