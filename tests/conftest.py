from __future__ import annotations

from decimal import Decimal

import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product
from modules.users.models import User


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated API account."""
    client = APIClient()
    account = get_user_model().objects.create_user(
        username="testuser", password="testpass123"
    )
    client.force_authenticate(user=account)
    return client


@pytest.fixture()
def make_user():
    counter = {"n": 0}

    def _make(**overrides) -> User:
        counter["n"] += 1
        defaults = {
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@example.com",
        }
        defaults.update(overrides)
        return User.objects.create(**defaults)

    return _make


@pytest.fixture()
def make_category():
    def _make(name: str = "General", description: str = "") -> Category:
        return Category.objects.create(name=name, description=description)

    return _make


@pytest.fixture()
def make_product(make_user):
    def _make(owner: User | None = None, categories=(), **overrides) -> Product:
        defaults = {
            "name": "Widget",
            "price": Decimal("19.99"),
            "description": "A fine widget",
        }
        defaults.update(overrides)
        product = Product.objects.create(owner=owner or make_user(), **defaults)
        product.categories.set(categories)
        return product

    return _make
