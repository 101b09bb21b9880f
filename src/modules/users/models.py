"""Catalog user (product owner).

Users are referenced by products through ``Product.owner`` and are never
mutated by the product service.  They are distinct from
``django.contrib.auth`` accounts, which only authenticate API calls.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class User(BaseModel):
    """Owner of zero or more products."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "users"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
