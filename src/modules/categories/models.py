"""Product category.

Categories are attached to products through the ``product_categories``
join table declared on ``Product.categories``.  The product service only
reads them.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    name = models.CharField(max_length=120)
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
