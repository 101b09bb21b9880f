"""Product model owned by a user and tagged with categories.

Business rules implemented:
- Every product has exactly one owner, fixed at creation.
- Price cannot be negative (application validator + DB constraint).
- Categories are a many-to-many association kept in ``product_categories``.
- Deletion is physical; join rows go with the product.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root.

    ``owner`` uses ``PROTECT`` so a user that still owns products cannot be
    removed and leave them dangling.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    owner = models.ForeignKey(
        "users.User",
        on_delete=models.PROTECT,
        related_name="products",
    )
    categories = models.ManyToManyField(
        "categories.Category",
        related_name="products",
        blank=True,
        db_table="product_categories",
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return self.name
