"""Product domain exceptions.

Raised by the Service Layer; the API exception handler translates them
into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class ProductNotFound(NotFound):
    """The requested product does not exist."""

    entity = "Product"
