"""Category domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class CategoryNotFound(NotFound):
    """A requested category does not exist."""

    entity = "Category"
