"""Shared domain error taxonomy.

Module-level exceptions (``ProductNotFound``, ``CategoryNotFound`` ...)
extend these bases so the API layer can translate any of them into an
HTTP response without knowing the concrete module.
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for every error raised by the Service Layer."""

    code = "domain_error"


class NotFound(DomainError):
    """A referenced entity does not exist.

    Carries the entity kind and the identifier that failed to resolve.
    """

    code = "not_found"
    entity = "Entity"

    def __init__(self, id: Any, entity: str | None = None) -> None:
        if entity is not None:
            self.entity = entity
        self.id = id
        super().__init__(f"{self.entity} {id} not found.")


class Conflict(DomainError):
    """A uniqueness or state conflict prevents the operation."""

    code = "conflict"


class BusinessRuleViolation(DomainError):
    """A domain rule rejected the operation (e.g. an invalid price)."""

    code = "business_rule_violation"
