"""User repository interface.

The product service only needs existence checks and look-ups by key, so
the contract adds nothing beyond ``IRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.models import User


class IUserRepository(IRepository["User"]):
    """Repository contract for catalog users."""
