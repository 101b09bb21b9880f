"""Django ORM implementation of the User repository.

Methods return ``None`` / ``False`` for missing rows instead of raising;
the Service Layer decides which domain exception a miss becomes.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.users.models import User
from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(IUserRepository):
    """Concrete User repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[User]:
        """Retrieve a user by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def exists_by_id(self, id: str) -> bool:
        try:
            return User.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self) -> List[User]:
        return list(User.objects.all())

    @transaction.atomic
    def save(self, entity: User) -> User:
        is_new = entity._state.adding
        entity.save()
        logger.info("user.saved", user_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: User) -> None:
        user_id = str(entity.id)
        entity.delete()
        logger.info("user.deleted", user_id=user_id)
