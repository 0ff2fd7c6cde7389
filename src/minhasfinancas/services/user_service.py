"""User registration helpers."""

from __future__ import annotations

from ..domain.repositories.user import UserRepository
from ..exceptions import BusinessRuleError
from ..logging_config import get_logger
from ..models.user import User

logger = get_logger(__name__)


def validate_email(repository: UserRepository, email: str) -> None:
    """Reject e-mail addresses that already belong to a user."""

    if repository.exists_by_email(email):
        raise BusinessRuleError("Já existe um usuário cadastrado com este email.")


def register_user(repository: UserRepository, *, name: str, email: str) -> User:
    """Create a user after checking name, e-mail and e-mail uniqueness."""

    name = (name or "").strip()
    email = (email or "").strip()
    if not name:
        raise BusinessRuleError("Informe um Nome válido.")
    if not email:
        raise BusinessRuleError("Informe um Email válido.")
    validate_email(repository, email)

    user = repository.create(User(name=name, email=email))
    logger.info("User registered", extra={"user_id": user.id})
    return user
