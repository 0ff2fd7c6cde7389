"""Validation and lifecycle management for financial entries."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

from ..domain.repositories.entry import EntryRepository
from ..exceptions import BusinessRuleError, MissingIdentifierError
from ..logging_config import get_logger
from ..models.entry import Entry
from ..models.enums import EntryStatus

logger = get_logger(__name__)


class EntryService:
    """Orchestrates entry persistence around the validation rules."""

    def __init__(self, repository: EntryRepository):
        self.repository = repository

    def save(self, entry: Entry) -> Entry:
        """Validate and store a new entry; new entries always start as pending."""

        self.validate(entry)
        entry.status = EntryStatus.PENDING
        saved = self.repository.create(entry)
        logger.info("Entry created", extra={"entry_id": saved.id})
        return saved

    def update(self, entry: Entry) -> Entry:
        """Validate and store changes to an already persisted entry."""

        _require_id(entry)
        self.validate(entry)
        updated = self.repository.update(entry)
        logger.info("Entry updated", extra={"entry_id": updated.id})
        return updated

    def delete(self, entry: Entry) -> None:
        _require_id(entry)
        self.repository.delete(entry)
        logger.info("Entry deleted", extra={"entry_id": entry.id})

    def change_status(self, entry: Entry, status: EntryStatus) -> Entry:
        """Move the entry to ``status`` and persist it through :meth:`update`."""

        previous = entry.status
        entry.status = status
        updated = self.update(entry)
        logger.info(
            "Entry status changed",
            extra={"entry_id": entry.id, "from_status": previous, "to_status": status},
        )
        return updated

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        return self.repository.find_by_id(entry_id)

    def search(self, example: Entry) -> list[Entry]:
        """Return the entries matching the non-null fields of ``example``."""

        return self.repository.find_by_example(example)

    def validate(self, entry: Entry) -> None:
        """Check the entry against the business rules, stopping at the first failure.

        Raises:
            BusinessRuleError: with the user-facing message of the rule that failed
        """

        try:
            _check(entry)
        except BusinessRuleError as exc:
            logger.debug("Entry rejected: %s", exc)
            raise


def _require_id(entry: Entry) -> None:
    if entry.id is None:
        raise MissingIdentifierError("Entry must be saved before it can be changed.")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_positive_amount(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return False
    # NaN and infinities never count as an amount.
    return amount.is_finite() and amount > 0


def _check(entry: Entry) -> None:
    if entry.description is None or not entry.description.strip():
        raise BusinessRuleError("Informe uma Descrição válida.")

    if not _is_int(entry.month) or not 1 <= entry.month <= 12:
        raise BusinessRuleError("Informe um Mês válido.")

    if not _is_int(entry.year) or not 1000 <= entry.year <= 9999:
        raise BusinessRuleError("Informe um Ano válido.")

    if entry.user is None or entry.user.id is None:
        raise BusinessRuleError("Informe um Usuário válido.")

    if not _is_positive_amount(entry.value):
        raise BusinessRuleError("Informe um Valor válido.")

    if entry.type is None:
        raise BusinessRuleError("Informe um tipo de Lancamento.")
