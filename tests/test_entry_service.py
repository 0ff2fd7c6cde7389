"""Unit tests for EntryService against an in-memory fake repository."""

from __future__ import annotations

from decimal import Decimal

import pytest

from minhasfinancas.exceptions import BusinessRuleError, MissingIdentifierError
from minhasfinancas.models import Entry, EntryStatus, EntryType, User
from minhasfinancas.services.entry_service import EntryService


class RecordingEntryRepository:
    """Fake repository that records every call it receives."""

    def __init__(self, rows: list[Entry] | None = None):
        self.rows = {row.id: row for row in rows or []}
        self.calls: list[tuple[str, object]] = []
        self._next_id = max(self.rows, default=0) + 1

    def create(self, entry: Entry) -> Entry:
        self.calls.append(("create", entry))
        entry.id = self._next_id
        self._next_id += 1
        self.rows[entry.id] = entry
        return entry

    def update(self, entry: Entry) -> Entry:
        self.calls.append(("update", entry))
        self.rows[entry.id] = entry
        return entry

    def delete(self, entry: Entry) -> None:
        self.calls.append(("delete", entry))
        self.rows.pop(entry.id, None)

    def find_by_id(self, entry_id: int) -> Entry | None:
        self.calls.append(("find_by_id", entry_id))
        return self.rows.get(entry_id)

    def find_by_example(self, example: Entry) -> list[Entry]:
        self.calls.append(("find_by_example", example))
        return list(self.rows.values())

    def called(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)


def build_entry(**overrides) -> Entry:
    fields = dict(
        description="Salário",
        month=1,
        year=2024,
        value=Decimal("10.00"),
        type=EntryType.INCOME,
        user=User(id=1, name="Tester", email="tester@example.com"),
    )
    fields.update(overrides)
    return Entry(**fields)


@pytest.fixture
def repository() -> RecordingEntryRepository:
    return RecordingEntryRepository()


@pytest.fixture
def service(repository) -> EntryService:
    return EntryService(repository)


def test_save_assigns_id_and_pending_status(service, repository):
    entry = build_entry(status=EntryStatus.SETTLED)

    saved = service.save(entry)

    assert saved.id == 1
    assert saved.status == EntryStatus.PENDING
    assert repository.called("create") == 1


def test_save_does_not_reach_repository_when_validation_fails(service, repository):
    entry = build_entry(description="")

    with pytest.raises(BusinessRuleError, match="Informe uma Descrição válida."):
        service.save(entry)

    assert repository.calls == []


def test_update_persists_saved_entry(service, repository):
    entry = build_entry(id=7, status=EntryStatus.PENDING)

    result = service.update(entry)

    assert result is entry
    assert repository.calls == [("update", entry)]


def test_update_requires_an_id(service, repository):
    entry = build_entry()

    with pytest.raises(MissingIdentifierError):
        service.update(entry)

    assert repository.called("update") == 0


def test_update_propagates_validation_error(service, repository):
    entry = build_entry(id=3, value=Decimal("0"))

    with pytest.raises(BusinessRuleError, match="Informe um Valor válido."):
        service.update(entry)

    assert repository.called("update") == 0


def test_missing_identifier_is_not_a_business_rule_error():
    assert not issubclass(MissingIdentifierError, BusinessRuleError)


def test_delete_forwards_to_repository(service, repository):
    entry = build_entry(id=4)

    assert service.delete(entry) is None

    assert repository.calls == [("delete", entry)]


def test_delete_requires_an_id(service, repository):
    with pytest.raises(MissingIdentifierError):
        service.delete(build_entry())

    assert repository.called("delete") == 0


def test_change_status_updates_once(service, monkeypatch):
    entry = build_entry(id=1, status=EntryStatus.PENDING)
    updated: list[Entry] = []

    def fake_update(target: Entry) -> Entry:
        updated.append(target)
        return target

    monkeypatch.setattr(service, "update", fake_update)

    result = service.change_status(entry, EntryStatus.SETTLED)

    assert entry.status == EntryStatus.SETTLED
    assert updated == [entry]
    assert result is entry


def test_change_status_on_unsaved_entry_raises(service, repository):
    entry = build_entry()

    with pytest.raises(MissingIdentifierError):
        service.change_status(entry, EntryStatus.CANCELLED)

    assert repository.called("update") == 0


def test_find_by_id_returns_stored_entry():
    stored = build_entry(id=1)
    service = EntryService(RecordingEntryRepository([stored]))

    assert service.find_by_id(1) is stored


def test_find_by_id_returns_none_when_missing(service):
    assert service.find_by_id(1) is None


def test_search_returns_repository_results_unchanged():
    stored = [build_entry(id=1), build_entry(id=2, description="Aluguel")]
    repository = RecordingEntryRepository(stored)
    service = EntryService(repository)
    example = Entry(description="nada que case")

    result = service.search(example)

    assert result == stored
    assert repository.calls == [("find_by_example", example)]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"description": None}, "Informe uma Descrição válida."),
        ({"description": ""}, "Informe uma Descrição válida."),
        ({"description": "   "}, "Informe uma Descrição válida."),
        ({"month": None}, "Informe um Mês válido."),
        ({"month": 0}, "Informe um Mês válido."),
        ({"month": 13}, "Informe um Mês válido."),
        ({"year": None}, "Informe um Ano válido."),
        ({"year": 202}, "Informe um Ano válido."),
        ({"year": 20240}, "Informe um Ano válido."),
        ({"user": None}, "Informe um Usuário válido."),
        ({"user": User(name="Sem id", email="x@example.com")}, "Informe um Usuário válido."),
        ({"value": None}, "Informe um Valor válido."),
        ({"value": Decimal("0")}, "Informe um Valor válido."),
        ({"value": Decimal("-5.00")}, "Informe um Valor válido."),
        ({"value": Decimal("NaN")}, "Informe um Valor válido."),
        ({"value": Decimal("sNaN")}, "Informe um Valor válido."),
        ({"value": Decimal("Infinity")}, "Informe um Valor válido."),
        ({"value": float("nan")}, "Informe um Valor válido."),
        ({"value": float("inf")}, "Informe um Valor válido."),
        ({"type": None}, "Informe um tipo de Lancamento."),
    ],
)
def test_validate_rejects_invalid_field(service, repository, overrides, message):
    entry = build_entry(**overrides)

    with pytest.raises(BusinessRuleError) as excinfo:
        service.save(entry)

    assert str(excinfo.value) == message
    assert repository.calls == []


def test_validate_reports_first_failing_rule_in_order(service):
    """Walk an empty entry through each rule the way a form would be filled in."""

    entry = Entry()
    steps = [
        ("description", "Salario", "Informe uma Descrição válida."),
        ("month", 1, "Informe um Mês válido."),
        ("year", 2020, "Informe um Ano válido."),
        ("user", User(id=1, name="Tester", email="t@example.com"), "Informe um Usuário válido."),
        ("value", Decimal("1"), "Informe um Valor válido."),
        ("type", EntryType.EXPENSE, "Informe um tipo de Lancamento."),
    ]

    for field, value, message in steps:
        with pytest.raises(BusinessRuleError) as excinfo:
            service.validate(entry)
        assert str(excinfo.value) == message
        setattr(entry, field, value)

    service.validate(entry)


def test_validate_accepts_boundary_values(service):
    service.validate(build_entry(month=12, year=1000, value=Decimal("0.01")))
    service.validate(build_entry(month=1, year=9999, type=EntryType.EXPENSE))


def test_validate_accepts_plain_numbers(service):
    service.validate(build_entry(value=3))
    service.validate(build_entry(value=0.5))
