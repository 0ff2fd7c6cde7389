"""Command line interface for recording and querying entries."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .exceptions import BusinessRuleError
from .logging_config import setup_logging
from .models import Entry, EntryStatus, EntryType
from .services import user_service

_TYPE_CHOICE = click.Choice([t.value for t in EntryType], case_sensitive=False)
_STATUS_CHOICE = click.Choice([s.value for s in EntryStatus], case_sensitive=False)


class _DecimalParam(click.ParamType):
    name = "decimal"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value).replace(",", "."))
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid amount", param, ctx)


DECIMAL = _DecimalParam()


def _format_entry(entry: Entry) -> str:
    kind = entry.type.value if entry.type else "-"
    status = entry.status.value if entry.status else "-"
    return (
        f"#{entry.id} {entry.month:02d}/{entry.year} {kind:<7} {status:<9} "
        f"{entry.value:>12} {entry.description}"
    )


def _load_entry(ctx: AppContext, entry_id: int) -> Entry:
    entry = ctx.entry_service.find_by_id(entry_id)
    if entry is None:
        raise click.ClickException(f"Entry {entry_id} not found.")
    return entry


@click.group()
@click.pass_context
def cli(click_ctx: click.Context) -> None:
    """Record monthly income and expense entries."""

    if click_ctx.obj is None:
        config = BaseConfig()
        setup_logging(config)
        click_ctx.obj = create_app_context(config)


@cli.command("init-db")
@click.pass_obj
def init_db(ctx: AppContext) -> None:
    """Create the database schema."""

    # Building the context already ran create_all.
    click.echo(f"Database ready: {ctx.config.DATABASE_URL}")


@cli.command("add-user")
@click.argument("name")
@click.argument("email")
@click.pass_obj
def add_user(ctx: AppContext, name: str, email: str) -> None:
    """Register a user."""

    try:
        user = user_service.register_user(ctx.user_repo, name=name, email=email)
    except BusinessRuleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"User #{user.id} created.")


@cli.command("add-entry")
@click.option("--user-id", type=int, required=True)
@click.option("--description", required=True)
@click.option("--month", type=int, required=True)
@click.option("--year", type=int, required=True)
@click.option("--value", type=DECIMAL, required=True)
@click.option("--type", "entry_type", type=_TYPE_CHOICE, required=True)
@click.pass_obj
def add_entry(
    ctx: AppContext,
    user_id: int,
    description: str,
    month: int,
    year: int,
    value: Decimal,
    entry_type: str,
) -> None:
    """Record a new pending entry."""

    entry = Entry(
        description=description,
        month=month,
        year=year,
        value=value,
        type=EntryType(entry_type.upper()),
        user=ctx.user_repo.get_by_id(user_id),
    )
    try:
        saved = ctx.entry_service.save(entry)
    except BusinessRuleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Entry #{saved.id} created.")


@cli.command("search")
@click.option("--user-id", type=int, required=True)
@click.option("--description")
@click.option("--month", type=int)
@click.option("--year", type=int)
@click.option("--type", "entry_type", type=_TYPE_CHOICE)
@click.option("--status", type=_STATUS_CHOICE)
@click.pass_obj
def search(
    ctx: AppContext,
    user_id: int,
    description: Optional[str],
    month: Optional[int],
    year: Optional[int],
    entry_type: Optional[str],
    status: Optional[str],
) -> None:
    """List a user's entries, optionally filtered."""

    example = Entry(
        user_id=user_id,
        description=description,
        month=month,
        year=year,
        type=EntryType(entry_type.upper()) if entry_type else None,
        status=EntryStatus(status.upper()) if status else None,
    )
    entries = ctx.entry_service.search(example)
    if not entries:
        click.echo("No entries found.")
        return
    for entry in entries:
        click.echo(_format_entry(entry))


@cli.command("set-status")
@click.argument("entry_id", type=int)
@click.argument("status", type=_STATUS_CHOICE)
@click.pass_obj
def set_status(ctx: AppContext, entry_id: int, status: str) -> None:
    """Mark an entry as pending, settled or cancelled."""

    entry = _load_entry(ctx, entry_id)
    try:
        updated = ctx.entry_service.change_status(entry, EntryStatus(status.upper()))
    except BusinessRuleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Entry #{updated.id} is now {updated.status.value}.")


@cli.command("delete")
@click.argument("entry_id", type=int)
@click.pass_obj
def delete(ctx: AppContext, entry_id: int) -> None:
    """Delete an entry."""

    entry = _load_entry(ctx, entry_id)
    ctx.entry_service.delete(entry)
    click.echo(f"Entry #{entry_id} deleted.")


def main() -> None:  # pragma: no cover - console script entry point
    cli()
