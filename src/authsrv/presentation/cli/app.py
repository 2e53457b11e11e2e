"""authsrv CLI application using Typer.

Operational commands for the authsrv backend: schema management,
reset token housekeeping and secret generation.
"""

import asyncio
import logging
import secrets
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console

from authsrv.infrastructure.persistence.sqlalchemy import (
    Database,
    ResetTokenRepositorySQLAlchemy,
)
from authsrv.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    reset_tables,
)
from authsrv_config.settings import get_settings

app = typer.Typer(
    name="authsrv",
    help="authsrv - account and authentication backend CLI",
    no_args_is_help=True,
)
console = Console()

T = TypeVar("T")

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
tokens_app = typer.Typer(
    name="tokens",
    help="Password reset token housekeeping",
    no_args_is_help=True,
)
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(tokens_app)
app.add_typer(secrets_app)


def _database_display() -> str:
    url = get_settings().database_url
    return url.split("@")[-1] if "@" in url else url


def _run_with_database(operation: Callable[[Database], Awaitable[T]]) -> T:
    async def _run() -> T:
        database = Database.from_settings(get_settings())
        try:
            return await operation(database)
        finally:
            await database.dispose()

    return asyncio.run(_run())


def _confirm_destructive(force: bool) -> None:
    console.print(f"Database: [bold]{_database_display()}[/bold]\n")
    if force:
        return
    console.print("[red]WARNING: This will DELETE ALL DATA in the database![/red]\n")
    if not typer.confirm("Continue?"):
        console.print("Aborted.")
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@db_app.command("init")
def db_init() -> None:
    """Create missing tables and seed the roles (idempotent)."""
    console.print(f"Database: [bold]{_database_display()}[/bold]")
    _run_with_database(create_tables)
    console.print("[green]Database initialized.[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables."""
    _confirm_destructive(force)
    _run_with_database(drop_tables)
    console.print("[green]Database tables dropped.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables and recreate them."""
    _confirm_destructive(force)
    _run_with_database(reset_tables)
    console.print("[green]Database recreated.[/green]")


@tokens_app.command("purge")
def tokens_purge() -> None:
    """Delete expired password reset tokens."""

    async def _purge(database: Database) -> int:
        return await ResetTokenRepositorySQLAlchemy(database).purge_expired()

    count = _run_with_database(_purge)
    console.print(f"Purged [bold]{count}[/bold] expired reset token(s).")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for authsrv configuration.

    - JWT_SECRET_KEY: Secret for signing bearer tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]authsrv Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print("\nGenerated secrets for your [bold].env[/bold] configuration file:\n")

    # 64 random bytes for HS256 signing
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("\n" + "=" * 60)
    console.print("[yellow]Keep these secrets out of version control.[/yellow]")
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n",
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
