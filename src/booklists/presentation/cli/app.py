"""Operator commands: secrets, schema management and the API server."""

import asyncio
import logging
import secrets

import typer
import uvicorn
from rich.console import Console

from booklists.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    display_url,
    drop_tables,
    reset_tables,
)
from booklists_config.settings import get_settings

app = typer.Typer(
    name="booklists",
    help="Booklists - curated book lists CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Generate configuration secrets",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


# Environment variable -> bytes of randomness
_SECRETS = {
    "JWT_SECRET_KEY": 64,
    "POSTGRES_PASSWORD": 32,
}


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Print fresh values for the two required secrets.

    Paste them into config/.env (containers) or config/.env.dev (local).
    """
    console.print("\n[bold green]Booklists secrets[/bold green]\n")
    for name, size in _SECRETS.items():
        value = secrets.token_urlsafe(size)
        console.print(f"[cyan]{name}[/cyan]={value}", soft_wrap=True)
    console.print(
        "\n[yellow]Never commit these values to version control.[/yellow]\n",
    )


def _confirm_destructive(force: bool) -> None:
    if force:
        return
    console.print(
        "[bold red]WARNING: This will DELETE ALL DATA in the database![/bold red]"
    )
    if not typer.confirm("Continue?", default=False):
        console.print("Aborted.")
        raise typer.Exit(code=1)


@db_app.callback()
def db_callback() -> None:
    """Show which database the command runs against."""
    logging.basicConfig(level=logging.INFO)
    console.print(f"[dim]Database: {display_url(get_settings().database_url)}[/dim]")


@db_app.command("init")
def db_init() -> None:
    """Create missing tables. Existing tables and data are left untouched."""
    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables."""
    _confirm_destructive(force)
    asyncio.run(drop_tables())
    console.print("[green]All tables dropped.[/green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all tables."""
    _confirm_destructive(force)
    asyncio.run(reset_tables())
    console.print("[green]Database reset.[/green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "booklists.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
