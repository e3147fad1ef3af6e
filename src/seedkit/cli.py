from __future__ import annotations

import logging
from typing import List, Optional

import typer

from seedkit import __version__
from seedkit.config import get_settings
from seedkit.exceptions import ConfigurationError, NotFoundError, SeederError
from seedkit.logging_setup import configure_logging
from seedkit.seeder import SeederDispatcher, SeederRegistry, load_registry

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="seedkit CLI")

_TYPE_HELP = "Type of seeder to run (all, or specific seeder name)"


def _setup_logging() -> None:
    try:
        configure_logging(get_settings())
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _load(path: Optional[str]) -> SeederRegistry:
    try:
        return load_registry(path or get_settings().REGISTRY)
    except SeederError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _dispatch(
    registry: SeederRegistry, app_name: Optional[str], seed_type: Optional[str]
) -> None:
    dispatcher = SeederDispatcher(registry, app_name=app_name or get_settings().APP_NAME)
    try:
        dispatcher.execute(seed_type)
    except NotFoundError:
        # Diagnostic and usage were already written by the dispatcher.
        raise typer.Exit(1)
    except SeederError as e:
        logger.error(f"Seeding failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def run(
    seed_type: Optional[str] = typer.Option(None, "--type", help=_TYPE_HELP),
    registry: Optional[str] = typer.Option(
        None, help="Registry import path module:attr (default: from settings)"
    ),
    app_name: Optional[str] = typer.Option(
        None, help="Display name for usage text (default: from settings)"
    ),
) -> None:
    _setup_logging()
    _dispatch(_load(registry), app_name, seed_type)


@app.command("list")
def list_seeders(
    registry: Optional[str] = typer.Option(
        None, help="Registry import path module:attr (default: from settings)"
    ),
) -> None:
    _setup_logging()
    for name in _load(registry).list_names():
        typer.echo(name)


@app.command()
def version() -> None:
    typer.echo(__version__)


def build_app(registry: SeederRegistry, app_name: Optional[str] = None) -> typer.Typer:
    """
    Single-command app for a caller's own seed script.

    Usage::

        registry = SeederRegistry()
        registry.register("users", seed_users)
        run_cli(registry, "my-app seeder")
    """
    seed_app = typer.Typer(add_completion=False, help="Database seeder")

    @seed_app.command()
    def seed(
        seed_type: Optional[str] = typer.Option(None, "--type", help=_TYPE_HELP),
    ) -> None:
        _setup_logging()
        _dispatch(registry, app_name, seed_type)

    return seed_app


def run_cli(
    registry: SeederRegistry,
    app_name: Optional[str] = None,
    args: Optional[List[str]] = None,
) -> None:
    """Parse ``args`` (default: ``sys.argv``) and exit with the dispatch status."""
    build_app(registry, app_name)(args=args, prog_name=app_name)


def main() -> None:
    app()
