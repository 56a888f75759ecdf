"""
themekit CLI.

- theme.py: palette, audit, stylesheet and token commands
- config.py: themekit.yaml management
"""

from __future__ import annotations

import logging
import os
import platform
from typing import Annotated

import typer

from themekit._version import __version__
from themekit.cli.config import config_app
from themekit.cli.theme import theme_app

app = typer.Typer(
    help="themekit - accessible colour themes from brand seed colours.",
    no_args_is_help=True,
)
app.add_typer(theme_app, name="theme")
app.add_typer(config_app, name="config")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"themekit {__version__} (Python {platform.python_version()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from --verbose or the LOG_LEVEL environment variable."""
    level_name = "DEBUG" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    configure_logging(verbose)


def main() -> None:
    app()


__all__ = ["app", "main", "theme_app", "config_app", "version_callback"]
