"""
Theme configuration CLI commands.

Commands:
- config init: Write a default themekit.yaml
- config check: Run the saved colours through the acceptance gate
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from themekit.core.acceptance import evaluate_theme
from themekit.core.config_loader import (
    get_theme_config_path,
    load_theme_config,
    save_theme_config,
    theme_config_exists,
)
from themekit.core.errors import ThemeConfigError
from themekit.core.ir import ThemeColors, ThemeConfig

config_app = typer.Typer(
    help="Manage the project's themekit.yaml.",
    no_args_is_help=True,
)

console = Console()

ProjectOpt = Annotated[
    Path, typer.Option("--project", "-p", help="Project root containing themekit.yaml")
]


@config_app.command("init")
def config_init(
    project: ProjectOpt = Path("."),
    primary: Annotated[str | None, typer.Option("--primary", help="Primary colour")] = None,
    secondary: Annotated[str | None, typer.Option("--secondary", help="Secondary colour")] = None,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing file")] = False,
) -> None:
    """Create themekit.yaml with the default colours."""
    if theme_config_exists(project) and not force:
        console.print(
            f"[yellow]{get_theme_config_path(project)} already exists (use --force)[/yellow]"
        )
        raise typer.Exit(code=1)

    config = ThemeConfig()
    config = config.model_copy(
        update={
            "colors": ThemeColors(
                primary=primary or config.defaults.primary,
                secondary=secondary or config.defaults.secondary,
            )
        }
    )
    path = save_theme_config(project, config)
    console.print(f"[green]Created {path}[/green]")


@config_app.command("check")
def config_check(
    project: ProjectOpt = Path("."),
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Check the saved theme against the acceptance gate.

    Exits 1 when the theme would be rejected.
    """
    try:
        config = load_theme_config(project, use_defaults=False)
    except ThemeConfigError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1)

    _, acceptance = evaluate_theme(
        config.colors, min_pass_rate=config.min_pass_rate, defaults=config.defaults
    )

    if output_json:
        typer.echo(json.dumps(acceptance.model_dump(mode="json", by_alias=True), indent=2))
    elif acceptance.accepted:
        console.print(
            f"[green]Theme accepted[/green] - pass rate {acceptance.pass_rate}%, "
            f"pair {acceptance.level}"
        )
    else:
        console.print("[red]Theme rejected[/red]")
        for reason in acceptance.reasons:
            console.print(f"  - {reason}")

    if not acceptance.accepted:
        raise typer.Exit(code=1)
