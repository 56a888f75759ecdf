"""
Theme CLI commands.

Commands:
- theme build: Build the full token bundle
- theme audit: Run the critical-pairing contrast audit
- theme validate-pair: Score a primary/secondary pair
- theme css: Render the theme stylesheet
- theme tokens: Export DTCG tokens.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from themekit.core.config_loader import load_theme_config
from themekit.core.contrast import run_contrast_audit
from themekit.core.dom import InMemoryStyleTarget, apply_theme
from themekit.core.dtcg_export import export_dtcg_file, generate_dtcg_tokens
from themekit.core.errors import ThemeConfigError
from themekit.core.ir import ContrastLevel, ContrastResult, ThemeColors, ThemeConfig, ThemeTokens
from themekit.core.pair_validator import validate_color_pair
from themekit.core.theme_builder import build_theme_tokens
from themekit.core.theme_css import tokens_to_css

theme_app = typer.Typer(
    help="Generate and audit colour themes from seed colours.",
    no_args_is_help=True,
)

console = Console()

PrimaryArg = Annotated[
    str | None, typer.Argument(help="Primary seed colour (#RRGGBB); defaults to themekit.yaml")
]
SecondaryArg = Annotated[
    str | None, typer.Argument(help="Secondary seed colour (#RRGGBB); defaults to themekit.yaml")
]
DestructiveOpt = Annotated[
    str | None, typer.Option("--destructive", "-d", help="Destructive (error) colour")
]
WarningOpt = Annotated[str | None, typer.Option("--warning", "-w", help="Warning colour")]
ProjectOpt = Annotated[
    Path, typer.Option("--project", "-p", help="Project root containing themekit.yaml")
]
JsonOpt = Annotated[bool, typer.Option("--json", help="Output as JSON")]


# =============================================================================
# Helpers
# =============================================================================


def _load_config(project: Path) -> ThemeConfig:
    try:
        return load_theme_config(project)
    except ThemeConfigError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1)


def _resolve_colors(
    config: ThemeConfig,
    primary: str | None,
    secondary: str | None,
    destructive: str | None,
    warning: str | None,
) -> ThemeColors:
    """Command-line colours override the ones saved in themekit.yaml."""
    saved = config.colors
    return ThemeColors(
        primary=primary or saved.primary,
        secondary=secondary or saved.secondary,
        destructive=destructive or saved.destructive,
        warning=warning or saved.warning,
    )


def _build(
    project: Path,
    primary: str | None,
    secondary: str | None,
    destructive: str | None,
    warning: str | None,
) -> tuple[ThemeConfig, ThemeTokens]:
    config = _load_config(project)
    colors = _resolve_colors(config, primary, secondary, destructive, warning)
    return config, build_theme_tokens(colors, config.defaults)


def _dump(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


def _level_style(result: ContrastResult) -> str:
    if result.level == ContrastLevel.AAA:
        return "green"
    if result.level == ContrastLevel.AA:
        return "cyan"
    return "red"


def _print_palettes(tokens: ThemeTokens) -> None:
    table = Table(title="Palettes")
    table.add_column("Stop", justify="right")
    for role, _ in tokens.colors.items():
        table.add_column(role.value.title())

    for stop, _ in tokens.colors.primary.items():
        row = [str(stop.value)]
        for _, palette in tokens.colors.items():
            color = palette[stop]
            row.append(f"[on {color}]   [/] {color}")
        table.add_row(*row)
    console.print(table)


def _print_audit(results: dict[str, ContrastResult], pass_rate: int, threshold: int) -> None:
    table = Table(title="Contrast Audit")
    table.add_column("Check")
    table.add_column("Ratio", justify="right")
    table.add_column("Level")
    table.add_column("Verdict")

    for name, result in results.items():
        style = _level_style(result)
        table.add_row(
            name, f"{result.ratio:.2f}", f"[{style}]{result.level}[/{style}]", result.description
        )
    console.print(table)

    color = "green" if pass_rate >= threshold else "red"
    console.print(f"[bold {color}]Pass rate: {pass_rate}%[/bold {color}] (threshold {threshold}%)")


# =============================================================================
# Commands
# =============================================================================


@theme_app.command("build")
def theme_build(
    primary: PrimaryArg = None,
    secondary: SecondaryArg = None,
    destructive: DestructiveOpt = None,
    warning: WarningOpt = None,
    dark: Annotated[
        bool, typer.Option("--dark", help="Show the variables applied in dark mode")
    ] = False,
    project: ProjectOpt = Path("."),
    output_json: JsonOpt = False,
) -> None:
    """Build palettes, CSS variables and contrast audit for seed colours.

    Examples:
        themekit theme build "#3B82F6" "#10B981"
        themekit theme build "#3B82F6" "#10B981" --dark --json
    """
    _, tokens = _build(project, primary, secondary, destructive, warning)

    if dark:
        target = InMemoryStyleTarget()
        apply_theme(tokens, target, dark=True)
        if output_json:
            _dump({"variables": target.properties, "markers": sorted(target.markers)})
            return
        for name, value in target.properties.items():
            console.print(f"{name}: {value}")
        return

    if output_json:
        _dump(tokens.model_dump(mode="json", by_alias=True))
        return

    _print_palettes(tokens)
    summary = tokens.summary
    console.print(
        f"Contrast: {summary.passing}/{summary.total} checks pass ({summary.pass_rate}%)"
    )


@theme_app.command("audit")
def theme_audit(
    primary: PrimaryArg = None,
    secondary: SecondaryArg = None,
    destructive: DestructiveOpt = None,
    warning: WarningOpt = None,
    project: ProjectOpt = Path("."),
    output_json: JsonOpt = False,
) -> None:
    """Run the critical-pairing contrast audit.

    Exits 1 when the pass rate is below the configured minimum (default 70%).
    """
    config, tokens = _build(project, primary, secondary, destructive, warning)
    results = run_contrast_audit(tokens.colors)
    summary = tokens.summary

    if output_json:
        _dump(
            {
                "results": {name: r.model_dump(mode="json") for name, r in results.items()},
                "summary": summary.model_dump(mode="json", by_alias=True),
            }
        )
    else:
        _print_audit(results, summary.pass_rate, config.min_pass_rate)

    if summary.pass_rate < config.min_pass_rate:
        raise typer.Exit(code=1)


@theme_app.command("validate-pair")
def theme_validate_pair(
    color_a: Annotated[str, typer.Argument(help="Primary colour")],
    color_b: Annotated[str, typer.Argument(help="Secondary colour")],
    output_json: JsonOpt = False,
) -> None:
    """Score whether two colours form a usable primary/secondary pair."""
    result = validate_color_pair(color_a, color_b)

    if output_json:
        _dump(result.model_dump(mode="json", by_alias=True))
    else:
        color = "green" if result.is_valid else "red"
        console.print(
            f"[{color}]{result.level}[/{color}] - {result.contrast:.0f}% of pair checks pass"
        )

    if not result.is_valid:
        raise typer.Exit(code=1)


@theme_app.command("css")
def theme_css(
    primary: PrimaryArg = None,
    secondary: SecondaryArg = None,
    destructive: DestructiveOpt = None,
    warning: WarningOpt = None,
    project: ProjectOpt = Path("."),
    out: Annotated[Path | None, typer.Option("--out", "-o", help="Write to file")] = None,
) -> None:
    """Render the theme stylesheet (:root and .dark blocks)."""
    _, tokens = _build(project, primary, secondary, destructive, warning)
    stylesheet = tokens_to_css(tokens)

    if out is None:
        typer.echo(stylesheet)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(stylesheet, encoding="utf-8")
    console.print(f"[green]Wrote {out}[/green]")


@theme_app.command("tokens")
def theme_tokens(
    primary: PrimaryArg = None,
    secondary: SecondaryArg = None,
    destructive: DestructiveOpt = None,
    warning: WarningOpt = None,
    project: ProjectOpt = Path("."),
    out: Annotated[Path | None, typer.Option("--out", "-o", help="Write tokens.json")] = None,
) -> None:
    """Export W3C DTCG design tokens."""
    _, tokens = _build(project, primary, secondary, destructive, warning)

    if out is None:
        _dump(generate_dtcg_tokens(tokens))
        return
    path = export_dtcg_file(tokens, out)
    console.print(f"[green]Wrote {path}[/green]")
