"""
RuleMorph CLI - Main entry point.

Provides commands for running the fallback translator on a file and for
inspecting the language catalog and supported pairs.
"""

import logging
from pathlib import Path
from typing import Optional

import orjson
import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from rulemorph import __version__
from rulemorph.config.loader import ConfigurationError, generate_default_config, load_config
from rulemorph.config.models import RuleMorphConfig, Strategy
from rulemorph.engine.confidence import PAIRWISE_CONFIDENCE
from rulemorph.engine.pairwise import list_supported_pairs
from rulemorph.engine.translator import FallbackTranslator
from rulemorph.languages.registry import get_registry

app = typer.Typer(
    name="rulemorph",
    help="Rule-based fallback code translation between programming languages",
    no_args_is_help=True,
)

console = Console()


# =============================================================================
# Helper Functions
# =============================================================================


def validate_path(path: str, must_exist: bool = True) -> Path:
    """Validate and return a Path object."""
    p = Path(path)
    if must_exist and not p.exists():
        raise typer.BadParameter(f"Path does not exist: {path}")
    return p


def configure_logging(cfg: RuleMorphConfig, verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level)
    logging.basicConfig(level=log_level, format="%(name)s: %(message)s")


def confidence_style(confidence: int) -> str:
    if confidence >= 60:
        return "green"
    if confidence >= 40:
        return "yellow"
    return "red"


# =============================================================================
# Commands
# =============================================================================


@app.command()
def translate(
    source: str = typer.Argument(..., help="Source file to translate"),
    source_lang: str = typer.Option(..., "--from", "-s", help="Source language id (e.g. python)"),
    target_lang: str = typer.Option(..., "--to", "-t", help="Target language id (e.g. java)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write translated code to this file"),
    as_json: bool = typer.Option(False, "--json", help="Write the full result as JSON"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to configuration YAML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Translate a single source file with the rule-based fallback engine.

    Examples:
        rulemorph translate hello.py --from python --to java
        rulemorph translate app.js -s javascript -t python -o app.py
        rulemorph translate hello.py -s python -t go --json -o result.json
    """
    try:
        cfg = load_config(Path(config) if config else None)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(1)

    configure_logging(cfg, verbose)

    source_path = validate_path(source)
    try:
        code = source_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        console.print(f"[bold red]Error:[/bold red] Source file is not valid UTF-8: {source} ({e.reason})")
        raise typer.Exit(1)

    translator = FallbackTranslator(cfg.engine)
    result = translator.translate(code, source_lang, target_lang)

    if as_json:
        payload = orjson.dumps(result.model_dump(mode="json"), option=orjson.OPT_INDENT_2)
        if output:
            Path(output).write_bytes(payload)
            console.print(f"[green]✓[/green] Wrote result to [bold]{output}[/bold]")
        else:
            typer.echo(payload.decode("utf-8"))
        return

    if output:
        Path(output).write_text(result.translated_code + "\n", encoding="utf-8")
        console.print(f"[green]✓[/green] Wrote translation to [bold]{output}[/bold]")
    else:
        target = get_registry().resolve(target_lang)
        console.print(
            Panel(
                Syntax(result.translated_code, target.id, theme="monokai", line_numbers=True),
                title=f"{source_lang} → {target_lang}",
                border_style="cyan",
            )
        )

    style = confidence_style(result.confidence)
    console.print(
        f"Strategy: [bold]{result.strategy.value}[/bold]  "
        f"Confidence: [{style}]{result.confidence}[/{style}]"
    )
    if result.strategy == Strategy.GENERIC:
        console.print(
            "[yellow]⚠ No rule set covers this pair; the source was echoed as comments.[/yellow]"
        )


@app.command()
def languages():
    """List the language catalog and which languages have templates."""
    registry = get_registry()

    table = Table(title="Languages")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Comment")
    table.add_column("Template", justify="center")

    for lang in registry.list_languages():
        has_template = registry.has_template(lang.id)
        table.add_row(
            lang.id,
            lang.display_name,
            lang.comment_prefix,
            "[green]✓[/green]" if has_template else "[dim]-[/dim]",
        )

    console.print(table)


@app.command()
def pairs():
    """List language pairs with a dedicated rule chain."""
    registry = get_registry()

    table = Table(title="Pairwise Rule Chains")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="cyan")
    table.add_column("Confidence", justify="right")
    table.add_column("Shadowed by templates", justify="center")

    for source_id, target_id in list_supported_pairs():
        confidence = PAIRWISE_CONFIDENCE[(source_id, target_id)]
        shadowed = registry.has_template(source_id) and registry.has_template(target_id)
        style = confidence_style(confidence)
        table.add_row(
            source_id,
            target_id,
            f"[{style}]{confidence}[/{style}]",
            "[yellow]yes[/yellow]" if shadowed else "no",
        )

    console.print(table)


@app.command("init-config")
def init_config(
    output: str = typer.Argument("rulemorph.yaml", help="Where to write the configuration file"),
):
    """Generate a default configuration file."""
    output_path = Path(output)
    if output_path.exists():
        if not typer.confirm(f"{output_path} already exists. Overwrite?"):
            raise typer.Abort()

    generate_default_config(output_path)
    console.print(f"[green]✓[/green] Wrote default configuration to [bold]{output_path}[/bold]")


@app.command()
def version():
    """Show version information."""
    console.print(f"RuleMorph version {__version__}")


def main():
    app()


if __name__ == "__main__":
    main()
