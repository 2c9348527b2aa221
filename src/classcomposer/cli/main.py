"""
classcomposer CLI - Main entry point.

Provides commands for composing generated fragments into a Java class file.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from classcomposer.composer import ClassBodyComposer, ComposerError
from classcomposer.composer.output import compose_from_manifest, load_manifest, write_class_file
from classcomposer.config.loader import (
    ConfigurationError,
    generate_default_config,
    load_config_from_yaml,
)
from classcomposer.config.models import ComposerConfig

app = typer.Typer(
    name="classcomposer",
    help="Assemble generated code fragments into a compilable Java class",
    no_args_is_help=True,
)

console = Console()


# =============================================================================
# Helper Functions
# =============================================================================


def configure_logging(level: str, verbose: bool = False):
    """Configure root logging for a CLI run."""
    log_level = logging.DEBUG if verbose else getattr(logging, level, logging.INFO)
    logging.basicConfig(level=log_level, format="%(name)s: %(message)s")


def validate_path(path: str, must_exist: bool = True) -> Path:
    """Validate and return a Path object."""
    p = Path(path)
    if must_exist and not p.exists():
        raise typer.BadParameter(f"Path does not exist: {path}")
    return p


# =============================================================================
# Commands
# =============================================================================


@app.command()
def compose(
    manifest: str = typer.Argument(..., help="Fragment manifest (.yaml, .yml or .json)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to configuration YAML file"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output directory (overrides config)"),
    stdout: bool = typer.Option(False, "--stdout", help="Print the class instead of writing a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Compose a Java class from a fragment manifest.

    Examples:
        classcomposer compose fragments.yaml -o ./generated
        classcomposer compose fragments.json -c classcomposer.yaml --stdout
    """
    try:
        cfg = load_config_from_yaml(Path(config)) if config else ComposerConfig()
        configure_logging(cfg.log_level, verbose)

        fragment_manifest = load_manifest(validate_path(manifest))
        composer = compose_from_manifest(fragment_manifest, cfg.template)

        if stdout:
            # Plain print keeps the output byte-exact for redirection
            print(composer.render(), end="")
            return

        output_dir = Path(output) if output else cfg.output_dir
        out_path = write_class_file(composer, output_dir)
    except (ConfigurationError, ComposerError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Wrote {composer.class_name} to {out_path}")

    if verbose:
        console.print(
            Panel(
                Syntax(composer.render(), "java", line_numbers=True),
                title=composer.class_name,
                border_style="cyan",
            )
        )


@app.command()
def init(
    output: str = typer.Option("./classcomposer.yaml", "--output", "-o", help="Output path for config file"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
):
    """
    Generate a default configuration file.

    Creates a classcomposer.yaml with the default class template.
    """
    output_path = Path(output)

    if output_path.exists() and not force:
        if not typer.confirm(f"{output} already exists. Overwrite?"):
            console.print("[yellow]Cancelled.[/yellow]")
            raise typer.Abort()

    generate_default_config(output_path)
    console.print(f"[green]✓[/green] Generated configuration file: {output}")


@app.command()
def categories():
    """List code categories in the order they are emitted."""
    table = Table(title="Code Categories")
    table.add_column("#", justify="right")
    table.add_column("Category", style="cyan")
    table.add_column("Accumulation")

    for position, (category, discipline, _) in enumerate(ClassBodyComposer().describe(), start=1):
        table.add_row(str(position), category.value, discipline.value)

    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
