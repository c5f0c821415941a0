"""Command-line interface for SBOM generation."""

from pathlib import Path

import typer
from rich.console import Console

from sbom import __version__
from sbom.config import SbomConfiguration
from sbom.generator import SbomGenerator
from sbom.logging_config import setup_logging, verbosity_to_level

app = typer.Typer(
    name="spdx-sbom",
    help="Generate SPDX tag/value SBOM files for Python packages.",
)
console = Console()


@app.command()
def generate(
    path: Path = typer.Argument(
        Path("."),
        help="Package top level directory containing sbom.yaml",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Show progress (-v) or detailed progress (-vv)",
    ),
) -> None:
    """Generate the SBOM for the package at PATH."""
    setup_logging(verbosity_to_level(verbose))

    try:
        configuration = SbomConfiguration.from_directory(path)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

    console.print(
        f"[bold]Generating {configuration.output_type.value.upper()} SBOM[/bold] "
        f"for {configuration.package_name}"
    )
    generator = SbomGenerator(configuration)
    if not generator.generate():
        console.print("[bold red]SBOM generation failed[/bold red]")
        raise typer.Exit(1)

    console.print(f"[bold green]Saved to:[/bold green] {generator.sbom_file_path}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"spdx-sbom {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
