from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .calculators.aggregate import aggregate, to_delimited_text, total_panel_count
from .importers.loader import UnsupportedSpecFile, load_specs
from .render import load_policy, render_panel_files


app = typer.Typer(help="Cabinet panel cut-list CLI", no_args_is_help=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def export(
    specs_file: str = typer.Argument(..., help="Cabinet list (.csv, .xlsx, .yaml)"),
    configs: str = typer.Option("configs", help="Config folder (policy.yaml)"),
    out: Optional[str] = typer.Option(None, help="Output folder for the cut list"),
    html: bool = typer.Option(False, "--html", help="Also render an HTML panel report"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Total the panels for every cabinet and write cabinet-panels.csv."""
    _configure_logging(verbose)
    try:
        report = render_panel_files(
            Path(specs_file),
            out_dir=Path(out) if out else None,
            configs_dir=Path(configs),
            html=html,
        )
    except (UnsupportedSpecFile, FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if not report.written:
        typer.echo("No panels to export.")
        return
    for path in report.written:
        typer.echo(f"Wrote {path}")


@app.command()
def show(
    specs_file: str = typer.Argument(..., help="Cabinet list (.csv, .xlsx, .yaml)"),
    configs: str = typer.Option("configs", help="Config folder (policy.yaml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Print the panel totals without writing any files."""
    _configure_logging(verbose)
    try:
        specs = load_specs(Path(specs_file))
        policy = load_policy(Path(configs))
    except (UnsupportedSpecFile, FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    groups = aggregate(specs)
    typer.echo(to_delimited_text(groups, policy.export.quoting))
    typer.echo(f"Total panels: {total_panel_count(groups)}")


if __name__ == "__main__":  # pragma: no cover
    app()
