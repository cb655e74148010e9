"""CLI entry point for vault-export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from vault_export.config import ConfigError, ExportConfig, build_pipeline, load_config
from vault_export.config.loader import DEFAULT_CONFIG_TEMPLATE
from vault_export.notes import NoteOutcome, process_note

app = typer.Typer(
    name="vault-export",
    help="Run note postprocessors (tag filtering, alias cleanup, flat layout) over a vault.",
)

config_app = typer.Typer(help="Manage vault-export configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {"debug": logging.DEBUG, "info": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}

# Global state
_config: ExportConfig | None = None


def _get_config() -> ExportConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to vault-export.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ConfigError as exc:
        rprint(f"[red]error:[/red] {exc}")
        raise typer.Exit(2)
    logging.basicConfig(level=_LOG_LEVELS[_config.log_level], format="%(levelname)s %(name)s: %(message)s")


def _destination_for(note: Path, source: Path, root: Path) -> Path:
    try:
        return root / note.relative_to(source)
    except ValueError:
        return root / note.name


def _display_outcomes(outcomes: list[NoteOutcome]) -> None:
    table = Table(title=f"Notes ({len(outcomes)})")
    table.add_column("Note", style="cyan")
    table.add_column("Status")
    table.add_column("Destination / error", style="green")
    styles = {"written": "green", "skipped": "yellow", "error": "red"}
    for outcome in outcomes:
        status = f"[{styles[outcome.status]}]{outcome.status}[/{styles[outcome.status]}]"
        detail = outcome.error if outcome.status == "error" else (outcome.destination or "-")
        table.add_row(outcome.file, status, detail)
    rprint(table)


@app.command()
def check(
    notes: list[Path] = typer.Argument(..., help="Note files to run through the pipeline"),
    source: Annotated[Path, typer.Option("--source", "-s", help="Vault root the notes live in")] = Path("."),
    root: Annotated[Path, typer.Option("--root", "-r", help="Export destination root")] = Path("export"),
    embeds: Annotated[bool, typer.Option("--embeds", help="Use the embedded-note pipeline")] = False,
    fail_fast: Annotated[bool, typer.Option("--fail-fast", help="Stop at the first failing note")] = False,
) -> None:
    """Run the configured postprocessors over NOTES without writing anything."""
    cfg = _get_config()
    try:
        pipeline = build_pipeline(cfg, embeds=embeds)
    except ConfigError as exc:
        rprint(f"[red]error:[/red] {exc}")
        raise typer.Exit(2)

    names = cfg.embed_postprocessors if embeds else cfg.postprocessors
    flat_root = root if "flat_hierarchy" in names else None

    outcomes: list[NoteOutcome] = []
    for note in notes:
        outcome = process_note(note, _destination_for(note, source, root), pipeline, root=flat_root)
        outcomes.append(outcome)
        if fail_fast and outcome.status == "error":
            break

    _display_outcomes(outcomes)

    skipped = sum(1 for o in outcomes if o.status == "skipped")
    errors = [o for o in outcomes if o.status == "error"]
    rprint(f"{len(outcomes) - skipped - len(errors)} written, {skipped} skipped, {len(errors)} errors")
    if errors:
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False, sort_keys=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default vault-export.yaml in current directory."""
    target = Path("vault-export.yaml")
    if target.exists() and not force:
        rprint("[yellow]vault-export.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
