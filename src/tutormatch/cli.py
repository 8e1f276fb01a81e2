"""Typer CLI entrypoint for the matching engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .adapters import JsonFileStore, StoreLoadError
from .container import create_container
from .logging import configure_logging
from .pipeline import FetchError, MatchingPipeline, OutputWriter, build_output
from .schemas.config import load_config

app = typer.Typer(help="Tutor-job matching and schedule conflict CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    try:
        return load_config(loaded).to_settings()
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _open_store(data: Path) -> JsonFileStore:
    try:
        return JsonFileStore(data)
    except StoreLoadError as exc:
        raise typer.BadParameter("; ".join(exc.errors), param_hint="--data") from exc


def _build_pipeline(settings: dict[str, Any], store: JsonFileStore) -> MatchingPipeline:
    try:
        return create_container(settings=settings, store=store).pipeline()
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


@app.command()
def match(
    data: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Data store JSON path."),
    tutor_id: str = typer.Option(..., "--tutor-id", help="Tutor to find postings for."),
    output: Optional[Path] = typer.Option(
        None,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Write results to this JSON path instead of stdout.",
    ),
    explain: bool = typer.Option(False, help="Include rejected postings and gate details."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """List the open postings a tutor is eligible for."""
    settings = _load_settings(config)
    configure_logging(log_level)

    pipeline = _build_pipeline(settings, _open_store(data))

    try:
        report = pipeline.evaluate_postings(tutor_id)
    except FetchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    payload = build_output(report, explain=explain)
    if output:
        OutputWriter().write(output, payload)
        typer.echo(f"Found {len(report.compatible)} compatible postings. Results saved to {output}.")
    else:
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def conflict(
    data: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Data store JSON path."),
    tutor_id: str = typer.Option(..., "--tutor-id", help="Tutor whose schedule is checked."),
    date: str = typer.Option(..., help="Class date (YYYY-MM-DD)."),
    start: str = typer.Option(..., help="Start time (HH:MM)."),
    duration: int = typer.Option(..., min=1, help="Duration in minutes."),
    exclude: Optional[str] = typer.Option(None, help="Block id to ignore, e.g. the block being moved."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Check whether a proposed class overlaps the tutor's active blocks.

    Exits with status 1 when a conflict is found.
    """
    configure_logging(log_level)
    container = create_container(store=_open_store(data))
    pipeline = container.pipeline()

    try:
        clash = pipeline.check_booking(tutor_id, date, start, duration, exclude)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except FetchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if clash:
        typer.echo("conflict")
        raise typer.Exit(code=1)
    typer.echo("available")


@app.command()
def resolve(
    identifier: str = typer.Argument(..., help="Language code or name."),
    data: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Data store JSON path."),
    other: Optional[str] = typer.Option(None, help="Compare against this identifier instead of resolving."),
    locale: Optional[str] = typer.Option(None, help="Locale for the display name (e.g. en, es)."),
) -> None:
    """Resolve a language identifier, or compare two identifiers."""
    store = _open_store(data) if data else None
    resolver = create_container(store=store).resolver()

    if other is not None:
        typer.echo(json.dumps({"same_language": resolver.same_language(identifier, other)}))
        return

    record = resolver.resolve(identifier)
    if not record:
        typer.echo(json.dumps({"identifier": identifier, "found": False}))
        raise typer.Exit(code=1)
    typer.echo(
        json.dumps(
            {
                "identifier": identifier,
                "found": True,
                "code": record.code,
                "name": resolver.localized_name(record.code, locale),
            },
            ensure_ascii=False,
        )
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
