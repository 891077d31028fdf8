"""CLI entrypoint for fsriver."""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from fsriver.core.config import get_settings
from fsriver.core.errors import RiverError
from fsriver.core.logging import configure_logging
from fsriver.models.dto import RiverPayload
from fsriver.river import build_schema, decode, decode_lenient, dumps, encode

app = typer.Typer(name="fsriver", help="Translate FS river definitions and build their index mapping")


@app.callback()
def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, use_json=settings.log_json)


def _load(path: Path) -> Any:
    try:
        with path.expanduser().open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        typer.echo(f"Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1)


def _emit(document: dict[str, Any]) -> None:
    typer.echo(dumps(document, indent=True).decode("utf-8"))


def _fail(exc: RiverError) -> NoReturn:
    typer.echo(f"{exc.kind}: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("decode")
def decode_command(
    path: Path = typer.Argument(..., help="River document (JSON or YAML)"),
    lenient: Optional[bool] = typer.Option(None, "--lenient/--strict", help="Keep partial results on error"),
) -> None:
    """Decode a river document and print the river fields."""
    document = _load(path)
    if lenient is None:
        lenient = get_settings().decode_mode == "lenient"
    try:
        river = decode_lenient(document) if lenient else decode(document)
    except RiverError as exc:
        _fail(exc)
    _emit(RiverPayload.from_river(river).model_dump())


@app.command("encode")
def encode_command(
    path: Path = typer.Argument(..., help="River fields (JSON or YAML)"),
) -> None:
    """Encode river fields into the canonical river document."""
    data = _load(path) or {}
    try:
        payload = RiverPayload.model_validate(data)
    except ValidationError as exc:
        typer.echo(f"Invalid river: {exc}", err=True)
        raise typer.Exit(code=1)
    try:
        _emit(encode(payload.to_river()))
    except RiverError as exc:
        _fail(exc)


@app.command("schema")
def schema_command(
    type_name: str = typer.Argument(..., help="Document type name"),
    analyzer: Optional[str] = typer.Option(None, "--analyzer", help="Analyzer for file content"),
) -> None:
    """Print the index mapping for river documents."""
    try:
        _emit(build_schema(type_name, analyzer or get_settings().default_analyzer))
    except RiverError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
