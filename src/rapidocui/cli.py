"""RapiDoc UI command-line interface.

This module provides commands to render the RapiDoc page, serve the
sample application, list the supported attributes, and work with
configuration files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from rapidocui.errors import RapiDocError
from rapidocui.protocols import StaticRequestContext
from rapidocui.render import TemplateRenderer
from rapidocui.settings.rapidoc import RapiDocSettings
from rapidocui.settings.user import UserSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="RapiDoc UI CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "rapidocui.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")
BASE_PATH_OPTION = typer.Option("", "--base-path", "-b", help="Base path the page is served under")
OUTPUT_OPTION = typer.Option(None, "--output", "-o", dir_okay=False, help="Write HTML to a file")
HOST_OPTION = typer.Option("127.0.0.1", "--host", help="Interface to bind")
PORT_OPTION = typer.Option(8000, "--port", "-p", help="Port to listen on")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None) -> UserSettings:
    """Load a config file, or return defaults when none is given."""
    if config is None:
        return UserSettings()
    try:
        return UserSettings.load(config)
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def render(
    config: Path | None = CONFIG_OPTION,
    base_path: str = BASE_PATH_OPTION,
    output: Path | None = OUTPUT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Render the RapiDoc page once and print or save it."""
    _configure_logging(debug)
    settings = _load_settings(config).build_rapidoc_settings()

    try:
        html = TemplateRenderer().render(settings, StaticRequestContext(base_path))
    except RapiDocError as exc:
        typer.secho(f"Render failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(html)
        return
    output.write_text(html, encoding="utf-8")
    typer.secho(f"Page written to {output}", fg=typer.colors.GREEN)


@app.command()
def serve(
    config: Path | None = CONFIG_OPTION,
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Run the sample application with the RapiDoc page.

    Press Ctrl+C to exit.
    """
    import uvicorn

    from rapidocui.sample.app import create_app

    _configure_logging(debug)
    user_settings = _load_settings(config) if config else None
    sample = create_app(user_settings)

    logger.info("Serving sample API on http://%s:%d", host, port)
    uvicorn.run(sample, host=host, port=port, log_level="debug" if debug else "info")


@app.command()
def attributes() -> None:
    """List every RapiDoc attribute with its default value."""
    for name, attribute in RapiDocSettings.attributes().items():
        typer.echo(f"{attribute.key:<42} {name:<42} {attribute.default_repr}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "document_title": typer.prompt("Page title", default="RapiDoc UI"),
            "path": typer.prompt("UI route", default="/swagger"),
            "document_path": typer.prompt("OpenAPI document route", default="/openapi.json"),
            "attributes": {
                "theme": typer.prompt("Theme [dark|light]", default="dark"),
                "render_style": typer.prompt("Render style [read|view|focused]", default="read"),
                "heading_text": typer.prompt("Heading text", default="API Reference"),
            },
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                loc = ".".join(str(part) for part in e["loc"])
                typer.secho(f"  • {loc} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(
        yaml.safe_dump(cfg.model_dump(exclude_defaults=True), sort_keys=False),
        encoding="utf-8",
    )
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


def main() -> None:
    """Console script entrypoint."""
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
