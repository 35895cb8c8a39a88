"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
import uvicorn

from seopub.api.app import create_app
from seopub.api.deps import build_services
from seopub.config import Settings, load_config
from seopub.core import frontmatter
from seopub.core.pipeline import run_assemble, run_publish, run_scrape
from seopub.errors import SeopubError
from seopub.log import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def serve_cmd(
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on")] = None,
    ):
    """Run the HTTP API."""
    settings = _settings(overrides={"host": host, "port": port})
    app = create_app(settings)
    typer.echo(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


def scrape_cmd(
    url: Annotated[str, typer.Argument(help="Article URL to scrape")],
    save: Annotated[bool, typer.Option("--save/--no-save", help="Write the Markdown to the storage directory")] = True,
    storage: Annotated[Optional[str], typer.Option("--storage-dir", help="Storage directory")] = None,
    ):
    """Scrape a URL and print SEO Markdown with frontmatter."""
    settings = _settings(overrides={"storage_dir": storage})
    services = build_services(settings)
    try:
        markdown = run_scrape(url, services.scraper, services.enricher, services.store if save else None)
    except Exception as e:
        _fail("Failed to scrape and transform content", e)
    typer.echo(markdown)


def convert_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file with optional frontmatter")],
    publish: Annotated[bool, typer.Option("--publish", help="Create the post in Sanity")] = False,
    ):
    """Convert a Markdown file into a validated post and print it as JSON."""
    settings = _settings()
    services = build_services(settings)
    if publish and services.cms is None:
        _fail("Publishing requires SANITY_PROJECT_ID and SANITY_API_TOKEN.")

    try:
        parsed = frontmatter.parse_file(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)

    try:
        post = run_assemble(
            parsed.content, services.converter, services.cms, services.selector,
            frontmatter=parsed.frontmatter,
        )
    except SeopubError as e:
        _fail("Conversion failed", e)
    typer.echo(json.dumps(post.to_document(), indent=2, ensure_ascii=False))

    if publish:
        try:
            document_id = run_publish(services.cms, post)
        except SeopubError as e:
            _fail("Publish failed", e)
        typer.echo(f"Published: {document_id}")
