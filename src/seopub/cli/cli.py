"""CLI entrypoint: Typer app definition and command registration"""

import typer

from seopub.cli.commands import convert_cmd, scrape_cmd, serve_cmd


app = typer.Typer(name="seopub", no_args_is_help=True, help="Scrape articles into SEO Markdown and publish them to Sanity")

app.command(name="serve")(serve_cmd)
app.command(name="scrape")(scrape_cmd)
app.command(name="convert")(convert_cmd)
