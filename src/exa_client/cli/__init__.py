"""
CLI application for the Exa API.

Provides commands for search, contents, answers, research tasks and Websets.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from exa_client.cli.research import app as research_app
from exa_client.cli.search import answer, contents, search, similar
from exa_client.cli.utils import console
from exa_client.cli.websets import app as websets_app

app = typer.Typer(
    name="exa",
    help="Exa CLI - search, contents, answers, research tasks and Websets.",
    add_completion=False,
)

app.command("search")(search)
app.command("similar")(similar)
app.command("contents")(contents)
app.command("answer")(answer)
app.add_typer(research_app, name="research")
app.add_typer(websets_app, name="websets")


@app.callback()
def main() -> None:
    """Exa CLI."""
    from exa_client.logging import configure_structlog

    load_dotenv(find_dotenv(usecwd=True))
    configure_structlog()


@app.command()
def version() -> None:
    """Show version information."""
    from exa_client import __version__

    console.print(f"exa-client v{__version__}")
