"""Typer CLI commands for search, similar pages, contents and answers."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from exa_client.cli.utils import console, print_json, run_async, with_client
from exa_client.models import ContentsErrorTag, SearchResult, SearchType


def _results_table(title: str, results: list[SearchResult]) -> Table:
    table = Table(title=title)
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("URL", style="cyan")
    table.add_column("Score", style="green", justify="right")

    for i, r in enumerate(results, start=1):
        score = f"{r.score:.3f}" if isinstance(r.score, float) else ""
        table.add_row(str(i), (r.title or "")[:60], r.url[:80], score)
    return table


def search(
    query: Annotated[str, typer.Argument(help="Search query.")],
    num_results: Annotated[
        int | None,
        typer.Option("--num-results", "-n", help="Number of results."),
    ] = None,
    search_type: Annotated[
        SearchType | None,
        typer.Option("--type", help="Search type."),
    ] = None,
    no_contents: Annotated[
        bool,
        typer.Option("--no-contents", help="Return results without page contents."),
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Search the web with Exa."""
    response = run_async(
        with_client(
            lambda exa: exa.search(
                query,
                num_results=num_results,
                search_type=search_type,
                contents=False if no_contents else None,
            )
        )
    )

    if output_json:
        print_json(response)
        return

    console.print(_results_table("Exa Search", response.results))
    if response.cost_dollars is not None:
        console.print(f"[dim]Cost: ${response.cost_dollars.total:.4f}[/dim]")


def similar(
    url: Annotated[str, typer.Argument(help="Seed URL to find similar pages for.")],
    num_results: Annotated[
        int | None,
        typer.Option("--num-results", "-n", help="Number of results."),
    ] = None,
    exclude_source_domain: Annotated[
        bool,
        typer.Option("--exclude-source-domain", help="Skip results from the seed URL's domain."),
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Find pages similar to a URL."""
    response = run_async(
        with_client(
            lambda exa: exa.find_similar(
                url,
                num_results=num_results,
                exclude_source_domain=exclude_source_domain or None,
            )
        )
    )

    if output_json:
        print_json(response)
        return

    console.print(_results_table("Exa Similar Pages", response.results))


def contents(
    urls: Annotated[list[str], typer.Argument(help="URLs to fetch.")],
    max_characters: Annotated[
        int | None,
        typer.Option("--max-characters", help="Truncate each page's text."),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Fetch page contents for one or more URLs."""
    from exa_client.models import TextContentsOptions

    text = TextContentsOptions(max_characters=max_characters) if max_characters else None
    response = run_async(with_client(lambda exa: exa.get_contents(urls, text=text)))

    if output_json:
        print_json(response)
        return

    for result in response.results:
        console.print(f"[bold cyan]{result.url}[/bold cyan]")
        if result.title:
            console.print(f"[bold]{result.title}[/bold]")
        if result.text:
            console.print(result.text, markup=False)
        else:
            console.print("[dim](no text)[/dim]")
        console.print()

    failed = [s for s in response.statuses if s.status == "error"]
    for status in failed:
        tag = status.error.tag if status.error else "unknown"
        if isinstance(tag, ContentsErrorTag):
            tag = tag.value
        console.print(f"[yellow]Failed:[/yellow] {status.id} ({tag})")


def answer(
    query: Annotated[str, typer.Argument(help="Question to answer.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Answer a question with citations."""
    response = run_async(with_client(lambda exa: exa.answer(query)))

    if output_json:
        print_json(response)
        return

    console.print(str(response.answer), markup=False)
    if response.citations:
        console.print()
        console.print("[bold]Sources[/bold]")
        for citation in response.citations:
            console.print(f"- {citation.title or citation.url}: [cyan]{citation.url}[/cyan]")
