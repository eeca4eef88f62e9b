"""Typer CLI commands for Exa Websets."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Annotated

import typer
from rich.table import Table

from exa_client.cli.utils import console, print_json, run_async, with_client
from exa_client.websets.models import Webset, WebsetItem

if TYPE_CHECKING:
    from exa_client.client import ExaClient

app = typer.Typer(help="Inspect Websets and their items.", no_args_is_help=True)


def _render_webset(webset: Webset) -> None:
    table = Table(title=f"Webset {webset.id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("status", webset.status.value)
    if webset.title:
        table.add_row("title", webset.title)
    if webset.external_id:
        table.add_row("external_id", webset.external_id)
    for search in webset.searches:
        table.add_row(
            f"search {search.id}",
            f"{search.status.value} ({search.progress.found}/{search.count}) {search.query[:60]}",
        )
    for enrichment in webset.enrichments:
        table.add_row(f"enrichment {enrichment.id}", enrichment.description[:80])
    console.print(table)


@app.command("get")
def get(
    webset_id: Annotated[str, typer.Argument(help="Webset ID or external ID.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show a Webset."""
    webset = run_async(with_client(lambda exa: exa.websets.get(webset_id)))
    if output_json:
        print_json(webset)
    else:
        _render_webset(webset)


@app.command("items")
def items(
    webset_id: Annotated[str, typer.Argument(help="Webset ID.")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Maximum number of items to show."),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List the items of a Webset (all pages)."""

    async def _collect(exa: ExaClient) -> list[WebsetItem]:
        collected: list[WebsetItem] = []
        async for item in exa.websets.items.list_all(webset_id):
            collected.append(item)
            if limit is not None and len(collected) >= limit:
                break
        return collected

    collected = run_async(with_client(_collect))

    if output_json:
        console.print(
            json.dumps(
                [item.model_dump(by_alias=True, mode="json") for item in collected],
                indent=2,
                default=str,
            ),
            markup=False,
        )
        return

    table = Table(title=f"Webset {webset_id} items")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("URL", style="cyan")
    table.add_column("Criteria met", style="green", justify="right")
    for item in collected:
        url = str(item.properties.get("url", ""))
        met = sum(1 for e in item.evaluations if e.satisfied.value == "yes")
        table.add_row(item.id, url[:80], f"{met}/{len(item.evaluations)}")
    console.print(table)


@app.command("wait")
def wait(
    webset_id: Annotated[str, typer.Argument(help="Webset ID.")],
    timeout: Annotated[float, typer.Option("--timeout", help="Timeout in seconds.")] = 300.0,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Wait until a Webset is idle."""
    webset = run_async(
        with_client(
            lambda exa: exa.websets.wait_until_idle(
                webset_id,
                timeout_seconds=timeout,
                on_poll=lambda status: console.print(f"[dim]status: {status}[/dim]"),
            )
        )
    )
    if output_json:
        print_json(webset)
    else:
        _render_webset(webset)
