"""Typer CLI commands for Exa research tasks."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import typer
from rich.table import Table

from exa_client.cli.utils import console, print_json, run_async, with_client

if TYPE_CHECKING:
    from exa_client.client import ExaClient
    from exa_client.models import ResearchTask

app = typer.Typer(help="Create and inspect research tasks.", no_args_is_help=True)


def _load_output_schema(output_schema: Path | None) -> dict[str, Any] | None:
    """Load and validate JSON schema from file."""
    if output_schema is None:
        return None

    try:
        schema_raw = json.loads(output_schema.read_text(encoding="utf-8"))
    except OSError as exc:
        console.print(f"[red]Error:[/red] Failed to read schema file: {exc}")
        raise typer.Exit(1) from None
    except json.JSONDecodeError as exc:
        console.print(f"[red]Error:[/red] Schema file is not valid JSON: {exc}")
        raise typer.Exit(1) from None

    if not isinstance(schema_raw, dict):
        console.print("[red]Error:[/red] Schema JSON must be an object at the root.")
        raise typer.Exit(1) from None

    return schema_raw


def _render_task(task: ResearchTask) -> None:
    table = Table(title=f"Research task {task.id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("status", task.status.value)
    table.add_row("instructions", task.instructions[:200])
    if task.error:
        table.add_row("error", task.error)
    console.print(table)

    if task.data is not None:
        console.print(json.dumps(task.data, indent=2, default=str), markup=False)
    for field, citations in task.citations.items():
        for citation in citations:
            console.print(f"[dim]{field}:[/dim] [cyan]{citation.url}[/cyan]")


@app.command("create")
def create(
    instructions: Annotated[str, typer.Argument(help="What to research.")],
    model: Annotated[
        str,
        typer.Option("--model", help="Research model (exa-research, exa-research-pro)."),
    ] = "exa-research",
    output_schema: Annotated[
        Path | None,
        typer.Option("--schema", help="Optional JSON schema file for structured output."),
    ] = None,
    wait: Annotated[
        bool,
        typer.Option("--wait", help="Wait for the task to finish and print its result."),
    ] = False,
    timeout: Annotated[
        float,
        typer.Option("--timeout", help="Timeout in seconds (when --wait)."),
    ] = 600.0,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Create a research task."""
    schema = _load_output_schema(output_schema)

    async def _run(exa: ExaClient) -> ResearchTask | str:
        created = await exa.research.create_task(instructions, model=model, output_schema=schema)
        if not wait:
            return str(created.id)
        return await exa.research.poll_task(created.id, timeout_seconds=timeout)

    result = run_async(with_client(_run))

    if isinstance(result, str):
        if output_json:
            console.print(json.dumps({"id": result}), markup=False)
        else:
            console.print(f"Created research task [cyan]{result}[/cyan]")
        return

    if output_json:
        print_json(result)
    else:
        _render_task(result)


@app.command("get")
def get(
    task_id: Annotated[str, typer.Argument(help="Research task ID.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show a research task."""
    task = run_async(with_client(lambda exa: exa.research.get_task(task_id)))
    if output_json:
        print_json(task)
    else:
        _render_task(task)


@app.command("wait")
def wait_for_task(
    task_id: Annotated[str, typer.Argument(help="Research task ID.")],
    timeout: Annotated[float, typer.Option("--timeout", help="Timeout in seconds.")] = 600.0,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Wait for a research task to finish."""
    task = run_async(
        with_client(
            lambda exa: exa.research.poll_task(
                task_id,
                timeout_seconds=timeout,
                on_poll=lambda status: console.print(f"[dim]status: {status}[/dim]"),
            )
        )
    )
    if output_json:
        print_json(task)
    else:
        _render_task(task)
