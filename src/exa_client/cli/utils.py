"""Shared utilities for CLI commands (console output, async helpers, error reporting)."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, TypeVar

import typer
from rich.console import Console

from exa_client.exceptions import ExaError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine

    from pydantic import BaseModel

    from exa_client.client import ExaClient

console = Console()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


async def with_client(call: Callable[[ExaClient], Awaitable[T]]) -> T:
    """Open an `ExaClient` from the environment, run `call`, and report failures.

    Raises:
        typer.Exit: With code 1 on configuration or API errors.
    """
    from exa_client.client import ExaClient

    try:
        async with ExaClient.from_env() as exa:
            return await call(exa)
    except ExaError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        if "EXA_API_KEY" in str(e):
            console.print("[dim]Set EXA_API_KEY in your environment or .env file.[/dim]")
        raise typer.Exit(1) from None


def print_json(model: BaseModel) -> None:
    """Print a model as JSON using wire (camelCase) field names."""
    console.print(
        json.dumps(model.model_dump(by_alias=True, mode="json"), indent=2, default=str),
        markup=False,
    )
