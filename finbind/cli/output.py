"""Rich-based output utilities for the finbind CLI."""

import dataclasses
import json
from enum import Enum
from typing import Any

from rich.console import Console
from rich.markup import escape

# Results go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def to_jsonable(value: Any) -> Any:
    """Convert public response records into plain JSON values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def print_result(record: Any) -> None:
    """Print a response record as highlighted JSON."""
    console.print_json(json.dumps(to_jsonable(record), ensure_ascii=False))


def print_error(message: str) -> None:
    """Print an error message in red.

    Args:
        message: The error message to display.
    """
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False, soft_wrap=True)


def print_info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The info message to display.
    """
    err_console.print(f"[dim]{escape(message)}[/dim]", highlight=False, soft_wrap=True)


class ConsoleRawLog:
    """Raw-log callback printing redacted traffic to stderr."""

    def on_request(self, endpoint: str, payload: dict[str, Any]) -> None:
        print_info(f"-> {endpoint}")
        if payload:
            err_console.print_json(data=payload)

    def on_response(self, status: int, body: dict[str, Any]) -> None:
        print_info(f"<- {status}")
        err_console.print_json(data=body)
