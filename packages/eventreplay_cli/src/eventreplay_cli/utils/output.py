"""Output formatting utilities"""

import json
import sys
from typing import Any, Dict

from rich.console import Console
from rich.table import Table


class OutputFormatter:
    """Handles output formatting for JSON and human-readable modes

    In JSON mode every call prints one JSON document per line, so the
    output of `eventreplay play` can be piped as JSON lines.
    """

    def __init__(self, json_mode: bool = False, console: Console = None):
        """Initialize output formatter

        Args:
            json_mode: Enable JSON output mode
            console: Rich console instance (for human mode)
        """
        self.json_mode = json_mode
        self.console = console or Console()

    def _print_json(self, output: Dict[str, Any], file=None) -> None:
        print(json.dumps(output, default=repr), file=file or sys.stdout, flush=True)

    def success(self, message: str, data: Dict[str, Any] = None) -> None:
        """Output success message

        Args:
            message: Success message
            data: Optional key/value details
        """
        if self.json_mode:
            self._print_json({"status": "success", "message": message, "data": data})
        else:
            self.console.print(f"[green]✓[/green] {message}")
            if data:
                for key, value in data.items():
                    self.console.print(f"  {key}: {value}")

    def error(self, message: str, details: str = None) -> None:
        """Output error message

        Args:
            message: Error message
            details: Optional error details
        """
        if self.json_mode:
            self._print_json(
                {"status": "error", "message": message, "details": details},
                file=sys.stderr,
            )
        else:
            err_console = Console(stderr=True)
            err_console.print(f"[red]✗[/red] {message}")
            if details:
                err_console.print(f"  {details}")

    def event(self, elapsed_ms: float, name: str, offset_ms: float, payload: Any) -> None:
        """Output one replayed event

        Args:
            elapsed_ms: Wall-clock time since playback start
            name: Event name
            offset_ms: Recorded offset of the item
            payload: Event payload
        """
        if self.json_mode:
            self._print_json({
                "type": "event",
                "elapsed_ms": round(elapsed_ms, 1),
                "name": name,
                "offset_ms": offset_ms,
                "payload": payload,
            })
        else:
            self.console.print(
                f"[dim]{elapsed_ms:>8.1f}ms[/dim] [bold]{name}[/bold] "
                f"[cyan]@{offset_ms}ms[/cyan] {payload!r}",
                highlight=False,
            )

    def malformed(self, elapsed_ms: float, item: Any) -> None:
        """Output one malformed item"""
        if self.json_mode:
            self._print_json({
                "type": "error",
                "elapsed_ms": round(elapsed_ms, 1),
                "item": item,
            })
        else:
            self.console.print(
                f"[dim]{elapsed_ms:>8.1f}ms[/dim] [yellow]malformed[/yellow] {item!r}",
                highlight=False,
            )

    def table(self, title: str, rows: Dict[str, Any]) -> None:
        """Output a two-column key/value table"""
        if self.json_mode:
            self._print_json({"status": "success", "message": title, "data": rows})
            return

        table = Table(title=title, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for key, value in rows.items():
            table.add_row(key, str(value))
        self.console.print(table)
