"""Terminal UI for the task API."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..config import get_settings
from ..logging_setup import setup_logging
from .api import TaskApiClient
from .store import ALL, FILTERS, BoardStore, task_priority

console = Console()

PRIORITY_STYLES = {
    "critical": "bold red",
    "high": "dark_orange",
    "medium": "yellow",
    "low": "green",
}

HELP_TEXT = """\
[bold]add[/bold] [title]          new task (asks for priority and due date)
[bold]done[/bold] N / [bold]undo[/bold] N       mark task N completed / not completed
[bold]title[/bold] N text         rename task N
[bold]prio[/bold] N level         critical | high | medium | low
[bold]due[/bold] N [YYYY-MM-DD]   set due date, or clear it when omitted
[bold]rm[/bold] N                 delete task N
[bold]filter[/bold] [level]       show only one priority (default: all)
[bold]reload[/bold]               fetch the list from the server again
[bold]quit[/bold]"""


# =============================================================================
# Date helpers
# =============================================================================


def input_to_iso(value: str) -> str | None:
    """Turn a date typed by the user into an ISO timestamp (UTC midnight)."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.isoformat()


def format_due(value: str | None) -> str:
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value).date().isoformat()
    except ValueError:
        return value


# =============================================================================
# Display
# =============================================================================


def render_board(store: BoardStore, priority_filter: str) -> Table:
    shown, total = store.counts(priority_filter)
    table = Table(
        title=f"Task Manager  [dim]{shown} / {total} tasks · filter: {priority_filter}[/dim]",
        show_header=True,
        header_style="bold blue",
    )
    table.add_column("#", style="dim", justify="right", width=3)
    table.add_column("Task", style="bold", min_width=20)
    table.add_column("Priority", justify="center", width=10)
    table.add_column("Due", justify="center", width=12)
    table.add_column("Status", justify="center", width=10)

    for index, task in enumerate(store.visible(priority_filter), start=1):
        priority = task_priority(task)
        completed = bool(task.get("completed"))
        title = escape(task["title"])
        if completed:
            title = f"[strike]{title}[/strike]"
        table.add_row(
            str(index),
            title,
            f"[{PRIORITY_STYLES.get(priority, 'yellow')}]{priority.capitalize()}[/]",
            format_due(task.get("dueDate")),
            "✅ done" if completed else "pending",
        )
    return table


# =============================================================================
# Command loop
# =============================================================================


class BoardCLI:
    def __init__(self, store: BoardStore) -> None:
        self.store = store
        self.priority_filter = ALL

    def _task_at(self, token: str) -> dict[str, Any] | None:
        """Resolve a row number of the current view to a task."""
        if not token.isdigit():
            self.store.error = f"'{token}' is not a task number"
            return None
        rows = self.store.visible(self.priority_filter)
        index = int(token) - 1
        if not 0 <= index < len(rows):
            self.store.error = f"No task number {token}"
            return None
        return rows[index]

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the user wants to quit."""
        tokens = line.split()
        cmd, args = tokens[0].lower(), tokens[1:]
        self.store.clear_error()

        if cmd in ("quit", "exit", "q"):
            return False
        if cmd == "help":
            console.print(Panel(HELP_TEXT, title="Commands", border_style="cyan"))
        elif cmd == "reload":
            self.store.load()
        elif cmd == "filter":
            self._cmd_filter(args)
        elif cmd == "add":
            self._cmd_add(" ".join(args))
        elif cmd in ("done", "undo") and len(args) == 1:
            task = self._task_at(args[0])
            if task:
                self.store.toggle(task["id"], cmd == "done")
        elif cmd == "title" and len(args) >= 2:
            task = self._task_at(args[0])
            if task:
                self.store.rename(task["id"], " ".join(args[1:]))
        elif cmd == "prio" and len(args) == 2:
            task = self._task_at(args[0])
            if task:
                self.store.reprioritize(task["id"], args[1])
        elif cmd == "due" and len(args) in (1, 2):
            self._cmd_due(args)
        elif cmd == "rm" and len(args) == 1:
            self._cmd_rm(args[0])
        else:
            self.store.error = f"Unknown command: {line} (type 'help')"
        return True

    def _cmd_filter(self, args: list[str]) -> None:
        value = (args[0] if args else ALL).lower()
        if value not in FILTERS:
            self.store.error = f"Filter must be one of {', '.join(FILTERS)}"
            return
        self.priority_filter = value

    def _cmd_add(self, title: str) -> None:
        if not title:
            title = Prompt.ask("Title")
        priority = Prompt.ask("Priority", choices=FILTERS[1:], default="medium")
        due_raw = Prompt.ask("Due date (YYYY-MM-DD, empty for none)", default="")
        due_date = None
        if due_raw.strip():
            due_date = input_to_iso(due_raw)
            if due_date is None:
                self.store.error = f"'{due_raw}' is not a date"
                return
        self.store.add(title, priority, due_date)

    def _cmd_due(self, args: list[str]) -> None:
        task = self._task_at(args[0])
        if not task:
            return
        due_date = None
        if len(args) == 2:
            due_date = input_to_iso(args[1])
            if due_date is None:
                self.store.error = f"'{args[1]}' is not a date"
                return
        self.store.reschedule(task["id"], due_date)

    def _cmd_rm(self, token: str) -> None:
        task = self._task_at(token)
        if not task:
            return
        if not task.get("completed") and not Confirm.ask(
            f"Delete '{escape(task['title'])}'? It is not completed yet"
        ):
            return
        self.store.remove(task["id"])

    def run(self) -> None:
        self.store.load()
        while True:
            console.print()
            console.print(render_board(self.store, self.priority_filter))
            if self.store.error:
                console.print(f"[red]{self.store.error}[/red]")
            line = Prompt.ask("[bold cyan]task[/bold cyan]").strip()
            if not line:
                continue
            if not self.handle(line):
                console.print("[green]Bye.[/green]")
                break


def main() -> None:
    settings = get_settings()

    setup_logging(level="WARNING", log_dir=settings.log_dir)

    with TaskApiClient(settings.api_url) as api:
        try:
            BoardCLI(BoardStore(api)).run()
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]Interrupted.[/yellow]")
        except Exception as e:
            Console(stderr=True).print(f"[red]Error: {e}[/red]")
            sys.exit(1)


if __name__ == "__main__":
    main()
