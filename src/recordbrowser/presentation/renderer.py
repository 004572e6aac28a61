from typing import Optional

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .view import RecordView

NAVIGATION_HINT = "[n] next  [p] previous  [e <field> <text>] edit  [q] quit"


class ConsolePresenter:
    """Draws record forms and status lines on a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render_record(self, view: RecordView, title: str = "") -> Panel:
        if view.is_empty:
            body = Text("No records to display.", style="yellow")
            return Panel(body, title=title)

        form = Table(show_header=False, box=None, pad_edge=False)
        form.add_column("Label", style="bold cyan", no_wrap=True)
        form.add_column("Value")
        for field in view.fields:
            value = Text(field.text, style="italic magenta" if field.edited else "")
            form.add_row(Text(field.label), value)

        prev_style = "bold" if view.has_previous else "dim"
        next_style = "bold" if view.has_next else "dim"
        nav = Text.assemble(
            ("< Previous", prev_style),
            f"   {view.position + 1}/{view.total}   ",
            ("Next >", next_style),
        )
        return Panel(Group(form, Text(""), nav), title=title)

    def print_record(self, view: RecordView, title: str = "") -> None:
        self.console.print(self.render_record(view, title=title))

    def print_table(self, rows: list[dict], title: str = "") -> None:
        if not rows:
            self.console.print(f"[yellow]{escape(title)}: no records.[/yellow]")
            return
        table = Table(title=escape(title))
        for key in rows[0].keys():
            table.add_column(key)
        for item in rows:
            table.add_row(*[escape(str(value)) for value in item.values()])
        self.console.print(table)

    def print_hint(self) -> None:
        self.console.print(f"[dim]{escape(NAVIGATION_HINT)}[/dim]")

    def print_info(self, message: str) -> None:
        self.console.print(f"[blue][INFO][/blue] {escape(message)}")

    def status_context(self, message: str):
        return self.console.status(message)
