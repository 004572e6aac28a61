#!/usr/bin/env python3
"""Command line entry point for the record browser."""
import pathlib
import shlex
from typing import Optional
from typing_extensions import Annotated

import typer

from recordbrowser.common.logger import configure_logging
from recordbrowser.common.settings import settings
from recordbrowser.configs.credentials import resolve
from recordbrowser.presentation.renderer import ConsolePresenter
from recordbrowser.session import BrowserSession
from .console import console, print_error, print_success
from .decorators import handle_cli_errors

app = typer.Typer(
    name="recordbrowser",
    help="Browse the rows of a database table one record at a time.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def global_callback(
    env: Annotated[Optional[str], typer.Option("--env", "-e", help="Environment name; loads .env.<name>.")] = None,
    credentials: Annotated[Optional[pathlib.Path], typer.Option("--credentials", "-c", help="Path to the credential file")] = None,
    table: Annotated[Optional[str], typer.Option("--table", "-t", help="Table to browse")] = None,
    driver: Annotated[Optional[str], typer.Option("--driver", help="SQLAlchemy drivername, e.g. postgresql+psycopg2")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    json_logs: Annotated[bool, typer.Option("--json-logs", help="Emit logs as JSON")] = False,
):
    """
    Record Browser CLI Entry Point.
    """
    if env:
        settings.configure_env(env)
    if credentials is not None:
        settings.credentials_path = str(credentials)
    if table:
        settings.table_name = table
    if driver:
        settings.driver = driver

    configure_logging(
        level=log_level or settings.log_level,
        json_format=json_logs or settings.log_json,
    )


def _open_session(presenter: ConsolePresenter) -> BrowserSession:
    with presenter.status_context(f"Loading '{settings.table_name}'..."):
        return BrowserSession.open(settings)


def _handle_command(session: BrowserSession, line: str) -> bool:
    """Applies one interactive command. Returns False when the loop should stop."""
    try:
        parts = shlex.split(line)
    except ValueError as e:
        print_error(f"Could not parse command: {e}")
        return True
    if not parts:
        return True

    command = parts[0].lower()
    if command in ("q", "quit", "exit"):
        return False
    if command in ("n", "next"):
        session.next()
    elif command in ("p", "prev", "previous"):
        session.previous()
    elif command in ("e", "edit"):
        if len(parts) < 2:
            print_error("Usage: e <field> <text>")
            return True
        try:
            session.edit(parts[1], " ".join(parts[2:]))
        except KeyError:
            print_error(f"No field named '{parts[1]}' on this record.")
    else:
        print_error(f"Unknown command: {command}")
    return True


@app.command()
@handle_cli_errors
def browse():
    """
    Open the record form and step through records interactively.
    """
    presenter = ConsolePresenter(console)
    session = _open_session(presenter)
    try:
        running = True
        while running:
            presenter.print_record(session.view(), title=settings.form_title)
            presenter.print_hint()
            try:
                line = console.input("[bold]> [/bold]")
            except EOFError:
                break
            running = _handle_command(session, line)
    finally:
        session.close()


@app.command()
@handle_cli_errors
def dump():
    """
    Print every loaded record as a table.
    """
    presenter = ConsolePresenter(console)
    session = _open_session(presenter)
    try:
        presenter.print_table([record.as_dict() for record in session.store], title=settings.table_name)
        presenter.print_info(f"{len(session.store)} records")
    finally:
        session.close()


@app.command("check-config")
@handle_cli_errors
def check_config():
    """
    Resolve the credential file and show the connection descriptor.
    """
    presenter = ConsolePresenter(console)
    descriptor = resolve(settings.credentials_path)
    presenter.print_table([descriptor.masked()], title=str(settings.credentials_path))
    print_success("Credential file resolved.")


def main():
    app()


if __name__ == "__main__":
    main()
