#!/usr/bin/env python3
from __future__ import annotations

from typing import Optional

import click
import sqlalchemy as sa
from rich.console import Console
from rich.table import Table

from courseautoapprove.admin.settings import SETTINGS, get_config, write_setting
from courseautoapprove.app_logger import setup_logging
from courseautoapprove.db import session as db_session
from courseautoapprove.db.models import STATUS_PENDING, CourseRequest
from courseautoapprove.exceptions import SettingValidationError
from courseautoapprove.tasks import ApproveCourseRequestsTask, Outcome, ProcessingReport

console = Console()

OUTCOME_STYLES = {
    Outcome.APPROVED: "green",
    Outcome.REJECTED_QUOTA: "red",
    Outcome.REJECTED_COLLISION: "red",
    Outcome.PENDING_QUOTA: "yellow",
    Outcome.PENDING_COLLISION: "yellow",
}


def show_report(report: ProcessingReport) -> None:
    if report.skipped:
        console.print(f"[yellow]Skipped:[/] {report.skip_reason}")
        return
    t = Table(title="Course requests")
    for col in ("request", "requester", "shortname", "teacher in", "outcome"):
        t.add_column(col)
    for e in report.entries:
        style = OUTCOME_STYLES[e.outcome]
        t.add_row(
            str(e.request_id),
            str(e.requester_id),
            e.shortname,
            str(e.currentcourses),
            f"[{style}]{e.outcome.value}[/]",
        )
    console.print(t)
    summary = ", ".join(f"{k}={v}" for k, v in report.counts().items() if v)
    console.print(f"Processed {report.processed} request(s){': ' + summary if summary else ''}")


@click.group()
@click.option("--database-url", envvar="COURSEAUTOAPPROVE_DATABASE_URL", default=None,
              help="SQLAlchemy URL (defaults to the configured DATABASE_URL).")
@click.option("--log-level", default=None, help="Logging level, e.g. DEBUG.")
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str], log_level: Optional[str]) -> None:
    """Automatic approval of course requests."""
    setup_logging(log_level)
    ctx.obj = db_session.configure(database_url)


@cli.command()
@click.pass_obj
def initdb(_factory) -> None:
    """Create the database tables."""
    db_session.create_all()
    console.print("[green]Tables created[/]")


@cli.command(name="run")
@click.pass_obj
def run_task(factory) -> None:
    """Run the approval task once."""
    task = ApproveCourseRequestsTask(session_factory=factory)
    console.print(f"[bold]{task.get_name()}[/]")
    task.execute()
    show_report(task.last_report)


@cli.command(name="requests")
@click.pass_obj
def list_requests(factory) -> None:
    """List pending course requests."""
    with db_session.session_scope(factory) as session:
        rows = session.scalars(
            sa.select(CourseRequest)
            .where(CourseRequest.status == STATUS_PENDING)
            .order_by(CourseRequest.id)
        ).all()
        t = Table(show_lines=False)
        for col in ("id", "requester", "shortname", "fullname"):
            t.add_column(col)
        for r in rows:
            t.add_row(str(r.id), str(r.requester_id), r.shortname, r.fullname)
    console.print(t)


@cli.group()
def config() -> None:
    """Show or change the tool settings."""


@config.command(name="show")
@click.pass_obj
def config_show(factory) -> None:
    with db_session.session_scope(factory) as session:
        values = get_config(session)
    t = Table(show_lines=False)
    for col in ("setting", "value", "default"):
        t.add_column(col)
    for name, s in SETTINGS.items():
        t.add_row(s.fullname, values[name], s.default)
    console.print(t)


@config.command(name="set")
@click.argument("name", type=click.Choice(sorted(SETTINGS)))
@click.argument("value")
@click.pass_obj
def config_set(factory, name: str, value: str) -> None:
    try:
        with db_session.session_scope(factory) as session:
            stored = write_setting(session, name, value)
    except SettingValidationError as e:
        raise click.BadParameter(e.message, param_hint="VALUE") from e
    console.print(f"[green]{SETTINGS[name].fullname}[/] = {stored}")


def main() -> None:
    cli(prog_name="courseautoapprove")


if __name__ == "__main__":
    main()
