"""``calque examples`` — list, describe and run the example catalogue.

Behavior
- Listings and per-case results go to **stdout**; summaries and errors go to
  **stderr** via the message helpers.
- ``run`` exits with status 1 when any selected case fails or errors, so it
  can gate CI jobs the same way a test run would.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from calque.catalogue import CatalogueError, Outcome, load_examples, run_cases

from .helpers import error, success, warn

if TYPE_CHECKING:
    from calque.catalogue import ExampleCatalogue, RunReport

OUTCOME_LABELS = {
    Outcome.PASSED: ("PASS", "green"),
    Outcome.FAILED: ("FAIL", "red"),
    Outcome.ERRORED: ("ERROR", "magenta"),
}


def _console(ctx: click.Context) -> Console:
    return Console(color_system=None if ctx.color is False else "auto")


def _validate_group(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> str | None:
    if value is None:
        return None
    groups = load_examples().groups()
    if value not in groups:
        raise click.BadParameter(
            f"unknown group {value!r} (choose from {', '.join(groups)})"
        )
    return value


group_option = click.option(
    "--group",
    "-g",
    callback=_validate_group,
    help="Only examples in this group.",
)


@click.group(cls=clickx.ExtraGroup)
@click.pass_context
def examples(ctx: click.Context) -> None:
    """List and run the example catalogue."""
    ctx.obj = load_examples()


@examples.command("list")
@group_option
@click.pass_obj
def list_(catalogue: ExampleCatalogue, group: str | None) -> None:
    """Show the registered examples as a table."""
    table = Table(title="calque examples")
    table.add_column("Group", style="cyan", no_wrap=True)
    table.add_column("Example", style="bold", no_wrap=True)
    table.add_column("Summary")
    for case in catalogue.cases(group=group):
        table.add_row(case.group, case.name, case.summary)
    _console(click.get_current_context()).print(table)


@examples.command()
@click.argument("name")
@click.pass_obj
def show(catalogue: ExampleCatalogue, name: str) -> None:
    """Describe the example called NAME."""
    try:
        case = catalogue.get(name)
    except CatalogueError as e:
        error(str(e))
        raise click.exceptions.Exit(1) from e
    click.secho(case.name, bold=True)
    click.echo(f"group: {case.group}")
    click.echo()
    click.echo(inspect.getdoc(case.function) or case.summary)


def _echo_report(report: RunReport) -> None:
    for result in report.results:
        label, colour = OUTCOME_LABELS[result.outcome]
        click.echo(
            click.style(f"{label:<5}", fg=colour, bold=True)
            + f" {result.case.group}/{result.case.name}"
        )
        if result.message:
            click.echo(f"      {result.message}")


@examples.command()
@group_option
@click.option(
    "--keyword",
    "-k",
    help="Only examples whose name contains this text (case-insensitive).",
)
@click.option(
    "--fail-fast",
    "-x",
    is_flag=True,
    help="Stop after the first example that does not pass.",
)
@click.pass_context
def run(
    ctx: click.Context, group: str | None, keyword: str | None, fail_fast: bool
) -> None:
    """Run examples and report PASS/FAIL/ERROR for each."""
    catalogue: ExampleCatalogue = ctx.obj
    selected = catalogue.cases(group=group, keyword=keyword)
    if not selected:
        warn("No examples selected.")
        return

    report = run_cases(selected, fail_fast=fail_fast)
    _echo_report(report)

    if report.ok:
        success(report.summary())
    else:
        error(report.summary())
        ctx.exit(1)
