"""The hospital ward CLI: console and TUI entrypoints."""

import logging
import sys

import click
from click_default_group import DefaultGroup

from hospital_ward.console import Console
from hospital_ward.exceptions import ValidationError
from hospital_ward.settings import SETTINGS
from hospital_ward.system import HospitalSystem


def ward_options(func):
    func = click.option(
        "--last-bed",
        type=int,
        default=lambda: SETTINGS.last_bed,
        help="Label of the last bed.",
    )(func)
    func = click.option(
        "--first-bed",
        type=int,
        default=lambda: SETTINGS.first_bed,
        help="Label of the first bed.",
    )(func)
    func = click.option(
        "--ward-name",
        default=lambda: SETTINGS.ward_name,
        help="Name of the ward.",
    )(func)
    return func


@click.group(cls=DefaultGroup, default="console", default_if_no_args=True)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=lambda: SETTINGS.log_level,
    help="Logging level for messages written to stderr.",
)
def cli(log_level: str) -> None:
    """Manage the patients, doctors and beds of a single hospital ward."""
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@ward_options
def console(ward_name: str | None, first_bed: int | None, last_bed: int | None) -> None:
    """Run the menu-driven operator console."""
    session = Console(sys.stdin, sys.stdout)
    try:
        session.create_ward(ward_name, first_bed, last_bed)
    except EOFError:
        raise click.Abort() from None
    session.run()


@cli.command()
@ward_options
def tui(ward_name: str | None, first_bed: int | None, last_bed: int | None) -> None:
    """Launch the ward dashboard."""
    from hospital_ward.tui import WardApp

    if ward_name is None:
        ward_name = click.prompt("Name of the ward")
    if first_bed is None:
        first_bed = click.prompt("Label of the first bed", type=int)
    if last_bed is None:
        last_bed = click.prompt("Label of the last bed", type=int)
    try:
        system = HospitalSystem(ward_name, first_bed, last_bed)
    except ValidationError as e:
        raise click.UsageError(str(e)) from None
    WardApp(system).run()


if __name__ == "__main__":
    cli()
