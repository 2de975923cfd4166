# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from symera.logger import setup_logging
from symera.repository.configuration import CONFIGURATION_REPO
from symera.terminal import calendar, configuration
from symera.terminal.custom_typer import OrderedTyperGroup
from symera.terminal.dashboard import dashboard
from symera.terminal.event import events
from symera.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="Symera - event planning calendar and dashboard",
    no_args_is_help=True,
)
app.add_typer(calendar.app, name="calendar, c")
app.add_typer(configuration.app, name="config, cf")
app.command(name="dashboard, d")(dashboard)
app.command(name="events, e")(events)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Print reports without colors"),
    ] = False,
) -> None:
    """
    Symera - event planning calendar and dashboard

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_color:
        view_state.set_no_color(True)
    if verbose:
        setup_logging(CONFIGURATION_REPO.get_config()["log_level"], verbose=True)


def run() -> None:
    app()
