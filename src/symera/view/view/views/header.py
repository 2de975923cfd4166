# SPDX-License-Identifier: MIT

from typing import Optional

from rich.padding import Padding

from symera.view.state import get_show_header
from symera.view.view.util import report_console


def header(sub_header: Optional[str] = None) -> None:
    """Print the application header unless --no-header was given.

    Args:
        sub_header: Report name printed under the header
    """
    if not get_show_header():
        return

    console = report_console()
    console.print(Padding("[dark_orange]symera[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
