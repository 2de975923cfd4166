# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from symera.repository.configuration import CONFIGURATION_REPO
from symera.time import now_in, to_day


def today() -> pendulum.Date:
    """Current calendar day in the configured time zone."""
    return now_in(CONFIGURATION_REPO.get_config()["timezone"]).date()


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        parsed = to_day(date)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date: {date}")
        return parsed

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today().add(days=int(date))

    if date == "today" or date == "t":
        return today()
    if date == "yesterday" or date == "y":
        return today().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_timezone(timezone: str) -> str:
    try:
        pendulum.timezone(timezone)
    except (KeyError, ValueError) as e:
        raise typer.BadParameter(f"Unknown time zone: {timezone}") from e
    return timezone
