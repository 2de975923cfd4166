# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from symera.errors import SymeraError
from symera.model.event import Event
from symera.model.task import Task
from symera.repository.event import EVENT_REPO
from symera.repository.task import TASK_REPO

console = Console(stderr=True)


def load_snapshot() -> tuple[list[Event], list[Task]]:
    """Read events (with their tasks attached) and tasks, exiting on unreadable data."""
    try:
        tasks = TASK_REPO.get_all_tasks()
        events = EVENT_REPO.get_events_with_tasks(tasks)
    except SymeraError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return events, tasks
