# SPDX-License-Identifier: MIT

from rich.console import Console

from symera.model.event import Event
from symera.model.task import Task
from symera.service.calendar import is_task_completed
from symera.view.state import get_no_color


def report_console() -> Console:
    return Console(no_color=get_no_color())


def task_state(task: Task) -> str:
    """
    Get the state symbol for a task.

    Args:
        task: The task to get the state for

    Returns:
        State symbol: "X" if completed, "~" if in progress, " " otherwise
    """
    if is_task_completed(task):
        return "X"
    elif task.get("status") == "in_progress":
        return "~"
    return " "


def event_title(event: Event) -> str:
    name = event.get("name")
    if name is None or name == "":
        return "[no name]"
    return name


def task_title(task: Task) -> str:
    title = task.get("title")
    if title is None or title == "":
        return "[no title]"
    return title


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."


def progress_bar(progress: int, width: int = 10) -> str:
    filled = (progress * width) // 100
    return "█" * filled + "░" * (width - filled)
