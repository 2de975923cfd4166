# SPDX-License-Identifier: MIT

from symera.model.status import TaskPriority, TaskStatus
from symera.model.task import Task


def get_task_template() -> Task:
    return {
        "id": None,
        "title": None,
        "event_id": None,
        "due_date": None,
        "status": TaskStatus.TODO.value,
        "priority": TaskPriority.MEDIUM.value,
    }
