# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from symera import configuration
from symera.errors import SnapshotError
from symera.model.task import Task
from symera.service.normalize import normalize_tasks

_logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        path = configuration.DATA_TASKS_PATH
        if not path.is_file():
            _logger.debug("no tasks snapshot at %s", path)
            self._tasks = []
            return

        try:
            raw_tasks = load(path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise SnapshotError(f"{path}: {e}") from e

        if raw_tasks is None:
            raw_tasks = []
        if not isinstance(raw_tasks, list):
            raise SnapshotError(f"{path}: expected a list of tasks")

        self._tasks = normalize_tasks(raw_tasks)
        _logger.debug("loaded %d tasks from %s", len(self._tasks), path)

    def reset(self) -> None:
        self._tasks = None

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)


TASK_REPO = TaskRepository()
