# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "symera"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_EVENTS_PATH: Path = DATA_PATH / "events.yaml"
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    timezone: str
    upcoming_window_days: int
    week_starts_on: int
    show_header: bool
    log_level: str


DEFAULT_CONFIGURATION: Configuration = {
    "data_path": None,
    "timezone": "UTC",
    "upcoming_window_days": 30,
    # Sunday, using pendulum's Monday = 0 numbering
    "week_starts_on": 6,
    "show_header": True,
    "log_level": "WARNING",
}


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_EVENTS_PATH, DATA_TASKS_PATH

    DATA_PATH = data_path
    DATA_EVENTS_PATH = DATA_PATH / "events.yaml"
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
