# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from symera import configuration
from symera.logger import setup_logging
from symera.repository.configuration import CONFIGURATION_REPO
from symera.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    setup_logging(config["log_level"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(configuration.DEFAULT_CONFIGURATION), Dumper=Dumper)
        )


def __ensure_data_files() -> None:
    for path in [configuration.DATA_EVENTS_PATH, configuration.DATA_TASKS_PATH]:
        if not path.is_file():
            path.write_text(dump([], Dumper=Dumper))
