# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from symera import configuration

_logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        self._config = deepcopy(configuration.DEFAULT_CONFIGURATION)
        if loaded is None:
            return

        # Migration: keys missing from older config files keep their defaults
        for key in configuration.DEFAULT_CONFIGURATION:
            if key in loaded:
                self._config[key] = loaded[key]  # type: ignore[literal-required]
            else:
                _logger.debug("config key %s missing, using default", key)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        timezone: Optional[str] = None,
        upcoming_window_days: Optional[int] = None,
        week_starts_on: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True
        if data_path is not None:
            self.config["data_path"] = data_path
        if timezone is not None:
            self.config["timezone"] = timezone
        if upcoming_window_days is not None:
            self.config["upcoming_window_days"] = upcoming_window_days
        if week_starts_on is not None:
            self.config["week_starts_on"] = week_starts_on
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
