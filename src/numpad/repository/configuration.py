# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from loguru import logger
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from numpad import configuration


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
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if self._config is None:
            logger.debug("No configuration at {}, using defaults", configuration.APP_CONFIG_PATH)
            self._config = configuration.get_default_configuration()
            return

        # Back-fill settings added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
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
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        week_start: Optional[configuration.WeekStart] = None,
        zero_is_empty: Optional[bool] = None,
        duration_max_minutes: Optional[int] = None,
        remove_duration_max_minutes: bool = False,
        log_level: Optional[str] = None,
        log_to_file: Optional[bool] = None,
        default_grouping: Optional[configuration.GroupingName] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if week_start is not None:
            self.config["week_start"] = week_start
        if zero_is_empty is not None:
            self.config["zero_is_empty"] = zero_is_empty
        if duration_max_minutes is not None:
            self.config["duration_max_minutes"] = duration_max_minutes
        if remove_duration_max_minutes:
            self.config["duration_max_minutes"] = None
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if log_to_file is not None:
            self.config["log_to_file"] = log_to_file
        if default_grouping is not None:
            self.config["default_grouping"] = default_grouping


CONFIGURATION_REPO = ConfigurationRepository()
