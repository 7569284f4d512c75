# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "numpad"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_QUANTITY_TYPES_DIR: Path = DATA_PATH / "quantity_types"
DATA_ENTRIES_DIR: Path = DATA_PATH / "entries"
DATA_LOGS_DIR: Path = DATA_PATH / "logs"

WeekStart = Literal["monday", "sunday"]
GroupingName = Literal["day", "week", "month", "year", "all"]

DEFAULT_DURATION_MAX_MINUTES = 1439


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    week_start: WeekStart
    # When true, a value of 0 counts as "nothing entered" in the entry path
    zero_is_empty: bool
    # Upper bound for standalone duration entries, None disables the check
    duration_max_minutes: Optional[int]
    log_level: str
    log_to_file: bool
    default_grouping: NotRequired[GroupingName]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "week_start": "monday",
        "zero_is_empty": False,
        "duration_max_minutes": DEFAULT_DURATION_MAX_MINUTES,
        "log_level": "WARNING",
        "log_to_file": False,
        "default_grouping": "day",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ID_MAP_PATH, DATA_QUANTITY_TYPES_DIR, DATA_ENTRIES_DIR, DATA_LOGS_DIR

    DATA_PATH = data_path
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_QUANTITY_TYPES_DIR = DATA_PATH / "quantity_types"
    DATA_ENTRIES_DIR = DATA_PATH / "entries"
    DATA_LOGS_DIR = DATA_PATH / "logs"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
