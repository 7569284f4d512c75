# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from numpad import configuration
from numpad.model.id_map import IdMap
from numpad.observability import configure_logging
from numpad.repository.configuration import CONFIGURATION_REPO
from numpad.template.id_map import get_id_map_template
from numpad.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(
        config["log_level"],
        configuration.DATA_LOGS_DIR if config["log_to_file"] else None,
    )
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_ID_MAP_PATH.is_file():
        id_map: IdMap = get_id_map_template()
        configuration.DATA_ID_MAP_PATH.write_text(dump(dict(id_map), Dumper=Dumper))

    # Directory-based entity stores (one file per entity)
    configuration.DATA_QUANTITY_TYPES_DIR.mkdir(parents=True, exist_ok=True)
    configuration.DATA_ENTRIES_DIR.mkdir(parents=True, exist_ok=True)
