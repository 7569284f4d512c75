# SPDX-License-Identifier: MIT

import atexit

from numpad.repository.configuration import CONFIGURATION_REPO
from numpad.repository.entry import ENTRY_REPO
from numpad.repository.id_map import ID_MAP_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()
    QUANTITY_TYPE_REPO.flush()
    ENTRY_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_all)
