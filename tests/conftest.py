"""Shared test fixtures for numpad tests."""

from collections.abc import Iterator
from pathlib import Path

import pendulum
import pytest

from numpad import configuration
from numpad.repository.configuration import CONFIGURATION_REPO
from numpad.repository.entry import ENTRY_REPO
from numpad.repository.id_map import ID_MAP_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.view import state as view_state

LOCAL_TIMEZONE = "America/New_York"


def reset_repositories() -> None:
    CONFIGURATION_REPO.reset()
    ID_MAP_REPO.reset()
    QUANTITY_TYPE_REPO.reset()
    ENTRY_REPO.reset()


@pytest.fixture(autouse=True)
def local_timezone() -> Iterator[None]:
    """Pin the local timezone so calendar boundaries are reproducible."""
    with pendulum.test_local_timezone(pendulum.timezone(LOCAL_TIMEZONE)):
        yield


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point every repository at an empty data directory."""
    original_data_path = configuration.DATA_PATH
    root = tmp_path / "data"
    configuration.set_data_path(root)
    configuration.DATA_QUANTITY_TYPES_DIR.mkdir(parents=True)
    configuration.DATA_ENTRIES_DIR.mkdir(parents=True)
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    reset_repositories()
    view_state.set_show_header(False)

    yield root

    reset_repositories()
    view_state.set_show_header(True)
    configuration.set_data_path(original_data_path)
