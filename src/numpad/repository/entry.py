# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from loguru import logger
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from numpad import configuration, time
from numpad.model.entity_id import EntityId, generate_entity_id
from numpad.model.entry import Entry
from numpad.query.predicate import entries_query
from numpad.service.invalidation import TOTALS_INVALIDATOR


class EntryRepository:
    def __init__(self) -> None:
        self._entries: Optional[list[Entry]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        self._entries = []
        if not configuration.DATA_ENTRIES_DIR.is_dir():
            return
        for file_path in configuration.DATA_ENTRIES_DIR.iterdir():
            if file_path.suffix != ".yaml":
                continue
            try:
                raw_entry = load(file_path.read_text(), Loader=Loader)
            except YAMLError as e:
                logger.warning("Skipping unreadable entry file {}: {}", file_path, e)
                continue
            if raw_entry is not None:
                self._entries.append(
                    self.__convert_entry_for_deserialization(raw_entry)
                )

    def __save_data(self) -> None:
        configuration.DATA_ENTRIES_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for entry in self.entries:
            if entry["id"] in self._dirty_ids:
                serializable_entry = self.__convert_entry_for_serialization(
                    deepcopy(entry)
                )
                file_path = configuration.DATA_ENTRIES_DIR / f"{entry['id']}.yaml"
                file_path.write_text(dump(serializable_entry, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_ENTRIES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._entries is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._entries = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["entity_type"] = str(serializable_entry["entity_type"])
        serializable_entry["value"] = float(serializable_entry["value"])
        for key in ("timestamp", "created", "updated"):
            serializable_entry[key] = time.datetime_to_iso_str(serializable_entry[key])
        return serializable_entry

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        deserializable_entry = entry
        deserializable_entry["value"] = float(deserializable_entry["value"])
        deserializable_entry["notes"] = deserializable_entry.get("notes") or ""
        for key in ("timestamp", "created", "updated"):
            deserializable_entry[key] = time.datetime_from_str(deserializable_entry[key])
        return cast(Entry, deserializable_entry)

    def save_new_entry(self, entry: Entry) -> EntityId:
        self.is_dirty = True

        entry["id"] = generate_entity_id()
        self.entries.append(entry)
        self._dirty_ids.add(entry["id"])

        TOTALS_INVALIDATOR.notify(entry["quantity_type_id"])
        return entry["id"]

    def modify_entry(
        self,
        id: EntityId,
        value: Optional[float] = None,
        notes: Optional[str] = None,
        timestamp: Optional[pendulum.DateTime] = None,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        entry = self.__find(id)
        entry["updated"] = time.now_utc()
        if value is not None:
            entry["value"] = float(value)
        if notes is not None:
            entry["notes"] = notes
        if timestamp is not None:
            entry["timestamp"] = timestamp

        TOTALS_INVALIDATOR.notify(entry["quantity_type_id"])

    def delete_entry(self, id: EntityId) -> None:
        self.is_dirty = True
        entry = self.__find(id)
        self.entries.remove(entry)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

        TOTALS_INVALIDATOR.notify(entry["quantity_type_id"])

    def delete_entries_for_quantity_type(self, quantity_type_id: EntityId) -> int:
        """Cascade delete of every entry owned by a quantity type."""
        owned_ids = [
            entry["id"]
            for entry in self.entries
            if entry["quantity_type_id"] == quantity_type_id and entry["id"] is not None
        ]
        for entry_id in owned_ids:
            self.delete_entry(entry_id)
        return len(owned_ids)

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def get_entry(self, id: EntityId) -> Entry:
        return deepcopy(self.__find(id))

    def get_entries_for_quantity_type(
        self,
        quantity_type_id: EntityId,
        since: Optional[pendulum.DateTime] = None,
    ) -> list[Entry]:
        """Entries of one quantity type, newest first, at or after `since` when given."""
        matching: list[Entry] = entries_query(quantity_type_id, since).filter(
            self.entries
        )
        matching.sort(key=lambda entry: entry["timestamp"], reverse=True)
        return deepcopy(matching)

    def __find(self, id: EntityId) -> Entry:
        matches = [entry for entry in self.entries if entry["id"] == id]
        if len(matches) == 0:
            raise KeyError(f"Unknown entry: {id}")
        return matches[0]


ENTRY_REPO = EntryRepository()
