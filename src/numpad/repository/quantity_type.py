# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from loguru import logger
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from numpad import configuration, time
from numpad.model.aggregation_type import AggregationType
from numpad.model.entity_id import EntityId, generate_entity_id
from numpad.model.period import AggregationPeriod
from numpad.model.quantity_type import QuantityType
from numpad.model.value_format import ValueFormat
from numpad.repository.entry import ENTRY_REPO
from numpad.service.invalidation import TOTALS_INVALIDATOR


class QuantityTypeRepository:
    def __init__(self) -> None:
        self._quantity_types: Optional[list[QuantityType]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def quantity_types(self) -> list[QuantityType]:
        if self._quantity_types is None:
            self.__load_data()
        if self._quantity_types is None:
            raise ValueError()
        return self._quantity_types

    def __load_data(self) -> None:
        self._quantity_types = []
        if not configuration.DATA_QUANTITY_TYPES_DIR.is_dir():
            return
        for file_path in configuration.DATA_QUANTITY_TYPES_DIR.iterdir():
            if file_path.suffix != ".yaml":
                continue
            try:
                raw_quantity_type = load(file_path.read_text(), Loader=Loader)
            except YAMLError as e:
                logger.warning("Skipping unreadable quantity type file {}: {}", file_path, e)
                continue
            if raw_quantity_type is not None:
                self._quantity_types.append(
                    self.__convert_quantity_type_for_deserialization(raw_quantity_type)
                )

    def __save_data(self) -> None:
        configuration.DATA_QUANTITY_TYPES_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for quantity_type in self.quantity_types:
            if quantity_type["id"] in self._dirty_ids:
                serializable_quantity_type = (
                    self.__convert_quantity_type_for_serialization(
                        deepcopy(quantity_type)
                    )
                )
                file_path = (
                    configuration.DATA_QUANTITY_TYPES_DIR / f"{quantity_type['id']}.yaml"
                )
                file_path.write_text(dump(serializable_quantity_type, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_QUANTITY_TYPES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._quantity_types is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._quantity_types = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_quantity_type_for_serialization(
        self, quantity_type: QuantityType
    ) -> dict[str, Any]:
        serializable_quantity_type = cast(dict[str, Any], quantity_type)
        for key in (
            "entity_type",
            "value_format",
            "aggregation_type",
            "aggregation_period",
        ):
            serializable_quantity_type[key] = str(serializable_quantity_type[key])
        for key in ("created", "updated", "last_used"):
            serializable_quantity_type[key] = time.datetime_to_iso_str(
                serializable_quantity_type[key]
            )
        return serializable_quantity_type

    def __convert_quantity_type_for_deserialization(
        self, quantity_type: dict[str, Any]
    ) -> QuantityType:
        deserializable_quantity_type = quantity_type
        deserializable_quantity_type["value_format"] = ValueFormat(
            deserializable_quantity_type["value_format"]
        )
        deserializable_quantity_type["aggregation_type"] = AggregationType(
            deserializable_quantity_type["aggregation_type"]
        )
        deserializable_quantity_type["aggregation_period"] = AggregationPeriod(
            deserializable_quantity_type["aggregation_period"]
        )
        for key in ("created", "updated", "last_used"):
            deserializable_quantity_type[key] = time.datetime_from_str(
                deserializable_quantity_type[key]
            )
        return cast(QuantityType, deserializable_quantity_type)

    def save_new_quantity_type(self, quantity_type: QuantityType) -> EntityId:
        self.is_dirty = True

        quantity_type["id"] = generate_entity_id()
        self.quantity_types.append(quantity_type)
        self._dirty_ids.add(quantity_type["id"])

        logger.debug("Created quantity type {} ({})", quantity_type["name"], quantity_type["id"])
        return quantity_type["id"]

    def modify_quantity_type(
        self,
        id: EntityId,
        name: Optional[str] = None,
        value_format: Optional[ValueFormat] = None,
        aggregation_type: Optional[AggregationType] = None,
        aggregation_period: Optional[AggregationPeriod] = None,
        icon: Optional[str] = None,
        color: Optional[str] = None,
        sort_order: Optional[int] = None,
        hidden: Optional[bool] = None,
        compound_config: Optional[str] = None,
        remove_compound: bool = False,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        quantity_type = self.__find(id)
        quantity_type["updated"] = time.now_utc()
        if name is not None:
            quantity_type["name"] = name
        if value_format is not None:
            quantity_type["value_format"] = value_format
        if aggregation_type is not None:
            quantity_type["aggregation_type"] = aggregation_type
        if aggregation_period is not None:
            quantity_type["aggregation_period"] = aggregation_period
        if icon is not None:
            quantity_type["icon"] = icon
        if color is not None:
            quantity_type["color"] = color
        if sort_order is not None:
            quantity_type["sort_order"] = sort_order
        if hidden is not None:
            quantity_type["hidden"] = hidden
        if compound_config is not None:
            quantity_type["is_compound"] = True
            quantity_type["compound_config"] = compound_config

        if remove_compound:
            quantity_type["is_compound"] = False
            quantity_type["compound_config"] = None

        TOTALS_INVALIDATOR.notify(id)

    def touch_last_used(self, id: EntityId) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)
        self.__find(id)["last_used"] = time.now_utc()

    def delete_quantity_type(self, id: EntityId) -> int:
        """Hard delete, cascading to the entries of the type. Returns how many entries went."""
        self.is_dirty = True
        quantity_type = self.__find(id)
        removed = ENTRY_REPO.delete_entries_for_quantity_type(id)
        self.quantity_types.remove(quantity_type)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

        logger.debug("Deleted quantity type {} ({})", quantity_type["name"], id)
        TOTALS_INVALIDATOR.notify(id)
        return removed

    def get_all_quantity_types(self) -> list[QuantityType]:
        return deepcopy(self.quantity_types)

    def get_quantity_type(self, id: EntityId) -> QuantityType:
        return deepcopy(self.__find(id))

    def __find(self, id: EntityId) -> QuantityType:
        matches = [
            quantity_type for quantity_type in self.quantity_types if quantity_type["id"] == id
        ]
        if len(matches) == 0:
            raise KeyError(f"Unknown quantity type: {id}")
        return matches[0]


QUANTITY_TYPE_REPO = QuantityTypeRepository()
