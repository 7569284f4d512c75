# SPDX-License-Identifier: MIT

from typing import Optional, TypeIs, get_args

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from numpad import configuration
from numpad.model.entity_id import EntityId
from numpad.model.id_map import IdMap, IdMapEntityType
from numpad.template.id_map import get_id_map_template

ENTITY_TYPES = get_args(IdMapEntityType)


class IdMapRepository:
    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        if configuration.DATA_ID_MAP_PATH.is_file():
            self._id_map = load(configuration.DATA_ID_MAP_PATH.read_text(), Loader=Loader)
        if self._id_map is None:
            self._id_map = get_id_map_template()

    def __save_data(self, id_map: IdMap) -> None:
        configuration.DATA_ID_MAP_PATH.write_text(dump(dict(id_map), Dumper=Dumper))

    def flush(self) -> None:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False

    def reset(self) -> None:
        self._id_map = None
        self.is_dirty = False

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, entity_type: str, entity_id: EntityId) -> int:
        """
        Create a new synthetic id to associate with an entity id
        """
        if not self.__narrow_to_entity_type(entity_type):
            raise TypeError(
                f"{IdMapRepository.associate_id.__name__}: expected one of {ENTITY_TYPES}"
            )

        mapping = self.id_map[entity_type]
        if entity_id in mapping["real_to_synthetic"]:
            return mapping["real_to_synthetic"][entity_id]

        self.is_dirty = True
        next_id = len(mapping["real_to_synthetic"]) + 1
        mapping["real_to_synthetic"][entity_id] = next_id
        mapping["synthetic_to_real"][next_id] = entity_id
        return next_id

    def get_real_id(self, entity_type: str, synthetic_id: int) -> Optional[EntityId]:
        """
        Get the entity id associated with a synthetic id
        """
        if not self.__narrow_to_entity_type(entity_type):
            raise TypeError(
                f"{IdMapRepository.get_real_id.__name__}: expected one of {ENTITY_TYPES}"
            )
        return self.id_map[entity_type]["synthetic_to_real"].get(synthetic_id)

    def __narrow_to_entity_type(self, entity_type: str) -> TypeIs[IdMapEntityType]:
        return entity_type in ENTITY_TYPES


ID_MAP_REPO = IdMapRepository()
