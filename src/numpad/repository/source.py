# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from copy import deepcopy
from typing import Optional

import pendulum

from numpad.model.entity_id import EntityId
from numpad.model.entry import Entry
from numpad.model.quantity_type import QuantityType
from numpad.query.predicate import entries_query


class QuantitySource(ABC):
    """
    Narrow read interface the aggregation code depends on.

    `since` is an inclusive lower bound on entry timestamps that the
    implementation applies while reading, so a backing store can skip
    entries outside the aggregation window.
    """

    @abstractmethod
    def entries(
        self,
        quantity_type_id: EntityId,
        since: Optional[pendulum.DateTime] = None,
    ) -> list[Entry]: ...

    @abstractmethod
    def quantity_types(self) -> list[QuantityType]: ...


class InMemorySource(QuantitySource):
    def __init__(
        self,
        quantity_types: Optional[list[QuantityType]] = None,
        entries: Optional[list[Entry]] = None,
    ) -> None:
        self._quantity_types = quantity_types if quantity_types is not None else []
        self._entries = entries if entries is not None else []

    def entries(
        self,
        quantity_type_id: EntityId,
        since: Optional[pendulum.DateTime] = None,
    ) -> list[Entry]:
        return deepcopy(entries_query(quantity_type_id, since).filter(self._entries))

    def quantity_types(self) -> list[QuantityType]:
        return deepcopy(self._quantity_types)


class RepositorySource(QuantitySource):
    """Source backed by the YAML entity repositories."""

    def entries(
        self,
        quantity_type_id: EntityId,
        since: Optional[pendulum.DateTime] = None,
    ) -> list[Entry]:
        from numpad.repository.entry import ENTRY_REPO

        return ENTRY_REPO.get_entries_for_quantity_type(quantity_type_id, since)

    def quantity_types(self) -> list[QuantityType]:
        from numpad.repository.quantity_type import QUANTITY_TYPE_REPO

        return QUANTITY_TYPE_REPO.get_all_quantity_types()
