# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, Optional

import pendulum

from numpad.model.entity_id import EntityId


class Predicate(ABC):
    @abstractmethod
    def matches(self, item: dict[str, Any]) -> bool: ...

    def filter(self, items: list[Any]) -> list[Any]:
        return [item for item in items if self.matches(item)]


class And(Predicate):
    def __init__(self, *predicates: Predicate) -> None:
        self.predicates: list[Predicate] = list(predicates)

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, item: dict[str, Any]) -> bool:
        return all(predicate.matches(item) for predicate in self.predicates)


class Equals(Predicate):
    def __init__(self, property: str, value: Any) -> None:
        self.property = property
        self.value = value

    def matches(self, item: dict[str, Any]) -> bool:
        return self.property in item and item[self.property] == self.value


class AtOrAfter(Predicate):
    """Inclusive lower bound on a datetime property."""

    def __init__(self, property: str, bound: pendulum.DateTime) -> None:
        self.property = property
        self.bound = bound

    def matches(self, item: dict[str, Any]) -> bool:
        value = item.get(self.property)
        return value is not None and value >= self.bound


def entries_query(
    quantity_type_id: EntityId, since: Optional[pendulum.DateTime] = None
) -> Predicate:
    """Predicate selecting the entries of one quantity type inside a window."""
    query = And(Equals("quantity_type_id", quantity_type_id))
    if since is not None:
        query.add_predicate(AtOrAfter("timestamp", since))
    return query
