# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum
from loguru import logger

from numpad.configuration import WeekStart
from numpad.model.entity_id import EntityId
from numpad.model.quantity_type import QuantityType
from numpad.repository.source import QuantitySource
from numpad.service.period import get_window_start
from numpad.service.quantity_aggregator import calculate_total_from_source
from numpad.time import datetime_to_iso_str_optional, now_utc

type InvalidationListener = Callable[[EntityId], None]


class TotalsInvalidator:
    """
    Notifies listeners that totals of a quantity type may be stale.

    Repositories call notify() after every write that can change a total;
    listeners recompute on their next read.
    """

    def __init__(self) -> None:
        self._listeners: list[InvalidationListener] = []

    def subscribe(self, listener: InvalidationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, quantity_type_id: EntityId) -> None:
        logger.debug("Totals for quantity type {} are stale", quantity_type_id)
        for listener in list(self._listeners):
            listener(quantity_type_id)


TOTALS_INVALIDATOR = TotalsInvalidator()


type CacheKey = tuple[str, str, Optional[str]]


class TotalsCache:
    """
    Caller-side cache of current totals, keyed by quantity type.

    A cached value is reused only while the aggregation settings and the
    window start are unchanged, and is dropped as soon as the invalidator
    reports a write for its quantity type.
    """

    def __init__(
        self,
        source: QuantitySource,
        invalidator: TotalsInvalidator = TOTALS_INVALIDATOR,
        week_start: WeekStart = "monday",
    ) -> None:
        self._source = source
        self._week_start = week_start
        self._totals: dict[EntityId, tuple[CacheKey, float]] = {}
        self._unsubscribe = invalidator.subscribe(self.invalidate)

    @property
    def week_start(self) -> WeekStart:
        return self._week_start

    def get_total(
        self,
        quantity_type: QuantityType,
        now: Optional[pendulum.DateTime] = None,
    ) -> float:
        reference = now if now is not None else now_utc()
        if quantity_type["id"] is None:
            return 0.0

        window_start = get_window_start(
            quantity_type["aggregation_period"], reference, self._week_start
        )
        key: CacheKey = (
            quantity_type["aggregation_type"],
            quantity_type["aggregation_period"],
            datetime_to_iso_str_optional(window_start),
        )

        cached = self._totals.get(quantity_type["id"])
        if cached is not None and cached[0] == key:
            return cached[1]

        total = calculate_total_from_source(
            quantity_type, self._source, reference, self._week_start
        )
        self._totals[quantity_type["id"]] = (key, total)
        return total

    def invalidate(self, quantity_type_id: EntityId) -> None:
        self._totals.pop(quantity_type_id, None)

    def clear(self) -> None:
        self._totals.clear()

    def close(self) -> None:
        self._unsubscribe()
        self._totals.clear()
