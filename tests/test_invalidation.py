"""Tests for service/invalidation.py: change notification and cached totals."""

from numpad.model.aggregation_type import AggregationType
from numpad.model.period import AggregationPeriod
from numpad.repository.entry import ENTRY_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.repository.source import InMemorySource, RepositorySource
from numpad.service.invalidation import TotalsCache, TotalsInvalidator
from tests.factories import local, make_entry, make_quantity_type

NOON = local(2025, 10, 16, 12)


class CountingSource(InMemorySource):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reads = 0

    def entries(self, quantity_type_id, since=None):
        self.reads += 1
        return super().entries(quantity_type_id, since)


def test_subscribe_and_unsubscribe():
    invalidator = TotalsInvalidator()
    seen = []
    unsubscribe = invalidator.subscribe(seen.append)

    invalidator.notify("a")
    unsubscribe()
    invalidator.notify("b")
    unsubscribe()

    assert seen == ["a"]


def test_cache_reuses_total_until_invalidated():
    steps = make_quantity_type("Steps")
    entries = [make_entry(steps, 100.0, NOON)]
    source = CountingSource([steps], entries)
    invalidator = TotalsInvalidator()
    cache = TotalsCache(source, invalidator)

    assert cache.get_total(steps, NOON) == 100.0
    assert cache.get_total(steps, NOON) == 100.0
    assert source.reads == 1

    entries.append(make_entry(steps, 50.0, NOON))
    invalidator.notify(steps["id"])
    assert cache.get_total(steps, NOON) == 150.0
    assert source.reads == 2


def test_cache_recomputes_when_window_moves():
    water = make_quantity_type("Water", aggregation_period=AggregationPeriod.DAILY)
    source = CountingSource([water], [make_entry(water, 8.0, NOON)])
    cache = TotalsCache(source, TotalsInvalidator())

    assert cache.get_total(water, NOON) == 8.0
    assert cache.get_total(water, NOON.add(hours=2)) == 8.0
    assert source.reads == 1

    assert cache.get_total(water, local(2025, 10, 17, 9)) == 0.0
    assert source.reads == 2


def test_cache_recomputes_when_aggregation_changes():
    steps = make_quantity_type("Steps")
    source = CountingSource(
        [steps], [make_entry(steps, 100.0, NOON), make_entry(steps, 300.0, NOON)]
    )
    cache = TotalsCache(source, TotalsInvalidator())

    assert cache.get_total(steps, NOON) == 400.0
    steps["aggregation_type"] = AggregationType.MAX
    assert cache.get_total(steps, NOON) == 300.0


def test_closed_cache_stops_listening():
    invalidator = TotalsInvalidator()
    cache = TotalsCache(InMemorySource(), invalidator)
    cache.close()
    assert invalidator._listeners == []


def test_repository_writes_invalidate_cached_totals(data_path):
    steps = make_quantity_type("Steps")
    QUANTITY_TYPE_REPO.save_new_quantity_type(steps)
    cache = TotalsCache(RepositorySource())

    first = make_entry(steps, 1000.0, NOON)
    ENTRY_REPO.save_new_entry(first)
    assert cache.get_total(steps, NOON) == 1000.0

    ENTRY_REPO.modify_entry(first["id"], value=1200.0)
    assert cache.get_total(steps, NOON) == 1200.0

    ENTRY_REPO.save_new_entry(make_entry(steps, 300.0, NOON))
    assert cache.get_total(steps, NOON) == 1500.0

    ENTRY_REPO.delete_entry(first["id"])
    assert cache.get_total(steps, NOON) == 300.0

    cache.close()
