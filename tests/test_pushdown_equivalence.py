"""
Filtering entries in memory and pushing the window bound down to storage must
select exactly the same entries.
"""

import random

import pytest

from numpad.model.aggregation_type import AggregationType
from numpad.model.period import AggregationPeriod
from numpad.repository.entry import ENTRY_REPO
from numpad.repository.quantity_type import QUANTITY_TYPE_REPO
from numpad.repository.source import InMemorySource, RepositorySource
from numpad.service.period import filter_entries, get_window_start
from numpad.service.quantity_aggregator import (
    calculate_total,
    calculate_total_from_source,
)
from tests.factories import local, make_entry, make_quantity_type

SEEDS = range(25)


def random_history(rng, quantity_type, count=60):
    """Entries spread over roughly two months, with some exactly on midnights."""
    entries = []
    for _ in range(count):
        if rng.random() < 0.2:
            timestamp = local(2025, rng.choice([9, 10]), rng.randint(1, 28))
        else:
            timestamp = local(
                2025,
                rng.choice([9, 10]),
                rng.randint(1, 28),
                rng.randint(0, 23),
                rng.randint(0, 59),
            )
        entries.append(
            make_entry(quantity_type, float(rng.randint(-50, 500)), timestamp)
        )
    return entries


def random_reference(rng):
    return local(2025, 10, rng.randint(1, 28), rng.randint(0, 23), rng.randint(0, 59))


def entry_ids(entries):
    return sorted(entry["id"] for entry in entries)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("period", list(AggregationPeriod))
@pytest.mark.parametrize("week_start", ["monday", "sunday"])
def test_in_memory_filter_matches_source_bound(seed, period, week_start):
    rng = random.Random(seed)
    quantity_type = make_quantity_type()
    other = make_quantity_type("Other")
    entries = random_history(rng, quantity_type) + random_history(rng, other, 10)
    reference = random_reference(rng)

    in_memory = filter_entries(
        period,
        [entry for entry in entries if entry["quantity_type_id"] == quantity_type["id"]],
        reference,
        week_start,
    )
    since = get_window_start(period, reference, week_start)
    pushed_down = InMemorySource([quantity_type, other], entries).entries(
        quantity_type["id"], since
    )

    assert entry_ids(in_memory) == entry_ids(pushed_down)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("aggregation_type", list(AggregationType))
def test_totals_agree_for_every_aggregation(seed, aggregation_type):
    rng = random.Random(seed)
    period = rng.choice(list(AggregationPeriod))
    quantity_type = make_quantity_type(
        aggregation_type=aggregation_type, aggregation_period=period
    )
    entries = random_history(rng, quantity_type)
    reference = random_reference(rng)

    assert calculate_total(quantity_type, entries, reference) == pytest.approx(
        calculate_total_from_source(
            quantity_type, InMemorySource([quantity_type], entries), reference
        )
    )


@pytest.mark.parametrize("seed", range(5))
def test_repository_bound_matches_in_memory_filter(data_path, seed):
    rng = random.Random(seed)
    quantity_type = make_quantity_type()
    QUANTITY_TYPE_REPO.save_new_quantity_type(quantity_type)
    entries = random_history(rng, quantity_type, 40)
    for entry in entries:
        ENTRY_REPO.save_new_entry(entry)

    # Round-trip through the YAML files
    QUANTITY_TYPE_REPO.flush()
    ENTRY_REPO.flush()
    QUANTITY_TYPE_REPO.reset()
    ENTRY_REPO.reset()

    reference = random_reference(rng)
    for period in AggregationPeriod:
        since = get_window_start(period, reference)
        stored = RepositorySource().entries(quantity_type["id"], since)
        assert entry_ids(stored) == entry_ids(filter_entries(period, entries, reference))
