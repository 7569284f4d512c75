# SPDX-License-Identifier: MIT

import statistics
from collections.abc import Sequence

from numpad.model.aggregation_type import AggregationType


def aggregate(aggregation_type: AggregationType, values: Sequence[float]) -> float:
    """
    Reduce values with the given aggregation type.

    An empty sequence yields 0 for every aggregation type, so an empty
    history reads as a total of zero rather than an error.
    """
    if len(values) == 0:
        return 0.0

    match aggregation_type:
        case AggregationType.SUM:
            return float(sum(values))
        case AggregationType.AVERAGE:
            return float(sum(values)) / len(values)
        case AggregationType.MEDIAN:
            return float(statistics.median(values))
        case AggregationType.MIN:
            return float(min(values))
        case AggregationType.MAX:
            return float(max(values))
        case AggregationType.COUNT:
            return float(len(values))
    raise ValueError(f"Unknown aggregation type: {aggregation_type}")
