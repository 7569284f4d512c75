# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class GroupedTotal(TypedDict):
    period_label: str
    total: float
    count: int
    bucket_start: pendulum.DateTime
