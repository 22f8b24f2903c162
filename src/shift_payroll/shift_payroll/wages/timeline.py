from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import as_day
from .model import WageSetting


class WageTimeline:
    """Resolve which wage setting is in effect on a given day.

    Matching is day-granular: time-of-day on both the target and `effective_from`
    is ignored. Settings sharing an effective day are ranked by their position in
    the supplied sequence, the later (more recently recorded) one winning.

    Sorting happens once in the constructor, so one instance can serve a whole
    batch of shifts.
    """

    def __init__(self, wages: Iterable[WageSetting]):
        recorded = list(wages)
        ranked = sorted(
            range(len(recorded)),
            key=lambda i: (as_day(recorded[i].effective_from), i),
            reverse=True,
        )
        self._entries: list[tuple[date, WageSetting]] = [
            (as_day(recorded[i].effective_from), recorded[i]) for i in ranked
        ]

        # Oldest full timestamp; an exact tie goes to the later-recorded setting.
        self._baseline: Optional[WageSetting] = None
        if recorded:
            oldest = min(range(len(recorded)), key=lambda i: (recorded[i].effective_from, -i))
            self._baseline = recorded[oldest]

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, target: date | datetime) -> Optional[WageSetting]:
        """Latest setting effective on or before `target`.

        A target before all history falls back to the setting with the earliest
        `effective_from` timestamp. None is returned only when there is no wage
        history at all.
        """
        target_day = as_day(target)
        for day, wage in self._entries:
            if day <= target_day:
                return wage
        return self._baseline


def resolve_wage(wages: Iterable[WageSetting], target: date | datetime) -> Optional[WageSetting]:
    return WageTimeline(wages).resolve(target)
