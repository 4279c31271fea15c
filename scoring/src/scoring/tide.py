"""Current tide state from a list of predicted high/low extremes."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from fishcast.schemas.conditions import TideExtreme, TideSnapshot

logger = logging.getLogger(__name__)


def tide_state_at(extremes: Iterable[TideExtreme], at: datetime) -> TideSnapshot:
    """Locate ``at`` between two consecutive extremes.

    After a low the tide is rising, after a high it is falling. ``progress``
    is the share of the interval already elapsed. Unknown when ``at`` is not
    bracketed by the predictions.
    """
    ordered = sorted(extremes, key=lambda e: e.at)
    if len(ordered) < 2:
        return TideSnapshot(state="unknown")

    for current, following in zip(ordered, ordered[1:]):
        if current.at <= at <= following.at:
            interval = (following.at - current.at).total_seconds()
            if interval <= 0:
                continue
            progress = (at - current.at).total_seconds() / interval
            return TideSnapshot(
                state="rising" if current.kind == "low" else "falling",
                progress_percent=round(progress * 100),
            )

    logger.debug("%s outside tide predictions %s..%s", at, ordered[0].at, ordered[-1].at)
    return TideSnapshot(state="unknown")
