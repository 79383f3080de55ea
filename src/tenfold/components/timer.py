from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(slots=True)
class ScheduledCallback:
    """Deferred state transition fired by the timer system once ``due_at`` passes.

    ``epoch`` pins the callback to the round it was scheduled in; callbacks from
    an earlier round are discarded without running.
    """

    due_at: float
    epoch: int
    callback: Callable[[], None]
    label: str = ""
