from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from esper import World

from tenfold.components.timer import ScheduledCallback
from tenfold.events.bus import EventBus
from tenfold.utils.round_state import current_epoch, is_running

logger = logging.getLogger(__name__)


class TimerSystem:
    """Holds deferred state transitions and fires them as round time elapses.

    Each callback is stored as its own entity. A callback only runs when the
    round it was scheduled in is still the current, running round; otherwise it
    is dropped silently.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.now: float = 0.0

    def schedule(self, delay: float, callback: Callable[[], None], *, label: str = "") -> int:
        entry = ScheduledCallback(
            due_at=self.now + max(0.0, float(delay)),
            epoch=current_epoch(self.world),
            callback=callback,
            label=label,
        )
        return self.world.create_entity(entry)

    def advance(self, dt: float) -> int:
        """Move the timeline forward by ``dt`` seconds and fire every callback now due."""
        if dt > 0:
            self.now += dt
        due: List[Tuple[int, ScheduledCallback]] = sorted(
            (
                (ent, entry)
                for ent, entry in self.world.get_component(ScheduledCallback)
                if entry.due_at <= self.now
            ),
            key=lambda item: (item[1].due_at, item[0]),
        )
        fired = 0
        for ent, entry in due:
            self.world.delete_entity(ent, immediate=True)
            if entry.epoch != current_epoch(self.world) or not is_running(self.world):
                logger.debug("Dropped stale callback %s from epoch %d", entry.label, entry.epoch)
                continue
            entry.callback()
            fired += 1
        return fired

    def cancel_all(self) -> None:
        for ent, _ in list(self.world.get_component(ScheduledCallback)):
            self.world.delete_entity(ent, immediate=True)

    def pending(self) -> int:
        return len(list(self.world.get_component(ScheduledCallback)))
