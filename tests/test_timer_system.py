from tenfold.components.game_state import RoundPhase
from tenfold.events.bus import EventBus
from tenfold.systems.timer_system import TimerSystem
from tenfold.utils.round_state import get_or_create_round_state, set_round_phase
from tenfold.world import create_world


def _setup():
    bus = EventBus()
    world = create_world(bus, RoundPhase.RUNNING)
    return world, bus, TimerSystem(world, bus)


def test_callbacks_fire_in_due_order():
    world, bus, timers = _setup()
    fired = []
    timers.schedule(2.0, lambda: fired.append("late"), label="late")
    timers.schedule(1.0, lambda: fired.append("early"), label="early")

    assert timers.advance(0.5) == 0
    assert timers.advance(2.0) == 2
    assert fired == ["early", "late"]
    assert timers.pending() == 0


def test_callback_from_previous_epoch_is_dropped():
    world, bus, timers = _setup()
    fired = []
    timers.schedule(1.0, lambda: fired.append(True))
    get_or_create_round_state(world).epoch += 1

    assert timers.advance(1.0) == 0
    assert fired == []
    assert timers.pending() == 0


def test_callbacks_do_not_fire_after_round_end():
    world, bus, timers = _setup()
    fired = []
    timers.schedule(0.5, lambda: fired.append(True))
    set_round_phase(world, bus, RoundPhase.ENDED)
    timers.advance(1.0)
    assert fired == []


def test_cancel_all_discards_pending_callbacks():
    world, bus, timers = _setup()
    timers.schedule(1.0, lambda: None)
    timers.schedule(3.0, lambda: None)
    assert timers.pending() == 2
    timers.cancel_all()
    assert timers.pending() == 0
    assert timers.advance(5.0) == 0
