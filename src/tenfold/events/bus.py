from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_CLOCK_CHANGED = "clock_changed"      # payload: time_remaining=int, delta=int, reason=str


# ============================================================================
# ROUND FLOW
# ============================================================================
EVENT_ROUND_STARTED = "round_started"      # payload: epoch=int, rows=int, cols=int, duration=int
EVENT_ROUND_ENDED = "round_ended"          # payload: epoch=int, reason=str, summary=RoundSummary
EVENT_PHASE_CHANGED = "phase_changed"      # payload: previous_phase=RoundPhase|None, new_phase=RoundPhase


# ============================================================================
# SELECTION & MATCHING
# ============================================================================
EVENT_SELECTION_SUBMITTED = "selection_submitted"  # payload: selection=Selection
EVENT_MATCH_FOUND = "match_found"                  # payload: outcome=MatchSuccess
EVENT_MATCH_FAILED = "match_failed"                # payload: outcome=MatchFailure
EVENT_MATCH_RESOLVED = "match_resolved"            # payload: success=bool, positions=list[(r,c)]


# ============================================================================
# SCORING
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int, multiplier=float, golden=int
EVENT_COMBO_CHANGED = "combo_changed"      # payload: combo=int, max_combo=int, multiplier=float


# ============================================================================
# TILES & BOARD
# ============================================================================
EVENT_TILES_REMOVED = "tiles_removed"      # payload: positions=list[(r,c)], reason=str
EVENT_BOARD_RESHUFFLED = "board_reshuffled"  # payload: positions=list[(r,c)], reason=str


# ============================================================================
# EFFECTS
# ============================================================================
EVENT_EFFECT_APPLY = "effect_apply"                # payload: slug=str, row=int, col=int, metadata=dict
EVENT_BOMB_EXPLODED = "bomb_exploded"              # payload: row=int, col=int, positions=list[(r,c)]
EVENT_TIME_BONUS_GRANTED = "time_bonus_granted"    # payload: row=int, col=int, seconds=int, time_remaining=int


# ============================================================================
# SKILLS
# ============================================================================
EVENT_SKILL_USED = "skill_used"            # payload: kind=SkillKind, remaining=int, positions=list[(r,c)]
EVENT_HINT_SHOWN = "hint_shown"            # payload: positions=list[(r,c)], duration=float
EVENT_HINT_CLEARED = "hint_cleared"        # payload: positions=list[(r,c)]
EVENT_FREEZE_STARTED = "freeze_started"    # payload: duration=float
EVENT_FREEZE_ENDED = "freeze_ended"        # payload: None
