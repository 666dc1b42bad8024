"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper owns the cursor into a precomputed traversal plan, the
visited set and the result sequence, and the auto-play timer.

State machine (cursor-derived):
    NOT_STARTED  (cursor == -1)
    IN_PROGRESS  (0 <= cursor < len - 1)
    COMPLETE     (cursor == len - 1; an empty plan is COMPLETE at -1)

    NOT_STARTED / IN_PROGRESS  →  advance()  →  IN_PROGRESS / COMPLETE
    COMPLETE                   →  advance()  →  COMPLETE   (no-op)
    any                        →  reset()    →  NOT_STARTED

Playback is a flag on top of that: while playing, one step is due every
`delay` seconds.  The pending deadline is the timer handle; it is cleared
by pause, reset, load and re-armed by a manual advance, so a stale tick
can never fire after the state it was scheduled for has changed.

Thread safety:
  Not thread-safe.  The web shell calls it from one request at a time.
"""

import logging
import time
from enum import Enum
from typing import Callable, FrozenSet, List, Optional, Sequence, Set, Tuple

from algorithms.step import TraversalStep, VISIT_ROOT

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE    = "complete"


# seconds per step while auto-playing
DEFAULT_STEP_DELAY = 0.8


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        plan     : The immutable tuple of TraversalSteps being played.
        delay    : Seconds between auto-advance ticks.
    """

    def __init__(
        self,
        plan: Sequence[TraversalStep] = (),
        delay: float = DEFAULT_STEP_DELAY,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.plan:     Tuple[TraversalStep, ...] = tuple(plan)
        self.delay:    float                     = delay

        self._clock                      = clock
        self._cursor:   int              = -1
        self._visited:  Set[str]         = set()
        self._result:   List[int]        = []
        self._playing:  bool             = False
        self._deadline: Optional[float]  = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, plan: Sequence[TraversalStep]) -> None:
        """Attach a fresh plan; playback stops and the cursor rewinds."""
        self.plan = tuple(plan)
        self.reset()

    def reset(self) -> None:
        """Back to NOT_STARTED.  The plan itself is untouched."""
        self._cursor = -1
        self._visited.clear()
        self._result.clear()
        self._playing = False
        self._deadline = None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def advance(self) -> bool:
        """Manual step.  Returns False (and changes nothing) when complete."""
        taken = self._step()
        if self._playing:
            self._arm()
        return taken

    def _step(self) -> bool:
        if self.is_complete:
            return False

        self._cursor += 1
        step = self.plan[self._cursor]
        if step.action == VISIT_ROOT:
            self._result.append(step.value)
            self._visited.add(step.node_id)

        if self.is_complete:
            self._stop()

        return True

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.is_complete:
            return
        self._playing = True
        self._arm()

    def pause(self) -> None:
        self._stop()

    def toggle_play(self) -> None:
        if self._playing:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        If playing and the pending deadline has passed, advance one step
        and schedule the next.  Returns True if a step was taken.
        """
        if not self._playing or self._deadline is None:
            return False
        now = self._clock() if now is None else now
        if now < self._deadline:
            return False
        return self.fire(now)

    def fire(self, now: Optional[float] = None) -> bool:
        """
        The scheduled callback itself, for shells that own their timer
        (the browser's setTimeout).  Advances only while playing.
        """
        if not self._playing:
            return False
        taken = self._step()
        if self._playing:
            self._arm(now)
        return taken

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> StepperState:
        if self._cursor >= len(self.plan) - 1:
            return StepperState.COMPLETE
        if self._cursor == -1:
            return StepperState.NOT_STARTED
        return StepperState.IN_PROGRESS

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current_step(self) -> Optional[TraversalStep]:
        if 0 <= self._cursor < len(self.plan):
            return self.plan[self._cursor]
        return None

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    @property
    def result(self) -> Tuple[int, ...]:
        return tuple(self._result)

    @property
    def total_steps(self) -> int:
        return len(self.plan)

    @property
    def is_complete(self) -> bool:
        return self.state == StepperState.COMPLETE

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def has_pending_tick(self) -> bool:
        return self._deadline is not None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _arm(self, now: Optional[float] = None) -> None:
        now = self._clock() if now is None else now
        self._deadline = now + self.delay

    def _stop(self) -> None:
        if self._playing:
            logger.debug("Playback stopped at cursor %d", self._cursor)
        self._playing = False
        self._deadline = None
