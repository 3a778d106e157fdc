"""
sequencer.py — Step-by-Step Playback Engine
============================================
The Sequencer is the only object a page talks to during playback.  It owns
the step list of one finished run, a cursor into it, and the Frame derived
at that cursor, and exposes play / step / stop.

State machine:
    IDLE     →  begin() / play_all()  →  PLAYING(cursor)
    PLAYING  →  last step held        →  IDLE   (frame settled)
    PLAYING  →  stop() / cancel()     →  IDLE   (frame settled)
    any      →  load() / reset()      →  IDLE

Two ways to drive PLAYING:
  - ``await play_all()``: cooperative loop, one ``sleep`` per step, so other
    tasks on the loop keep running.  ``play()`` wraps it in a Task and
    ``cancel()`` tears it down.
  - ``begin()`` then ``advance()`` per tick: for callers with their own timer
    (the browser polls ``/api/<page>/tick`` after each frame's delay).

Re-entry: a play request while already PLAYING is ignored.

Thread safety:
  NOT thread-safe.  Drive it from one thread or one event loop; the web
  routes hold the browser's view lock around every call.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence

from engine.highlight import Deriver, Frame

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class SequencerState(Enum):
    IDLE    = "idle"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Sequencer
# ---------------------------------------------------------------------------
class Sequencer:
    """
    Attributes:
        state    : Current SequencerState.
        steps    : The run being replayed (never mutated).
        cursor   : Index into ``steps`` currently displayed, -1 when empty.
        frame    : Frame derived at ``cursor`` (None when empty).
        on_frame : Optional callback(Frame) fired whenever the frame changes.
                   The UI hooks its re-render here.
    """

    def __init__(
        self,
        derive: Deriver,
        on_frame: Optional[Callable[[Frame], None]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.derive = derive
        self.on_frame = on_frame
        self._sleep = sleep
        self.steps: List = []
        self.cursor: int = -1
        self.frame: Optional[Frame] = None
        self.state: SequencerState = SequencerState.IDLE
        self._task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence) -> None:
        """Attach a fresh run and show its first step."""
        self.stop()
        self.steps = list(steps)
        if self.steps:
            self._goto(0)
        else:
            self.cursor = -1
            self.frame = None

    def reset(self) -> None:
        """Back to the first step without playing."""
        self.stop()
        if self.steps:
            self._goto(0)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        self.stop()
        if not self.steps or self.cursor >= len(self.steps) - 1:
            return False
        self._goto(self.cursor + 1)
        return True

    def step_backward(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        self.stop()
        if self.cursor <= 0:
            return False
        self._goto(self.cursor - 1)
        return True

    def goto(self, idx: int) -> bool:
        self.stop()
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    # ------------------------------------------------------------------
    # Tick-at-a-time playback
    # ------------------------------------------------------------------
    def begin(self) -> Optional[Frame]:
        """
        Enter PLAYING at step 0 and return its frame.  Returns None for an
        empty run.  While already PLAYING this is a no-op returning the
        frame on screen.
        """
        if self.is_playing:
            return self.frame
        if not self.steps:
            return None
        self.state = SequencerState.PLAYING
        self._goto(0)
        return self.frame

    def advance(self) -> Optional[Frame]:
        """
        Move to the next step and return its frame, or settle and return
        None once the last step has been held.
        """
        if not self.is_playing:
            return None
        if self.cursor < len(self.steps) - 1:
            self._goto(self.cursor + 1)
            return self.frame
        self._finish()
        return None

    def stop(self) -> None:
        if self.is_playing:
            self._finish()

    # ------------------------------------------------------------------
    # Cooperative playback
    # ------------------------------------------------------------------
    async def play_all(self, steps: Optional[Sequence] = None) -> None:
        """Replay every step, holding each frame for its ``delay_ms``."""
        if self.is_playing:
            return
        if steps is not None:
            self.load(steps)
        frame = self.begin()
        try:
            while frame is not None:
                await self._sleep(frame.delay_ms / 1000.0)
                frame = self.advance()
        except asyncio.CancelledError:
            self.stop()
            raise

    def play(self) -> asyncio.Task:
        """Schedule ``play_all`` on the running loop; re-entry returns the live task."""
        if self._task is not None and not self._task.done():
            return self._task
        self._task = asyncio.get_running_loop().create_task(self.play_all())
        return self._task

    def cancel(self) -> None:
        """Teardown: kill a running playback task and settle the frame."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.stop()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_playing(self) -> bool:
        return self.state == SequencerState.PLAYING

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_step(self):
        if 0 <= self.cursor < len(self.steps):
            return self.steps[self.cursor]
        return None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.cursor = idx
        self._publish(self.derive(self.steps[idx], idx))

    def _finish(self) -> None:
        self.state = SequencerState.IDLE
        if self.frame is not None:
            self._publish(self.frame.settled())
        logger.debug("Playback settled at step %d of %d", self.cursor, len(self.steps))

    def _publish(self, frame: Frame) -> None:
        self.frame = frame
        if self.on_frame is not None:
            self.on_frame(frame)
