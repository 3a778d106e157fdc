"""
highlight.py — Step → Frame derivation
=======================================
A Frame is everything the renderer needs to paint one moment of playback:
which indices are comparing / swapped / current / found, the array snapshot
(sorting only) and how long to hold the frame before the next one.

The derivation is a pure function of (step, cursor).  Manual stepping and
automatic playback both go through it, so scrubbing back to position i
always reproduces exactly what auto-play showed at i.

Rules:
  sort       both compare indices >= 0  → both "comparing"
             … and step.swapped         → both also "swapped"
  search     current_index              → "highlighted"
             mid (binary)               → "highlighted"
             match at current_index     → "found"
             [left, right] (binary) minus {current, mid, found} → "comparing"
  traversal  visited node               → "highlighted", or "found" on match
"""

from dataclasses import dataclass, field, replace
from typing import Callable, FrozenSet, Optional, Tuple

from algorithms.step import SearchStep, SortingStep, TraversalStep


@dataclass(frozen=True)
class Frame:
    cursor:      int
    comparing:   FrozenSet[int]            = frozenset()
    swapped:     FrozenSet[int]            = frozenset()
    highlighted: FrozenSet[int]            = frozenset()
    found:       FrozenSet[int]            = frozenset()
    array:       Optional[Tuple[int, ...]] = None
    description: str                       = ""
    delay_ms:    int                       = 0
    search_range: Optional[Tuple[int, int]] = field(default=None)

    def settled(self) -> "Frame":
        """Same frame with the transient highlights dropped (end of playback)."""
        return replace(
            self,
            comparing=frozenset(),
            swapped=frozenset(),
            highlighted=frozenset(),
            search_range=None,
            delay_ms=0,
        )

    def state_of(self, index: int) -> str:
        """Single display state for one cell; found > swapped > highlighted > comparing."""
        if index in self.found:
            return "found"
        if index in self.swapped:
            return "swapped"
        if index in self.highlighted:
            return "current"
        if index in self.comparing:
            return "comparing"
        return "idle"

    def to_dict(self) -> dict:
        return {
            "cursor":       self.cursor,
            "comparing":    sorted(self.comparing),
            "swapped":      sorted(self.swapped),
            "highlighted":  sorted(self.highlighted),
            "found":        sorted(self.found),
            "array":        list(self.array) if self.array is not None else None,
            "description":  self.description,
            "delay_ms":     self.delay_ms,
            "search_range": list(self.search_range) if self.search_range else None,
        }


@dataclass(frozen=True)
class Timing:
    """Hold times in milliseconds."""

    step_ms:     int = 1200
    emphasis_ms: int = 1500

    def delay_for(self, step) -> int:
        return self.emphasis_ms if step.is_emphasised else self.step_ms


# ---------------------------------------------------------------------------
# Derivations
# ---------------------------------------------------------------------------
def derive_sort_frame(step: SortingStep, cursor: int, timing: Timing = Timing()) -> Frame:
    comparing: FrozenSet[int] = frozenset()
    swapped: FrozenSet[int] = frozenset()
    if step.compare_index1 >= 0 and step.compare_index2 >= 0:
        comparing = frozenset((step.compare_index1, step.compare_index2))
        if step.swapped:
            swapped = comparing
    return Frame(
        cursor=cursor,
        comparing=comparing,
        swapped=swapped,
        array=tuple(step.array),
        description=step.description,
        delay_ms=timing.delay_for(step),
    )


def derive_search_frame(step: SearchStep, cursor: int, binary: bool,
                        timing: Timing = Timing()) -> Frame:
    highlighted = set()
    if step.current_index >= 0:
        highlighted.add(step.current_index)
    if binary and step.mid >= 0:
        highlighted.add(step.mid)

    found = set()
    if step.match and step.current_index >= 0:
        found.add(step.current_index)

    comparing = set()
    search_range = None
    if binary and step.left >= 0 and step.right >= 0:
        search_range = (step.left, step.right)
        comparing = set(range(step.left, step.right + 1)) - highlighted - found

    return Frame(
        cursor=cursor,
        comparing=frozenset(comparing),
        highlighted=frozenset(highlighted),
        found=frozenset(found),
        description=step.description,
        delay_ms=timing.delay_for(step),
        search_range=search_range,
    )


def derive_traversal_frame(step: TraversalStep, cursor: int, delay_ms: int = 500) -> Frame:
    if step.match:
        return Frame(cursor=cursor, found=frozenset((step.index,)),
                     description=step.description, delay_ms=delay_ms)
    return Frame(cursor=cursor, highlighted=frozenset((step.index,)),
                 description=step.description, delay_ms=delay_ms)


# ---------------------------------------------------------------------------
# Factories: bind the knobs once, hand the sequencer a (step, cursor) → Frame
# ---------------------------------------------------------------------------
Deriver = Callable[[object, int], Frame]


def sort_deriver(timing: Timing = Timing()) -> Deriver:
    return lambda step, cursor: derive_sort_frame(step, cursor, timing)


def search_deriver(binary: bool, timing: Timing = Timing()) -> Deriver:
    return lambda step, cursor: derive_search_frame(step, cursor, binary, timing)


def traversal_deriver(delay_ms: int = 500) -> Deriver:
    return lambda step, cursor: derive_traversal_frame(step, cursor, delay_ms)
