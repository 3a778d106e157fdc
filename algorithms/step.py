"""
step.py — Algorithm Step Snapshots
===================================
The backend runs every algorithm and returns its whole trajectory as a list
of steps.  A step is a frozen-in-time picture of one moment of the run:

    • SortingStep  – the array right now, which two indices are being
                     compared, whether they were just swapped
    • SearchStep   – which index is being probed, the live [left, right]
                     window and midpoint (binary search), whether it matched
    • TraversalStep – one node visited while searching a linked list
                     (built client-side from the current node list)

Design decisions:
  - Steps are plain frozen dataclasses.  The backend is the only writer;
    the sequencer and renderer are pure readers.
  - Indices that do not apply are -1, matching the wire format.
  - ``from_dict`` accepts the backend's camelCase keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple


def _int(raw: Dict[str, Any], key: str, default: int = -1) -> int:
    value = raw.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class SortingStep:
    """
    Attributes:
        step_number    : 0-based position in the run.
        array          : Array snapshot after this step.
        compare_index1 : First index under comparison, or -1.
        compare_index2 : Second index under comparison, or -1.
        swapped        : True if the two compared indices were just swapped.
        description    : Backend's plain-English note for this step.
    """

    step_number:    int             = 0
    array:          Tuple[int, ...] = field(default_factory=tuple)
    compare_index1: int             = -1
    compare_index2: int             = -1
    swapped:        bool            = False
    description:    str             = ""

    @property
    def is_emphasised(self) -> bool:
        return self.swapped

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], position: int = 0) -> "SortingStep":
        return cls(
            step_number=_int(raw, "stepNumber", _int(raw, "step", position)),
            array=tuple(raw.get("array") or ()),
            compare_index1=_int(raw, "compareIndex1"),
            compare_index2=_int(raw, "compareIndex2"),
            swapped=bool(raw.get("swapped", False)),
            description=raw.get("description") or "",
        )


@dataclass(frozen=True)
class SearchStep:
    """
    Attributes:
        step_number   : 0-based position in the run.
        current_index : Index being probed.
        left, right   : Live search window (binary search), or -1.
        mid           : Midpoint of the window (binary search), or -1.
        match         : True if the probed element equals the target.
        description   : Backend's plain-English note for this step.
    """

    step_number:   int  = 0
    current_index: int  = -1
    left:          int  = -1
    right:         int  = -1
    mid:           int  = -1
    match:         bool = False
    description:   str  = ""

    @property
    def is_emphasised(self) -> bool:
        return self.match

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], position: int = 0) -> "SearchStep":
        return cls(
            step_number=_int(raw, "stepNumber", _int(raw, "step", position)),
            current_index=_int(raw, "currentIndex"),
            left=_int(raw, "left"),
            right=_int(raw, "right"),
            mid=_int(raw, "mid"),
            match=bool(raw.get("match", False)),
            description=raw.get("description") or "",
        )


@dataclass(frozen=True)
class TraversalStep:
    step_number: int  = 0
    index:       int  = -1
    match:       bool = False
    description: str  = ""

    @property
    def is_emphasised(self) -> bool:
        return self.match


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
def parse_sorting_steps(raw_steps: Sequence[Dict[str, Any]]) -> List[SortingStep]:
    return [SortingStep.from_dict(raw, i) for i, raw in enumerate(raw_steps or [])]


def parse_search_steps(raw_steps: Sequence[Dict[str, Any]]) -> List[SearchStep]:
    return [SearchStep.from_dict(raw, i) for i, raw in enumerate(raw_steps or [])]


def traversal_steps(elements: Sequence[Any], value: str) -> List[TraversalStep]:
    """
    Walk ``elements`` head to tail until one renders as ``value``.
    The last step is the match, if there is one.
    """
    steps = []
    for i, element in enumerate(elements):
        hit = str(element) == value
        note = f'Found "{value}" at index {i}' if hit else f"Visiting node {i} ({element})"
        steps.append(TraversalStep(step_number=i, index=i, match=hit, description=note))
        if hit:
            break
    return steps
