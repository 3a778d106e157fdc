"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualiser can ask the
backend to run.

    from algorithms import get_algorithm, list_algorithms

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, family, description, complexities, …),
        …
    }

The algorithms themselves execute server-side; an entry here is the
metadata card the UI shows (selector, info modal, result banner) plus the
family that decides which endpoint and which step type apply.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

SORTING = "sorting"
SEARCHING = "searching"


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str            # registry / endpoint key, e.g. "bubble"
    label:            str            # human label, e.g. "Bubble Sort"
    family:           str            # SORTING or SEARCHING
    description:      str = ""       # one-liner for the UI card
    time_best:        str = ""
    time_average:     str = ""
    time_worst:       str = ""
    complexity_space: str = "O(1)"
    requires_sorted:  bool = False   # binary search only

    @property
    def requirements(self) -> str:
        return "Sorted Array" if self.requires_sorted else "None"


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", family=SORTING,
        description="Repeatedly steps through the list, compares adjacent elements and "
                    "swaps them if they are in the wrong order.",
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", family=SORTING,
        description="Builds the final sorted array one item at a time by repeatedly "
                    "inserting elements into their correct position.",
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", family=SORTING,
        description="Finds the minimum element from the unsorted portion and places it "
                    "at the beginning.",
        time_best="O(n²)", time_average="O(n²)", time_worst="O(n²)",
    ),

    "min": AlgoInfo(
        key="min", label="Min Sort", family=SORTING,
        description="A variation of selection sort that finds the minimum element and "
                    "places it in correct position.",
        time_best="O(n²)", time_average="O(n²)", time_worst="O(n²)",
    ),

    "optimized-bubble": AlgoInfo(
        key="optimized-bubble", label="Optimized Bubble Sort", family=SORTING,
        description="An improved version of bubble sort that stops early if the list "
                    "becomes sorted.",
        time_best="O(n)", time_average="O(n²)", time_worst="O(n²)",
    ),

    "linear": AlgoInfo(
        key="linear", label="Linear Search", family=SEARCHING,
        description="Sequentially searches through each element of the array until the "
                    "target is found or the end is reached.",
        time_best="O(1)", time_average="O(n)", time_worst="O(n)",
    ),

    "binary": AlgoInfo(
        key="binary", label="Binary Search", family=SEARCHING,
        description="Efficiently searches a sorted array by repeatedly dividing the "
                    "search interval in half.",
        time_best="O(1)", time_average="O(log n)", time_worst="O(log n)",
        requires_sorted=True,
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get((key or "").lower())


def list_algorithms(family: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order, optionally one family only."""
    return [a for a in REGISTRY.values() if family is None or a.family == family]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "SEARCHING",
    "SORTING",
    "get_algorithm",
    "list_algorithms",
]
