"""
metrics.py — Run summary
=========================
Condenses one finished backend run into the card the Analytics panel
renders and the sentence the result banner shows.

    metrics = summarize(get_algorithm("bubble"), session, steps)
    metrics.result_message()   # "Bubble Sort completed! Comparisons: 21, Swaps: 9"
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from algorithms import SEARCHING, AlgoInfo
from services.models import AlgorithmSession


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str           = ""
    algo_label:   str           = ""
    family:       str           = ""
    array_size:   int           = 0
    comparisons:  int           = 0
    swaps:        int           = 0
    total_steps:  int           = 0
    target:       Optional[int] = None
    found:        bool          = False
    found_index:  int           = -1

    @property
    def is_search(self) -> bool:
        return self.family == SEARCHING

    def result_message(self) -> str:
        if self.is_search:
            if self.found:
                return (f"Target {self.target} found at index {self.found_index}! "
                        f"Comparisons: {self.comparisons}")
            return f"Target {self.target} not found. Comparisons: {self.comparisons}"
        return f"{self.algo_label} completed! Comparisons: {self.comparisons}, Swaps: {self.swaps}"


def summarize(info: Optional[AlgoInfo], session: AlgorithmSession, steps: Sequence) -> RunMetrics:
    return RunMetrics(
        algo_key=info.key if info else session.algorithm,
        algo_label=info.label if info else session.algorithm,
        family=info.family if info else "",
        array_size=len(session.original_array or session.array),
        comparisons=session.comparisons,
        swaps=session.swaps,
        total_steps=len(steps),
        target=session.target,
        found=session.found,
        found_index=session.found_index,
    )
