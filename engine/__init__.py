"""
engine/
-------
Playback layer.

    from engine import Sequencer, Frame, sort_deriver, summarize
"""

from engine.highlight import (
    Frame,
    Timing,
    derive_search_frame,
    derive_sort_frame,
    derive_traversal_frame,
    search_deriver,
    sort_deriver,
    traversal_deriver,
)
from engine.metrics import RunMetrics, summarize
from engine.sequencer import Sequencer, SequencerState

__all__ = [
    "Frame",
    "RunMetrics",
    "Sequencer",
    "SequencerState",
    "Timing",
    "derive_search_frame",
    "derive_sort_frame",
    "derive_traversal_frame",
    "search_deriver",
    "sort_deriver",
    "summarize",
    "traversal_deriver",
]
