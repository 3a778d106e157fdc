"""Step → Frame derivation rules."""

from algorithms.step import SearchStep, SortingStep, TraversalStep
from engine import Timing, derive_search_frame, derive_sort_frame, derive_traversal_frame

TIMING = Timing(step_ms=1200, emphasis_ms=1500)


class TestSortFrames:

    def test_compare_without_swap(self):
        frame = derive_sort_frame(SortingStep(0, (2, 1), 0, 1, False), 0, TIMING)
        assert frame.comparing == {0, 1}
        assert frame.swapped == frozenset()
        assert frame.delay_ms == 1200

    def test_swap_is_emphasised(self):
        frame = derive_sort_frame(SortingStep(0, (1, 2), 0, 1, True), 0, TIMING)
        assert frame.swapped == {0, 1}
        assert frame.state_of(0) == "swapped"
        assert frame.delay_ms == 1500

    def test_missing_index_highlights_nothing(self):
        frame = derive_sort_frame(SortingStep(0, (1, 2), -1, 1, False), 0, TIMING)
        assert frame.comparing == frozenset()
        assert frame.array == (1, 2)


class TestSearchFrames:

    def test_binary_window_excludes_probe(self):
        step = SearchStep(current_index=3, left=0, right=6, mid=3)
        frame = derive_search_frame(step, 0, binary=True, timing=TIMING)
        assert frame.highlighted == {3}
        assert frame.comparing == {0, 1, 2, 4, 5, 6}
        assert frame.search_range == (0, 6)

    def test_binary_match(self):
        step = SearchStep(current_index=5, left=4, right=6, mid=5, match=True)
        frame = derive_search_frame(step, 2, binary=True, timing=TIMING)
        assert frame.found == {5}
        assert frame.comparing == {4, 6}
        assert frame.state_of(5) == "found"
        assert frame.delay_ms == 1500

    def test_linear_has_no_window(self):
        step = SearchStep(current_index=2, left=0, right=6, mid=3)
        frame = derive_search_frame(step, 0, binary=False, timing=TIMING)
        assert frame.highlighted == {2}
        assert frame.comparing == frozenset()
        assert frame.search_range is None

    def test_settled_keeps_found(self):
        step = SearchStep(current_index=1, left=0, right=2, mid=1, match=True)
        settled = derive_search_frame(step, 0, binary=True, timing=TIMING).settled()
        assert settled.found == {1}
        assert settled.highlighted == frozenset()
        assert settled.comparing == frozenset()
        assert settled.delay_ms == 0


def test_traversal_frames():
    visit = derive_traversal_frame(TraversalStep(0, 0, False, "Visiting"), 0, 500)
    hit = derive_traversal_frame(TraversalStep(1, 1, True, "Found"), 1, 500)
    assert visit.highlighted == {0}
    assert hit.found == {1}
    assert visit.to_dict()["delay_ms"] == 500
