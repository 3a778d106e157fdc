"""
algorithms.py — Sorting and searching pages
============================================
A run is one request: the backend executes the algorithm and returns every
step.  The page then owns a Sequencer over those steps and the browser
drives it (play / tick / next / prev / reset) through the JSON endpoints.

Flow:
    select algorithm → edit array (or randomise) → run
        → steps loaded, metrics summarised, result banner
        → playback starts on the browser's next poll
"""

import logging
import random
from typing import Any, List, Optional

from algorithms import SEARCHING, SORTING, AlgoInfo, get_algorithm, list_algorithms
from algorithms.step import parse_search_steps, parse_sorting_steps
from engine import RunMetrics, Sequencer, Timing, search_deriver, sort_deriver, summarize
from pages.base import PageController, parse_int_list, require_text
from services.algorithms import AlgorithmService, SearchingService, SortingService
from services.errors import ValidationError
from services.models import AlgorithmSession, ApiResponse

logger = logging.getLogger(__name__)


class AlgorithmPage(PageController):
    family: str = ""
    default_algorithm: str = ""
    default_array: str = ""

    def __init__(self, service: AlgorithmService, settings,
                 rng: Optional[random.Random] = None, **kwargs):
        super().__init__(settings, **kwargs)
        self.service = service
        self.rng = rng or random.Random()
        self.timing = Timing(settings.step_delay_ms, settings.emphasis_delay_ms)
        self.algorithm = self.default_algorithm
        self.array_input = self.default_array
        self.array: List[int] = _lenient_ints(self.default_array)
        self.session: Optional[AlgorithmSession] = None
        self.metrics: Optional[RunMetrics] = None
        self.sessions: List[AlgorithmSession] = []
        self.autoplay = False
        self.player = Sequencer(self._deriver())

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @property
    def info(self) -> Optional[AlgoInfo]:
        return get_algorithm(self.algorithm)

    @property
    def choices(self) -> List[AlgoInfo]:
        return list_algorithms(self.family)

    def select(self, algorithm: str) -> bool:
        info = get_algorithm(algorithm or "")
        if info is None or info.family != self.family:
            self.flash_error(f"Unsupported algorithm: {algorithm}")
            return False
        self.algorithm = info.key
        self.player.cancel()
        self.player = Sequencer(self._deriver())
        # the previous run belongs to the previous algorithm
        self.session = None
        self.metrics = None
        return True

    def _deriver(self):
        return sort_deriver(self.timing)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def set_array(self, raw: str) -> None:
        self.array_input = (raw or "").strip()

    def randomize(self, size: int = 8, high: int = 100) -> List[int]:
        values = [self.rng.randint(1, high) for _ in range(size)]
        self._fresh_input(values)
        return values

    def _fresh_input(self, values: List[int]) -> None:
        self.array = list(values)
        self.array_input = ",".join(str(v) for v in values)
        self.session = None
        self.metrics = None
        self.player.load([])

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(self) -> Optional[ApiResponse]:
        try:
            body_args = self._validated()
        except ValidationError as exc:
            self.flash_error(exc.message)
            return None

        response = self._request(*body_args)
        if not response.success:
            self.flash_error(response.message or self._failure_text)
            return response

        session = _session_from(response)
        if not session.array:
            session.array = list(body_args[0])
            session.original_array = list(body_args[0])
        if session.target is None and len(body_args) > 1:
            session.target = body_args[1]
        steps = self._parse_steps(session.steps)
        self.session = session
        self.array = list(body_args[0])
        self.metrics = summarize(self.info, session, steps)
        self.player.load(steps)
        self.autoplay = bool(steps)
        message = self.metrics.result_message()
        self.flash_success(message)
        self.record(self.info.label, self.array_input, True, message)
        self.refresh_sessions()
        return response

    def _validated(self) -> tuple:
        return (parse_int_list(self.array_input, self.settings.max_array_size),)

    def _request(self, array, *rest) -> ApiResponse:
        raise NotImplementedError

    def _parse_steps(self, raw_steps):
        raise NotImplementedError

    @property
    def _failure_text(self) -> str:
        return "Request failed"

    # ------------------------------------------------------------------
    # Past sessions
    # ------------------------------------------------------------------
    def refresh_sessions(self) -> None:
        response = self.service.get_sessions()
        if not response.success:
            logger.warning("Listing %s sessions failed: %s", self.family, response.message)
            return
        self.sessions = [AlgorithmSession.from_dict(raw) for raw in response.items
                         if isinstance(raw, dict)]

    def load(self, session_id: str) -> bool:
        response = self.service.get_session(session_id)
        if not response.success or not isinstance(response.payload, dict):
            self.flash_error(response.message or "Failed to load session")
            return False
        session = AlgorithmSession.from_dict(response.payload)
        self._restore(session)
        self.flash_success("Session loaded successfully!")
        return True

    def _restore(self, session: AlgorithmSession) -> None:
        if get_algorithm(session.algorithm) is not None:
            self.select(session.algorithm)
        steps = self._parse_steps(session.steps)
        self.session = session
        self.array = list(session.array)
        self.array_input = ",".join(str(v) for v in session.original_array or session.array)
        self.metrics = summarize(self.info, session, steps)
        self.player.load(steps)

    def delete(self, session_id: str) -> bool:
        response = self.service.delete_session(session_id)
        if not response.success:
            self.flash_error(response.message or "Failed to delete session")
            return False
        if self.session is not None and self.session.session_id == session_id:
            self.session = None
            self.metrics = None
            self.player.load([])
        self.sessions = [s for s in self.sessions if s.session_id != session_id]
        self.flash_success("Session deleted successfully")
        return True

    def teardown(self) -> None:
        self.player.cancel()


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------
class SortingPage(AlgorithmPage):
    key = "sorting"
    title = "Sorting Algorithms"
    family = SORTING
    default_algorithm = "bubble"
    default_array = "64,34,25,12,22,11,90"

    def __init__(self, service: SortingService, settings, **kwargs):
        super().__init__(service, settings, **kwargs)

    def _request(self, array, *rest) -> ApiResponse:
        return self.service.sort(self.algorithm, array)

    def _parse_steps(self, raw_steps):
        return parse_sorting_steps(raw_steps)

    @property
    def _failure_text(self) -> str:
        return "Sorting failed"


# ---------------------------------------------------------------------------
# Searching
# ---------------------------------------------------------------------------
class SearchingPage(AlgorithmPage):
    key = "searching"
    title = "Searching Algorithms"
    family = SEARCHING
    default_algorithm = "linear"
    default_array = "11,12,22,25,34,64,90"

    def __init__(self, service: SearchingService, settings, **kwargs):
        self.target_input = "25"
        super().__init__(service, settings, **kwargs)

    @property
    def is_binary(self) -> bool:
        return self.algorithm == "binary"

    def _deriver(self):
        return search_deriver(self.is_binary, self.timing)

    def set_target(self, raw: str) -> None:
        self.target_input = (raw or "").strip()

    def randomize(self, size: int = 8, high: int = 100, sorted_values: bool = False) -> List[int]:
        values = [self.rng.randint(1, high) for _ in range(size)]
        if sorted_values:
            values.sort()
        self._fresh_input(values)
        self.target_input = str(self.rng.choice(values))
        return values

    def _validated(self) -> tuple:
        array = parse_int_list(self.array_input, self.settings.max_array_size)
        try:
            target = int(require_text(self.target_input, "a valid target value"))
        except ValueError:
            raise ValidationError("Please enter a valid target value", field="target")
        if self.info.requires_sorted and not is_sorted(array):
            raise ValidationError(
                "Binary search requires a sorted array. "
                "Please sort the array first or use linear search.",
                field="array",
            )
        return array, target

    def _request(self, array, *rest) -> ApiResponse:
        return self.service.search(self.algorithm, array, rest[0])

    def _parse_steps(self, raw_steps):
        return parse_search_steps(raw_steps)

    def _restore(self, session: AlgorithmSession) -> None:
        super()._restore(session)
        if session.target is not None:
            self.target_input = str(session.target)

    @property
    def _failure_text(self) -> str:
        return "Search failed"


def is_sorted(values: List[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def _session_from(response: ApiResponse) -> AlgorithmSession:
    """
    The run response splits its result between ``session`` and top-level
    fields (steps, comparisons, swaps, found, foundIndex).  Top-level wins.
    """
    raw: dict = dict(response.payload) if isinstance(response.payload, dict) else {}
    for key in ("steps", "comparisons", "swaps", "found", "foundIndex"):
        value: Any = response.get(key)
        if value is not None:
            raw[key] = value
    return AlgorithmSession.from_dict(raw)


def _lenient_ints(raw: str) -> List[int]:
    out = []
    for part in raw.split(","):
        try:
            out.append(int(part.strip()))
        except ValueError:
            continue
    return out
