"""
algorithms.py — Sorting and searching endpoints
================================================
Both families share the same session endpoints under their own prefix:

    POST   <prefix>/<algorithm>     run it, response carries the steps
    GET    <prefix>/sessions        past runs
    GET    <prefix>/session/<id>    one past run
    DELETE <prefix>/session/<id>
"""

from typing import List

from services.base import BaseService
from services.models import ApiResponse


class AlgorithmService(BaseService):
    prefix:     str = ""
    family:     str = ""
    algorithms: tuple = ()

    def run(self, algorithm: str, body: dict) -> ApiResponse:
        key = algorithm.lower()
        if key not in self.algorithms:
            return ApiResponse.failure(f"Unsupported algorithm: {algorithm}")
        label = key.replace("-", " ")
        return self._call("POST", f"{self.prefix}/{key}",
                          f"Failed to perform {label} {self.family}", data=body)

    def get_sessions(self) -> ApiResponse:
        return self._call("GET", f"{self.prefix}/sessions",
                          f"Failed to fetch {self.family} sessions")

    def get_session(self, session_id: str) -> ApiResponse:
        return self._call("GET", f"{self.prefix}/session/{session_id}",
                          f"Failed to fetch {self.family} session")

    def delete_session(self, session_id: str) -> ApiResponse:
        return self._call("DELETE", f"{self.prefix}/session/{session_id}",
                          f"Failed to delete {self.family} session")


class SortingService(AlgorithmService):
    prefix     = "/api/sort"
    family     = "sort"
    algorithms = ("bubble", "insertion", "selection", "min", "optimized-bubble")

    def sort(self, algorithm: str, array: List[int]) -> ApiResponse:
        return self.run(algorithm, {"array": list(array)})


class SearchingService(AlgorithmService):
    prefix     = "/api/search"
    family     = "search"
    algorithms = ("linear", "binary")

    def search(self, algorithm: str, array: List[int], target: int) -> ApiResponse:
        return self.run(algorithm, {"array": list(array), "target": target})
