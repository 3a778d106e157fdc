"""
services/
---------
Backend access layer.

    from services import ApiClient, CredentialStore, Services
"""

from dataclasses import dataclass

from services.algorithms import SearchingService, SortingService
from services.auth import AuthService
from services.errors import (
    AlgoPulseError,
    ApiError,
    TransportError,
    Unauthorized,
    ValidationError,
)
from services.http import ApiClient
from services.models import AlgorithmSession, ApiResponse, StructureSession, User
from services.storage import CredentialStore
from services.structures import LinkedListService, QueueService, StackService


@dataclass
class Services:
    """Every endpoint wrapper, bound to one ApiClient."""

    auth:        AuthService
    linked_list: LinkedListService
    stack:       StackService
    queue:       QueueService
    sorting:     SortingService
    searching:   SearchingService

    @classmethod
    def bind(cls, client: ApiClient) -> "Services":
        return cls(
            auth=AuthService(client),
            linked_list=LinkedListService(client),
            stack=StackService(client),
            queue=QueueService(client),
            sorting=SortingService(client),
            searching=SearchingService(client),
        )


__all__ = [
    "AlgoPulseError",
    "AlgorithmSession",
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "AuthService",
    "CredentialStore",
    "LinkedListService",
    "QueueService",
    "SearchingService",
    "Services",
    "SortingService",
    "StackService",
    "StructureSession",
    "TransportError",
    "Unauthorized",
    "User",
    "ValidationError",
]
