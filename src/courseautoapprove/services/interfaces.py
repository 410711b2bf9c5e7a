# src/courseautoapprove/services/interfaces.py
"""
Collaborators consumed by the approval task.

Any object with the right methods works; the SQLAlchemy implementations live
next to this module and tests use in-memory fakes.
"""
from __future__ import annotations

from typing import Any, ContextManager, Iterator, Protocol, Sequence


class RequestStore(Protocol):
    def list_pending(self) -> ContextManager[Iterator[Any]]:
        """Scoped iteration over pending requests; released when the block exits."""
        ...

    def approve(self, request: Any) -> Any: ...

    def reject(self, request: Any, message: str) -> None: ...


class EnrollmentService(Protocol):
    def courses_for_user(self, user_id: int) -> Sequence[Any]: ...


class CapabilityService(Protocol):
    def has_update_capability(self, user_id: int, course: Any) -> bool: ...


class CollisionChecker(Protocol):
    def shortname_exists(self, shortname: str) -> bool: ...


class Notifier(Protocol):
    def notify(self, user_id: int, event: str, subject: str, body: str) -> Any: ...
