# tests/fakes.py
"""In-memory collaborators for exercising the approval loop without a database."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple


@dataclass
class FakeRequest:
    id: int
    requester_id: int
    shortname: str
    fullname: str = ""
    status: str = "pending"


@dataclass
class FakeCourse:
    id: int
    shortname: str


class FakeRequestStore:
    def __init__(self, requests: List[FakeRequest], fail_on: Optional[int] = None) -> None:
        self.requests = list(requests)
        self.fail_on = fail_on
        self.approved: List[int] = []
        self.rejected: List[Tuple[int, str]] = []
        self.notified: List[int] = []
        self.acquired = 0
        self.released = 0

    @contextmanager
    def list_pending(self):
        self.acquired += 1
        try:
            yield iter([r for r in self.requests if r.status == "pending"])
        finally:
            self.released += 1

    def approve(self, request: FakeRequest) -> None:
        if request.id == self.fail_on:
            raise RuntimeError(f"store unavailable while approving {request.id}")
        request.status = "approved"
        self.approved.append(request.id)

    def reject(self, request: FakeRequest, message: str) -> None:
        if request.id == self.fail_on:
            raise RuntimeError(f"store unavailable while rejecting {request.id}")
        request.status = "rejected"
        self.rejected.append((request.id, message))
        self.notified.append(request.requester_id)

    @property
    def mutations(self) -> int:
        return len(self.approved) + len(self.rejected)


@dataclass
class FakeEnrollmentService:
    """``teaching`` maps user id -> number of courses taught; ``other`` adds non-teaching enrolments."""

    teaching: Dict[int, int] = field(default_factory=dict)
    other: Dict[int, int] = field(default_factory=dict)
    calls: List[int] = field(default_factory=list)

    def courses_for_user(self, user_id: int) -> List[FakeCourse]:
        self.calls.append(user_id)
        taught = [FakeCourse(id=user_id * 1000 + i, shortname=f"t{user_id}-{i}")
                  for i in range(self.teaching.get(user_id, 0))]
        enrolled = [FakeCourse(id=user_id * 1000 + 500 + i, shortname=f"s{user_id}-{i}")
                    for i in range(self.other.get(user_id, 0))]
        return taught + enrolled


class FakeCapabilityService:
    def has_update_capability(self, user_id: int, course: FakeCourse) -> bool:
        return course.shortname.startswith("t")


@dataclass
class FakeCollisionChecker:
    existing: Set[str] = field(default_factory=set)

    def shortname_exists(self, shortname: str) -> bool:
        return shortname in self.existing
