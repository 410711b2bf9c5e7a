# src/courseautoapprove/tasks/report.py
from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    """What happened to a single request during a run."""

    APPROVED = "approved"
    REJECTED_QUOTA = "rejected-quota"
    REJECTED_COLLISION = "rejected-collision"
    PENDING_QUOTA = "pending-quota"
    PENDING_COLLISION = "pending-collision"


class ReportEntry(BaseModel):
    request_id: int
    requester_id: int
    shortname: str
    outcome: Outcome
    currentcourses: int


class ProcessingReport(BaseModel):
    skipped: bool = False
    skip_reason: Optional[str] = None
    entries: List[ReportEntry] = Field(default_factory=list)

    @classmethod
    def skip(cls, reason: str) -> "ProcessingReport":
        return cls(skipped=True, skip_reason=reason)

    def add(self, request: Any, outcome: Outcome, currentcourses: int) -> ReportEntry:
        entry = ReportEntry(
            request_id=request.id,
            requester_id=request.requester_id,
            shortname=request.shortname or "",
            outcome=outcome,
            currentcourses=currentcourses,
        )
        self.entries.append(entry)
        return entry

    def counts(self) -> Dict[str, int]:
        tally = Counter(e.outcome.value for e in self.entries)
        return {o.value: tally.get(o.value, 0) for o in Outcome}

    @property
    def processed(self) -> int:
        return len(self.entries)
