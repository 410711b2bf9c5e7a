# src/courseautoapprove/services/request_store.py
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Session

from courseautoapprove.app_logger import get_logger
from courseautoapprove.core.config import settings
from courseautoapprove.db.models import (
    STATUS_APPROVED,
    STATUS_PENDING,
    STATUS_REJECTED,
    Course,
    CourseRequest,
    Enrolment,
    Role,
    RoleAssignment,
)
from courseautoapprove.exceptions import RequestNotPendingError, UnknownRoleError
from courseautoapprove.services.interfaces import Notifier
from courseautoapprove.services.notifier import SqlNotifier
from courseautoapprove.strings import get_string

log = get_logger("services.request_store")


class SqlRequestStore:
    """
    Course requests backed by the ``course_requests`` table.

    With ``commit_each`` set, every approve/reject is committed on its own, so a
    failure later in a run leaves earlier decisions in place.
    """

    def __init__(
        self,
        session: Session,
        notifier: Optional[Notifier] = None,
        creator_role: Optional[str] = None,
        commit_each: bool = False,
    ) -> None:
        self.session = session
        self.notifier = notifier or SqlNotifier(session)
        self.creator_role = creator_role or settings.CREATOR_ROLE
        self.commit_each = commit_each

    # ------------------------
    # Reads
    # ------------------------
    @contextmanager
    def list_pending(self) -> Iterator[Iterator[CourseRequest]]:
        """Pending requests in insertion order. The result is closed when the block exits."""
        stmt = (
            sa.select(CourseRequest)
            .where(CourseRequest.status == STATUS_PENDING)
            .order_by(CourseRequest.id)
        )
        result = self.session.scalars(stmt)
        try:
            yield iter(result)
        finally:
            result.close()

    # ------------------------
    # Decisions
    # ------------------------
    def _ensure_pending(self, request: CourseRequest) -> None:
        if not request.is_pending:
            raise RequestNotPendingError(request.id, request.status)

    def _finish(self) -> None:
        if self.commit_each:
            self.session.commit()
        else:
            self.session.flush()

    def approve(self, request: CourseRequest) -> Course:
        """Create the course, make the requester its teacher, and notify them."""
        self._ensure_pending(request)

        role = self.session.scalar(sa.select(Role).where(Role.shortname == self.creator_role))
        if role is None:
            raise UnknownRoleError(self.creator_role)

        course = Course(
            shortname=request.shortname,
            fullname=request.fullname,
            summary=request.summary,
            category_id=request.category_id,
        )
        self.session.add(course)
        self.session.flush()

        self.session.add(Enrolment(user_id=request.requester_id, course_id=course.id))
        self.session.add(RoleAssignment(role_id=role.id, user_id=request.requester_id, course_id=course.id))

        request.status = STATUS_APPROVED
        request.course_id = course.id
        request.decided_at = datetime.now(timezone.utc)

        self.notifier.notify(
            request.requester_id,
            "courseapproved",
            get_string("courseapprovedsubject"),
            get_string("courseapprovedbody", fullname=request.fullname, shortname=request.shortname),
        )
        self._finish()
        log.debug("Request %s approved as course %s", request.id, course.id)
        return course

    def reject(self, request: CourseRequest, message: str) -> None:
        """Mark the request rejected and notify the requester with ``message``."""
        self._ensure_pending(request)

        request.status = STATUS_REJECTED
        request.rejection_message = message
        request.decided_at = datetime.now(timezone.utc)

        self.notifier.notify(
            request.requester_id,
            "courserejected",
            get_string("courserejectedsubject"),
            get_string("courserejectedbody", fullname=request.fullname, message=message),
        )
        self._finish()
        log.debug("Request %s rejected", request.id)
