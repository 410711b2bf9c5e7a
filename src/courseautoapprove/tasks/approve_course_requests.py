# src/courseautoapprove/tasks/approve_course_requests.py
"""
Scheduled task that approves pending course requests.

For every pending request the requester's teacher-course count is compared
with ``maxcourses``; requests under the limit whose shortname is free are
approved. The others are rejected (with a notification to the requester) when
``reject`` is set, or left pending for a manager otherwise.

Collaborator errors are not caught. A failed run is simply run again; decided
requests have left the pending set, so no request is ever decided twice.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from sqlalchemy.orm import Session, sessionmaker

from courseautoapprove.admin.settings import ApprovalConfig, load_approval_config
from courseautoapprove.app_logger import get_logger
from courseautoapprove.core.config import Settings, settings as default_settings
from courseautoapprove.db.session import session_scope
from courseautoapprove.services import (
    CapabilityService,
    CollisionChecker,
    EnrollmentService,
    RequestStore,
    SqlCapabilityService,
    SqlCollisionChecker,
    SqlEnrollmentService,
    SqlNotifier,
    SqlRequestStore,
)
from courseautoapprove.strings import get_string

from .report import Outcome, ProcessingReport

log = get_logger("tasks.approve_course_requests")

REJECT_MESSAGE_QUOTA = "rejectmsgcount"
REJECT_MESSAGE_SHORTNAME = "rejectmsgshortname"


def count_courses_user_is_teacher(
    user_id: int,
    enrollment_service: EnrollmentService,
    capability_service: CapabilityService,
) -> int:
    """Return the number of enrolled courses in which the user may update the course."""
    return sum(
        1
        for course in enrollment_service.courses_for_user(user_id)
        if capability_service.has_update_capability(user_id, course)
    )


def run(
    config: ApprovalConfig,
    request_store: RequestStore,
    enrollment_service: EnrollmentService,
    capability_service: CapabilityService,
    collision_checker: CollisionChecker,
    *,
    course_requests_enabled: bool = True,
) -> ProcessingReport:
    if not course_requests_enabled:
        log.info("... Automatic approval of course requests skipped (course requests disabled).")
        return ProcessingReport.skip("course requests disabled")

    if not config.enabled:
        log.info("... Automatic approval of course requests skipped (maxcourses set to zero).")
        return ProcessingReport.skip("maxcourses set to zero")

    log.info("... Starting to auto-approve course requests.")
    report = ProcessingReport()

    with request_store.list_pending() as pending:
        for request in pending:
            currentcourses = count_courses_user_is_teacher(
                request.requester_id, enrollment_service, capability_service
            )

            if currentcourses >= config.maxcourses:
                log.info(
                    "... - Denying course request from userid %s as they are already a teacher "
                    "in %s existing course(s) and the limit is %s.",
                    request.requester_id, currentcourses, config.maxcourses,
                )
                if config.reject:
                    log.info("...   Marking the course request as rejected and notifying the user.")
                    request_store.reject(
                        request,
                        get_string(
                            REJECT_MESSAGE_QUOTA,
                            currentcourses=currentcourses,
                            maxcourses=config.maxcourses,
                        ),
                    )
                    report.add(request, Outcome.REJECTED_QUOTA, currentcourses)
                else:
                    report.add(request, Outcome.PENDING_QUOTA, currentcourses)
                continue

            if collision_checker.shortname_exists(request.shortname):
                log.info(
                    "... - Denying course request with shortname %s as there is another with the same shortname.",
                    request.shortname,
                )
                if config.reject:
                    log.info("...   Marking the course request as rejected and notifying the user.")
                    request_store.reject(request, get_string(REJECT_MESSAGE_SHORTNAME))
                    report.add(request, Outcome.REJECTED_COLLISION, currentcourses)
                else:
                    report.add(request, Outcome.PENDING_COLLISION, currentcourses)
                continue

            log.info(
                "... - Approving course request from userid %s for the course %s.",
                request.requester_id, request.shortname,
            )
            request_store.approve(request)
            report.add(request, Outcome.APPROVED, currentcourses)

    log.info("... Finished auto-approving course requests.")
    return report


class ApproveCourseRequestsTask:
    """Scheduled entry point; the host scheduler calls ``execute()`` with no arguments."""

    def __init__(
        self,
        session_factory: Optional[sessionmaker[Session]] = None,
        app_settings: Optional[Settings] = None,
        on_report: Optional[Callable[[ProcessingReport], Any]] = None,
    ) -> None:
        self.session_factory = session_factory
        self.settings = app_settings or default_settings
        self.on_report = on_report
        self.last_report: Optional[ProcessingReport] = None

    def get_name(self) -> str:
        return get_string("courseautoapprovetask")

    def execute(self) -> None:
        with session_scope(self.session_factory) as session:
            config = load_approval_config(session)
            store = SqlRequestStore(
                session,
                notifier=SqlNotifier(session),
                creator_role=self.settings.CREATOR_ROLE,
                commit_each=True,
            )
            self.last_report = run(
                config,
                store,
                SqlEnrollmentService(session),
                SqlCapabilityService(session),
                SqlCollisionChecker(session),
                course_requests_enabled=self.settings.ENABLE_COURSE_REQUESTS,
            )
        if self.on_report is not None:
            self.on_report(self.last_report)


__all__ = [
    "ApprovalConfig",
    "ApproveCourseRequestsTask",
    "count_courses_user_is_teacher",
    "run",
]
