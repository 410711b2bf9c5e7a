from .approve_course_requests import (
    ApprovalConfig,
    ApproveCourseRequestsTask,
    count_courses_user_is_teacher,
    run,
)
from .report import Outcome, ProcessingReport, ReportEntry

__all__ = [
    "ApprovalConfig",
    "ApproveCourseRequestsTask",
    "count_courses_user_is_teacher",
    "run",
    "Outcome",
    "ProcessingReport",
    "ReportEntry",
]
