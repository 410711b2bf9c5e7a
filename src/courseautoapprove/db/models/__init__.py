# Import every module that defines ORM classes
from .users import User
from .courses import Course
from .enrolments import Enrolment
from .roles import Role, RoleCapability, RoleAssignment, COURSE_UPDATE
from .course_requests import (
    CourseRequest,
    STATUS_PENDING,
    STATUS_APPROVED,
    STATUS_REJECTED,
)
from .config_plugins import PluginConfig
from .notifications import Notification

__all__ = [
    "User",
    "Course",
    "Enrolment",
    "Role",
    "RoleCapability",
    "RoleAssignment",
    "COURSE_UPDATE",
    "CourseRequest",
    "STATUS_PENDING",
    "STATUS_APPROVED",
    "STATUS_REJECTED",
    "PluginConfig",
    "Notification",
]
