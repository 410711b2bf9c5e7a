from .interfaces import (
    CapabilityService,
    CollisionChecker,
    EnrollmentService,
    Notifier,
    RequestStore,
)
from .capabilities import SqlCapabilityService
from .collisions import SqlCollisionChecker
from .enrolments import SqlEnrollmentService
from .notifier import SqlNotifier
from .request_store import SqlRequestStore

__all__ = [
    "CapabilityService",
    "CollisionChecker",
    "EnrollmentService",
    "Notifier",
    "RequestStore",
    "SqlCapabilityService",
    "SqlCollisionChecker",
    "SqlEnrollmentService",
    "SqlNotifier",
    "SqlRequestStore",
]
