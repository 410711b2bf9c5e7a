from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from sqlalchemy.orm import Session

from courseautoapprove.db.models import COURSE_UPDATE, RoleAssignment, RoleCapability
from courseautoapprove.db.models.roles import PERMISSION_ALLOW, PERMISSION_PROHIBIT


class SqlCapabilityService:
    """
    Resolves capabilities from role assignments.

    Roles assigned in the course and site-wide roles (``course_id`` NULL) both
    apply. A prohibit on any of them wins over every allow.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _permissions(self, user_id: int, course_id: int, capability: str) -> set[int]:
        stmt = (
            sa.select(RoleCapability.permission)
            .join(RoleAssignment, RoleAssignment.role_id == RoleCapability.role_id)
            .where(
                RoleAssignment.user_id == user_id,
                sa.or_(RoleAssignment.course_id == course_id, RoleAssignment.course_id.is_(None)),
                RoleCapability.capability == capability,
            )
        )
        return set(self.session.scalars(stmt))

    def has_capability(self, capability: str, user_id: int, course: Any) -> bool:
        course_id = getattr(course, "id", course)
        permissions = self._permissions(user_id, course_id, capability)
        if PERMISSION_PROHIBIT in permissions:
            return False
        return PERMISSION_ALLOW in permissions

    def has_update_capability(self, user_id: int, course: Any) -> bool:
        return self.has_capability(COURSE_UPDATE, user_id, course)
