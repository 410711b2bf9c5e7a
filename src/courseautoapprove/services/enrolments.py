from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.orm import Session

from courseautoapprove.db.models import Course, Enrolment


class SqlEnrollmentService:
    def __init__(self, session: Session) -> None:
        self.session = session

    def courses_for_user(self, user_id: int) -> list[Course]:
        """All courses the user is enrolled in, ordered by course id."""
        stmt = (
            sa.select(Course)
            .join(Enrolment, Enrolment.course_id == Course.id)
            .where(Enrolment.user_id == user_id)
            .order_by(Course.id)
        )
        return list(self.session.scalars(stmt))
