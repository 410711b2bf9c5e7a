from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from courseautoapprove.db.base import Base, IdMixin, TimestampMixin


class Enrolment(IdMixin, TimestampMixin, Base):
    __tablename__ = "user_enrolments"
    __table_args__ = (UniqueConstraint("user_id", "course_id", name="uq_user_enrolments_user_course"),)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id", ondelete="CASCADE"), index=True)
