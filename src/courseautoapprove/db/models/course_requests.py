from __future__ import annotations

from datetime import datetime
from typing import Optional

import sqlalchemy as sa
from sqlalchemy import ForeignKey, text
from sqlalchemy.orm import Mapped, mapped_column

from courseautoapprove.db.base import Base, IdMixin, TimestampMixin

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"


class CourseRequest(IdMixin, TimestampMixin, Base):
    __tablename__ = "course_requests"

    requester_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    shortname: Mapped[str] = mapped_column(sa.String(255), nullable=False, server_default=text("''"))
    fullname: Mapped[str] = mapped_column(sa.String(254), nullable=False)
    summary: Mapped[Optional[str]] = mapped_column(sa.Text)
    reason: Mapped[Optional[str]] = mapped_column(sa.Text)
    category_id: Mapped[Optional[int]] = mapped_column(sa.Integer)

    status: Mapped[str] = mapped_column(
        sa.String(16), nullable=False, default=STATUS_PENDING, server_default=text("'pending'"), index=True
    )  # pending|approved|rejected
    course_id: Mapped[Optional[int]] = mapped_column(ForeignKey("courses.id", ondelete="SET NULL"))
    rejection_message: Mapped[Optional[str]] = mapped_column(sa.Text)
    decided_at: Mapped[Optional[datetime]] = mapped_column(sa.DateTime(timezone=True))

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING
