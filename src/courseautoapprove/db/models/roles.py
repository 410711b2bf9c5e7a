from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courseautoapprove.db.base import Base, IdMixin, TimestampMixin

# Capability checked to decide whether a user acts as a teacher in a course
COURSE_UPDATE = "course:update"

PERMISSION_ALLOW = 1
PERMISSION_PROHIBIT = -1


class Role(IdMixin, Base):
    __tablename__ = "roles"

    shortname: Mapped[str] = mapped_column(sa.String(100), nullable=False, unique=True)
    name: Mapped[Optional[str]] = mapped_column(sa.String(255))

    capabilities: Mapped[list["RoleCapability"]] = relationship(
        back_populates="role", cascade="all,delete-orphan"
    )


class RoleCapability(IdMixin, Base):
    __tablename__ = "role_capabilities"
    __table_args__ = (UniqueConstraint("role_id", "capability", name="uq_role_capabilities_role_capability"),)

    role_id: Mapped[int] = mapped_column(ForeignKey("roles.id", ondelete="CASCADE"), index=True)
    capability: Mapped[str] = mapped_column(sa.String(255), nullable=False)
    permission: Mapped[int] = mapped_column(sa.Integer, nullable=False, default=PERMISSION_ALLOW)

    role: Mapped[Role] = relationship(back_populates="capabilities")


class RoleAssignment(IdMixin, TimestampMixin, Base):
    """A user holding a role in a course, or site-wide when ``course_id`` is NULL."""
    __tablename__ = "role_assignments"
    __table_args__ = (
        UniqueConstraint("role_id", "user_id", "course_id", name="uq_role_assignments_role_user_course"),
    )

    role_id: Mapped[int] = mapped_column(ForeignKey("roles.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    course_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=True, index=True
    )

    role: Mapped[Role] = relationship(lazy="joined")
