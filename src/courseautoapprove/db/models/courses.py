from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from courseautoapprove.db.base import Base, IdMixin, TimestampMixin


class Course(IdMixin, TimestampMixin, Base):
    __tablename__ = "courses"

    # Unique short identifier, e.g. "cs101"
    shortname: Mapped[str] = mapped_column(sa.String(255), nullable=False, unique=True)
    fullname: Mapped[str] = mapped_column(sa.String(254), nullable=False)
    summary: Mapped[Optional[str]] = mapped_column(sa.Text)
    category_id: Mapped[Optional[int]] = mapped_column(sa.Integer)
