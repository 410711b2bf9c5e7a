from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from courseautoapprove.db.base import Base, IdMixin, TimestampMixin


class User(IdMixin, TimestampMixin, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(sa.String(100), nullable=False, unique=True)
    email: Mapped[Optional[str]] = mapped_column(sa.String(255))
    firstname: Mapped[Optional[str]] = mapped_column(sa.String(100))
    lastname: Mapped[Optional[str]] = mapped_column(sa.String(100))

