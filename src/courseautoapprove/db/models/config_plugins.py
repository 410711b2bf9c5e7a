from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from courseautoapprove.db.base import Base, IdMixin


class PluginConfig(IdMixin, Base):
    __tablename__ = "config_plugins"
    __table_args__ = (UniqueConstraint("plugin", "name", name="uq_config_plugins_plugin_name"),)

    plugin: Mapped[str] = mapped_column(sa.String(100), nullable=False, index=True)
    name: Mapped[str] = mapped_column(sa.String(100), nullable=False)
    value: Mapped[Optional[str]] = mapped_column(sa.Text)
