# src/courseautoapprove/admin/settings.py
"""
Admin settings for the auto-approval tool.

Two settings are registered under the ``tool_courseautoapprove`` plugin:

* ``maxcourses`` -- integer text field, default ``"1"``; ``0`` disables the task
* ``reject``     -- checkbox, default ``1``

Values are persisted as strings in ``config_plugins`` and read back merged over
the registered defaults.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from courseautoapprove.app_logger import get_logger
from courseautoapprove.db.models import PluginConfig
from courseautoapprove.exceptions import SettingValidationError
from courseautoapprove.strings import COMPONENT, get_string

log = get_logger("admin.settings")

PLUGIN = COMPONENT

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _clean_int(name: str, raw: Any) -> str:
    text = str(raw).strip()
    try:
        value = int(text)
    except ValueError:
        raise SettingValidationError(name, raw, "must be an integer") from None
    if value < 0:
        raise SettingValidationError(name, raw, "must not be negative")
    return str(value)


def _clean_checkbox(name: str, raw: Any) -> str:
    if isinstance(raw, bool):
        return "1" if raw else "0"
    text = str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return "1"
    if text in _FALSE_VALUES:
        return "0"
    raise SettingValidationError(name, raw, "must be a checkbox value (0 or 1)")


@dataclass(frozen=True)
class AdminSetting:
    name: str
    kind: str  # "configtext" | "configcheckbox"
    default: str
    clean: Callable[[str, Any], str]

    @property
    def fullname(self) -> str:
        return f"{PLUGIN}/{self.name}"

    @property
    def title(self) -> str:
        return get_string(self.name)

    @property
    def description(self) -> str:
        return get_string(f"{self.name}_desc")


SETTINGS: Dict[str, AdminSetting] = {
    s.name: s
    for s in (
        AdminSetting("maxcourses", "configtext", "1", _clean_int),
        AdminSetting("reject", "configcheckbox", "1", _clean_checkbox),
    )
}


def get_setting(name: str) -> AdminSetting:
    try:
        return SETTINGS[name]
    except KeyError:
        raise SettingValidationError(name, None, "unknown setting") from None


def get_config(session: Session) -> Dict[str, str]:
    """Registered defaults overlaid with the persisted values."""
    values = {name: s.default for name, s in SETTINGS.items()}
    rows = session.scalars(sa.select(PluginConfig).where(PluginConfig.plugin == PLUGIN))
    for row in rows:
        if row.value is not None:
            values[row.name] = row.value
    return values


def write_setting(session: Session, name: str, raw: Any) -> str:
    """Validate and persist a setting value. Returns the stored string."""
    setting = get_setting(name)
    value = setting.clean(name, raw)

    row: Optional[PluginConfig] = session.scalar(
        sa.select(PluginConfig).where(PluginConfig.plugin == PLUGIN, PluginConfig.name == name)
    )
    if row is None:
        session.add(PluginConfig(plugin=PLUGIN, name=name, value=value))
    else:
        row.value = value
    session.flush()
    log.info("Setting %s updated to %s", setting.fullname, value)
    return value


class ApprovalConfig(BaseModel):
    """Immutable snapshot of the tool settings, loaded once per run."""

    model_config = ConfigDict(frozen=True)

    maxcourses: int = Field(default=1, ge=0)
    reject: bool = True

    @property
    def enabled(self) -> bool:
        return self.maxcourses > 0


def load_approval_config(session: Session) -> ApprovalConfig:
    values = get_config(session)
    return ApprovalConfig(
        maxcourses=int(_clean_int("maxcourses", values["maxcourses"])),
        reject=_clean_checkbox("reject", values["reject"]) == "1",
    )
