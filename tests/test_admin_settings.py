# tests/test_admin_settings.py
from __future__ import annotations

import pytest

from courseautoapprove.admin.settings import (
    SETTINGS,
    get_config,
    load_approval_config,
    write_setting,
)
from courseautoapprove.exceptions import SettingValidationError


def test_registered_settings():
    assert list(SETTINGS) == ["maxcourses", "reject"]
    maxcourses, reject = SETTINGS["maxcourses"], SETTINGS["reject"]
    assert maxcourses.fullname == "tool_courseautoapprove/maxcourses"
    assert maxcourses.kind == "configtext" and maxcourses.default == "1"
    assert reject.kind == "configcheckbox" and reject.default == "1"
    assert reject.title == "Reject over-limit requests"
    assert "Set to 0" in maxcourses.description


def test_defaults_when_nothing_stored(session):
    assert get_config(session) == {"maxcourses": "1", "reject": "1"}
    config = load_approval_config(session)
    assert config.maxcourses == 1
    assert config.reject is True


def test_written_values_override_defaults(session):
    write_setting(session, "maxcourses", " 4 ")
    write_setting(session, "reject", False)
    write_setting(session, "maxcourses", "5")

    assert get_config(session) == {"maxcourses": "5", "reject": "0"}
    config = load_approval_config(session)
    assert (config.maxcourses, config.reject) == (5, False)


@pytest.mark.parametrize("raw,stored", [("yes", "1"), ("on", "1"), ("0", "0"), ("", "0"), (True, "1")])
def test_checkbox_values(session, raw, stored):
    assert write_setting(session, "reject", raw) == stored


@pytest.mark.parametrize("name,raw", [
    ("maxcourses", "many"),
    ("maxcourses", "-1"),
    ("maxcourses", "1.5"),
    ("reject", "maybe"),
    ("colour", "blue"),
])
def test_invalid_values_are_refused(session, name, raw):
    with pytest.raises(SettingValidationError) as excinfo:
        write_setting(session, name, raw)
    assert excinfo.value.error_code == "setting_validation_failed"
    assert get_config(session) == {"maxcourses": "1", "reject": "1"}


def test_zero_disables(session):
    write_setting(session, "maxcourses", 0)
    assert load_approval_config(session).enabled is False
