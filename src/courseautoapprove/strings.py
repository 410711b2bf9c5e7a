# src/courseautoapprove/strings.py
"""
Message catalogue for user-facing text.

Placeholders use ``str.format`` syntax and are filled from keyword arguments.
"""
from __future__ import annotations

from typing import Any

COMPONENT = "tool_courseautoapprove"

STRINGS: dict[str, str] = {
    "pluginname": "Course requests auto-approval",
    "courseautoapprovetask": "Automatically approve course requests",
    "maxcourses": "Maximum courses",
    "maxcourses_desc": (
        "Course requests are approved automatically only while the requester is a teacher "
        "in fewer than this number of courses. Set to 0 to disable automatic approval."
    ),
    "reject": "Reject over-limit requests",
    "reject_desc": (
        "If enabled, requests that cannot be approved automatically are rejected and the "
        "requester is notified. Otherwise they are left for a manager to decide."
    ),
    "rejectmsgcount": (
        "You are already a teacher in {currentcourses} course(s) and the maximum allowed "
        "for automatic approval is {maxcourses}."
    ),
    "rejectmsgshortname": (
        "A course with the requested short name already exists. Please submit a new "
        "request with a different short name."
    ),
    "courseapprovedsubject": "Your course has been approved",
    "courseapprovedbody": "Your requested course '{fullname}' ({shortname}) has been created.",
    "courserejectedsubject": "Your course request has been rejected",
    "courserejectedbody": "Your request for the course '{fullname}' was rejected:\n\n{message}",
}


def get_string(key: str, **params: Any) -> str:
    """Return the catalogue text for ``key`` with ``params`` substituted."""
    try:
        text = STRINGS[key]
    except KeyError:
        raise KeyError(f"Unknown string '{key}' in {COMPONENT}") from None
    return text.format(**params) if params else text
