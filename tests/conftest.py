# tests/conftest.py
from __future__ import annotations

import logging
import os
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from courseautoapprove.app_logger import ROOT_LOGGER
from courseautoapprove.db.base import Base
from courseautoapprove.db.models import (
    COURSE_UPDATE,
    Course,
    CourseRequest,
    Enrolment,
    Role,
    RoleAssignment,
    RoleCapability,
    User,
)
from courseautoapprove.db.models.roles import PERMISSION_ALLOW


# =========================
# Logging -> stdout
# =========================
@pytest.fixture(scope="session", autouse=True)
def _tests_log_to_stdout():
    root = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stdout
               for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(os.getenv("TEST_LOG_LEVEL", "INFO").upper())


@pytest.fixture(autouse=True)
def _propagate_app_logs():
    # setup_logging() (run by the CLI) turns propagation off; caplog needs it on
    logger = logging.getLogger(ROOT_LOGGER)
    yield
    logger.propagate = True
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# =========================
# Database
# =========================
@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, class_=Session)


@pytest.fixture()
def session(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture()
def roles(session):
    teacher = Role(shortname="editingteacher", name="Teacher")
    teacher.capabilities.append(RoleCapability(capability=COURSE_UPDATE, permission=PERMISSION_ALLOW))
    student = Role(shortname="student", name="Student")
    session.add_all([teacher, student])
    session.commit()
    return {"editingteacher": teacher, "student": student}


class Seeder:
    """Small helpers to build platform data for a test."""

    def __init__(self, session: Session, roles: dict[str, Role]) -> None:
        self.session = session
        self.roles = roles
        self._n = 0

    def user(self, username: str | None = None) -> User:
        self._n += 1
        u = User(username=username or f"user{self._n}", email=f"user{self._n}@example.org")
        self.session.add(u)
        self.session.flush()
        return u

    def course(self, shortname: str, fullname: str | None = None) -> Course:
        c = Course(shortname=shortname, fullname=fullname or shortname.upper())
        self.session.add(c)
        self.session.flush()
        return c

    def enrol(self, user: User, course: Course, role: str | None = "student") -> None:
        self.session.add(Enrolment(user_id=user.id, course_id=course.id))
        if role:
            self.session.add(RoleAssignment(role_id=self.roles[role].id, user_id=user.id, course_id=course.id))
        self.session.flush()

    def teacher_in(self, user: User, count: int, prefix: str | None = None) -> list[Course]:
        prefix = prefix or f"{user.username}-c"
        courses = [self.course(f"{prefix}{i}") for i in range(count)]
        for c in courses:
            self.enrol(user, c, "editingteacher")
        return courses

    def request(self, user: User, shortname: str, fullname: str | None = None) -> CourseRequest:
        r = CourseRequest(requester_id=user.id, shortname=shortname, fullname=fullname or f"Course {shortname}")
        self.session.add(r)
        self.session.flush()
        return r


@pytest.fixture()
def seed(session, roles):
    yield Seeder(session, roles)
    session.commit()
