from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.orm import Session

from courseautoapprove.db.models import Course


class SqlCollisionChecker:
    def __init__(self, session: Session) -> None:
        self.session = session

    def shortname_exists(self, shortname: str) -> bool:
        # Blank shortnames are compared like any other; courses.shortname is unique
        stmt = sa.select(sa.exists().where(Course.shortname == (shortname or "")))
        return bool(self.session.scalar(stmt))
