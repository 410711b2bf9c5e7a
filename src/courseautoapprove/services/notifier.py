from __future__ import annotations

from sqlalchemy.orm import Session

from courseautoapprove.app_logger import get_logger
from courseautoapprove.db.models import Notification
from courseautoapprove.strings import COMPONENT

log = get_logger("services.notifier")


class SqlNotifier:
    """Queues notifications in the ``notifications`` table; delivery happens elsewhere."""

    def __init__(self, session: Session, component: str = COMPONENT) -> None:
        self.session = session
        self.component = component

    def notify(self, user_id: int, event: str, subject: str, body: str) -> Notification:
        note = Notification(
            user_id=user_id,
            component=self.component,
            event=event,
            subject=subject,
            body=body,
        )
        self.session.add(note)
        self.session.flush()
        log.info("Queued %s notification %s for user %s", event, note.id, user_id)
        return note
