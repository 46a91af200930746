from __future__ import annotations

import logging

from easybook.application.ports.record_store import USER_SLOT, RecordStorePort
from easybook.application.utils.documents import user_from_document, user_to_document
from easybook.domain.entities.user import SessionSummary, User


class SessionHolder:
    """The single current-user slot. Login state and the profile summary are derived from it."""

    def __init__(self, store: RecordStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def save(self, user: User) -> None:
        self._store.save(USER_SLOT, user_to_document(user))
        self._logger.info("Session user saved", extra={"user_id": user.id})

    def current(self) -> User | None:
        data = self._store.load(USER_SLOT)
        if data is None:
            return None
        try:
            return user_from_document(data)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            self._logger.warning("Stored user is malformed", extra={"slot": USER_SLOT, "error": str(e)})
            return None

    def clear(self) -> None:
        self._store.remove(USER_SLOT)
        self._logger.info("Session cleared")

    def is_logged_in(self) -> bool:
        return self.current() is not None

    def summary(self) -> SessionSummary:
        return SessionSummary.from_user(self.current())
