from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from app.config import Settings
from app.schemas.currency import Currency
from app.schemas.user import User
from app.services.auth import AuthService
from app.services.currency import CurrencyService
from app.services.guests import GuestSelector
from app.services.listings import FilterSortEngine
from app.services.notifier import Notifier
from app.storage import KeyValueStore

logger = logging.getLogger(__name__)


class AppState:
    """Everything one visitor owns: store, notifier and the stateful widgets."""

    def __init__(
        self,
        settings: Settings,
        store: KeyValueStore | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.created_at = datetime.now(timezone.utc)
        self.store = store or KeyValueStore()
        self.notifier = Notifier(
            duration=settings.toast_duration,
            fade=settings.toast_fade,
            max_toasts=settings.max_toasts,
            clock=clock,
        )
        self.currency = CurrencyService(
            self.store, self.notifier,
            default=settings.default_currency,
            decimals=settings.price_decimals,
        )
        self.auth = AuthService(self.store, self.notifier)
        self.guests = GuestSelector()
        self.listings = FilterSortEngine(self.notifier)
        self.auth.restore()

    @property
    def user(self) -> User | None:
        return self.auth.user

    @property
    def selected_currency(self) -> Currency:
        return self.currency.current


class SessionRegistry:
    def __init__(self, settings: Settings, max_sessions: int | None = None) -> None:
        self._settings = settings
        self._sessions: dict[str, AppState] = {}
        self._max_sessions = max_sessions or settings.max_sessions

    def _evict(self) -> None:
        if len(self._sessions) <= self._max_sessions:
            return
        # Oldest first
        oldest = sorted(self._sessions.items(), key=lambda kv: kv[1].created_at)
        while len(self._sessions) > self._max_sessions and oldest:
            session_id, _ = oldest.pop(0)
            self._sessions.pop(session_id, None)
            logger.debug("Evicted session %s", session_id)

    def create(self) -> tuple[str, AppState]:
        session_id = uuid.uuid4().hex
        state = AppState(self._settings)
        self._sessions[session_id] = state
        self._evict()
        return session_id, state

    def get(self, session_id: str | None) -> AppState | None:
        if session_id is None:
            return None
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str | None) -> tuple[str, AppState]:
        state = self.get(session_id)
        if state is not None:
            return session_id, state
        return self.create()

    def __len__(self) -> int:
        return len(self._sessions)
