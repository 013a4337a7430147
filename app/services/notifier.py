import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from app.schemas.notification import Toast, ToastKind, ToastPhase, ToastView

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Notifier:
    """Transient toast messages.

    Each toast is independent: visible for ``duration`` seconds, then fading
    for ``fade`` seconds, then removed. At most ``max_toasts`` are live; the
    oldest is dropped when a new one would exceed the cap.
    """

    def __init__(
        self,
        duration: float = 3.0,
        fade: float = 0.3,
        max_toasts: int = 5,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._duration = timedelta(seconds=duration)
        self._fade = timedelta(seconds=fade)
        self._max_toasts = max_toasts
        self._clock = clock or _utcnow
        self._toasts: list[Toast] = []

    def notify(self, message: str, kind: ToastKind | str = ToastKind.success) -> Toast:
        toast = Toast(
            id=uuid.uuid4().hex[:12],
            message=message,
            kind=ToastKind(kind),
            created_at=self._clock(),
        )
        self._toasts.append(toast)
        while len(self._toasts) > self._max_toasts:
            dropped = self._toasts.pop(0)
            logger.debug("Dropped toast %s over cap", dropped.id)
        return toast

    def phase(self, toast: Toast, now: datetime | None = None) -> ToastPhase:
        age = (now or self._clock()) - toast.created_at
        if age < self._duration:
            return ToastPhase.visible
        if age < self._duration + self._fade:
            return ToastPhase.fading
        return ToastPhase.removed

    def active(self, now: datetime | None = None) -> list[ToastView]:
        """Live toasts with their phase; removed ones are pruned."""
        now = now or self._clock()
        views = []
        kept = []
        for toast in self._toasts:
            phase = self.phase(toast, now)
            if phase is ToastPhase.removed:
                continue
            kept.append(toast)
            views.append(ToastView(
                id=toast.id, message=toast.message, kind=toast.kind, phase=phase,
            ))
        self._toasts = kept
        return views
