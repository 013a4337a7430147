import json
import logging

from pydantic import ValidationError

from app.schemas.responses import AuthOutcome
from app.schemas.user import Role, User
from app.services.notifier import Notifier
from app.storage import USER_KEY, KeyValueStore

logger = logging.getLogger(__name__)

# Demo-only elevated account; there is no real credential check.
ADMIN_EMAIL = "admin@travelhub.com"
ADMIN_PASSWORD = "admin123"
ADMIN_NAME = "Admin User"

HOME_PAGE = "index.html"
ADMIN_PAGE = "admin.html"
LOGIN_REDIRECT_MS = 800
REGISTER_REDIRECT_MS = 500
LOGOUT_REDIRECT_MS = 500


def display_name(email: str) -> str:
    return email.split("@")[0]


class AuthService:
    """Mock login/registration backed by the visitor's key-value store."""

    def __init__(self, store: KeyValueStore, notifier: Notifier):
        self._store = store
        self._notifier = notifier
        self.user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def _persist(self, user: User) -> None:
        self._store.set(USER_KEY, user.model_dump_json())
        self.user = user

    def restore(self) -> User | None:
        """Load the persisted record. A corrupt record is dropped, never raised."""
        raw = self._store.get(USER_KEY)
        if raw is None:
            self.user = None
            return None
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            self.user = User.model_validate(data)
        except (ValueError, ValidationError) as exc:
            logger.warning("Discarding corrupt user record: %s", exc)
            self._store.remove(USER_KEY)
            self.user = None
        return self.user

    def login(self, email: str, password: str) -> AuthOutcome:
        if email == ADMIN_EMAIL and password == ADMIN_PASSWORD:
            user = User(name=ADMIN_NAME, email=email, role=Role.admin)
        else:
            user = User(name=display_name(email), email=email, role=Role.user)

        self._persist(user)
        message = f"Welcome back, {user.name}!"
        self._notifier.notify(message)
        logger.info("Login as %s (role=%s)", user.email, user.role)
        return AuthOutcome(
            user=user,
            notification=message,
            redirect_to=ADMIN_PAGE if user.role is Role.admin else HOME_PAGE,
            redirect_after_ms=LOGIN_REDIRECT_MS,
        )

    def register(self, name: str, email: str, password: str, from_register_page: bool = True) -> AuthOutcome:
        user = User(name=name, email=email, role=Role.user)
        self._persist(user)
        message = f"Welcome, {user.name}!"
        self._notifier.notify(message)
        logger.info("Registered %s", user.email)
        if not from_register_page:
            return AuthOutcome(user=user, notification=message)
        return AuthOutcome(
            user=user,
            notification=message,
            redirect_to=HOME_PAGE,
            redirect_after_ms=REGISTER_REDIRECT_MS,
        )

    def logout(self) -> AuthOutcome:
        self._store.remove(USER_KEY)
        self.user = None
        message = "Logged out successfully"
        self._notifier.notify(message)
        return AuthOutcome(
            user=None,
            notification=message,
            redirect_to=HOME_PAGE,
            redirect_after_ms=LOGOUT_REDIRECT_MS,
        )
