"""
Session manager: registration, login, logout and profile updates.

There is no server-side auth. Identity checks are fetch-then-scan
against the `users` collection at call time, so two concurrent
registrations of the same username can both pass the duplicate check.
The current user (password removed) is cached in a SessionStore slot
and rehydrated by restore() on start.

Every operation reports failure as an AuthResult instead of raising.
"""

import json
from typing import Any, Optional

from triptracker.core.config import get_settings
from triptracker.core.errors import NotAuthenticatedError
from triptracker.core.logging import get_logger
from triptracker.core.metrics import record_auth_attempt
from triptracker.core.utils import generate_id, utc_now_iso
from triptracker.infrastructure.http_transport import HttpTransport, is_status, response_data
from triptracker.resources import users as users_api
from triptracker.schemas.auth import AuthError, AuthResult
from triptracker.schemas.user import SessionUser, UserCreate, UserLogin
from triptracker.services.interfaces.session_store import SessionStore
from triptracker.services.store_factory import get_session_store

logger = get_logger(__name__)


class SessionManager:
    """
    Owns the current-user value. Inject one instance wherever the
    signed-in user is needed; it is the only writer of the session.
    """

    def __init__(self, transport: HttpTransport, store: SessionStore, session_key: Optional[str] = None):
        self.transport = transport
        self.store = store
        self.session_key = session_key or get_settings().SESSION_KEY
        self._user: Optional[SessionUser] = None
        self._loading = True

    @classmethod
    def from_settings(cls, transport: HttpTransport) -> "SessionManager":
        """Session manager on the configured SESSION_BACKEND, already restored."""
        manager = cls(transport, get_session_store())
        manager.restore()
        return manager

    @property
    def user(self) -> Optional[SessionUser]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def loading(self) -> bool:
        """True until restore() has run."""
        return self._loading

    def require_user(self) -> SessionUser:
        if self._user is None:
            raise NotAuthenticatedError("No user is signed in")
        return self._user

    def restore(self) -> Optional[SessionUser]:
        """Rehydrate the session from the persisted slot. No staleness check."""
        raw = self.store.get(self.session_key)
        if raw:
            try:
                self._user = SessionUser.model_validate(json.loads(raw))
                logger.info("session_restored", user_id=self._user.id)
            except ValueError as e:
                logger.warning("session_blob_invalid", error=str(e))
                self._user = None
        self._loading = False
        return self._user

    def _set_session(self, record: dict[str, Any]) -> SessionUser:
        session_user = SessionUser.from_record(record)
        self._user = session_user
        self.store.set(self.session_key, json.dumps(session_user.to_wire()))
        return session_user

    async def register(self, candidate: UserCreate) -> AuthResult:
        """
        Create an account and sign it in.
        Fails with DUPLICATE_EMAIL / DUPLICATE_USERNAME if a lookup finds a match.
        """
        try:
            email_matches = response_data(await users_api.find_users_by_email(self.transport, candidate.email))
            if email_matches:
                logger.warning("registration_failed", reason="email_exists", email=candidate.email)
                record_auth_attempt("register", AuthError.DUPLICATE_EMAIL.value)
                return AuthResult.fail(AuthError.DUPLICATE_EMAIL, "Email already registered")

            username_matches = response_data(
                await users_api.find_users_by_username(self.transport, candidate.username)
            )
            if username_matches:
                logger.warning("registration_failed", reason="username_exists", username=candidate.username)
                record_auth_attempt("register", AuthError.DUPLICATE_USERNAME.value)
                return AuthResult.fail(AuthError.DUPLICATE_USERNAME, "Username already taken")

            new_user = {
                "id": generate_id(),
                "username": candidate.username,
                "email": candidate.email,
                "password": candidate.password,
                "fullName": candidate.full_name,
                "avatar": None,
                "createdAt": utc_now_iso(),
            }
            result = await users_api.create_user(self.transport, new_user)

            if not is_status(result, 201):
                logger.warning("registration_failed", reason="create_rejected", username=candidate.username)
                record_auth_attempt("register", AuthError.REGISTRATION_FAILED.value)
                return AuthResult.fail(AuthError.REGISTRATION_FAILED, "Registration failed")

            # Registration doubles as login
            session_user = self._set_session(result.json())
        except (ValueError, TypeError) as e:
            logger.error("registration_error", error=str(e), exc_info=True)
            record_auth_attempt("register", AuthError.UNEXPECTED.value)
            return AuthResult.fail(AuthError.UNEXPECTED, "An error occurred during registration")

        logger.info("user_registered", user_id=session_user.id, username=session_user.username)
        record_auth_attempt("register", "success")
        return AuthResult.ok("Registration successful")

    async def login(self, credentials: UserLogin) -> AuthResult:
        """
        Match email-or-username plus exact plaintext password against
        the full user collection.
        """
        try:
            users = response_data(await users_api.list_users(self.transport))
            if users is None:
                logger.warning("login_failed", reason="users_unavailable")
                record_auth_attempt("login", AuthError.LOGIN_FAILED.value)
                return AuthResult.fail(AuthError.LOGIN_FAILED, "Login failed")

            identifier = credentials.email_or_username
            found = next(
                (
                    u for u in users
                    if (u.get("email") == identifier or u.get("username") == identifier)
                    and u.get("password") == credentials.password
                ),
                None,
            )
            if found is None:
                logger.warning("login_failed", reason="invalid_credentials", identifier=identifier)
                record_auth_attempt("login", AuthError.INVALID_CREDENTIALS.value)
                return AuthResult.fail(AuthError.INVALID_CREDENTIALS, "Invalid credentials")

            session_user = self._set_session(found)
        except (ValueError, TypeError, AttributeError) as e:
            logger.error("login_error", error=str(e), exc_info=True)
            record_auth_attempt("login", AuthError.UNEXPECTED.value)
            return AuthResult.fail(AuthError.UNEXPECTED, "An error occurred during login")

        logger.info("user_logged_in", user_id=session_user.id)
        record_auth_attempt("login", "success")
        return AuthResult.ok("Login successful")

    def logout(self) -> None:
        user_id = self._user.id if self._user else None
        self._user = None
        self.store.remove(self.session_key)
        logger.info("user_logged_out", user_id=user_id)

    def close(self) -> None:
        """Shut down the session store. The signed-in user stays persisted."""
        self.store.close()

    async def update_profile(self, updates: dict[str, Any]) -> None:
        """
        Merge updates (wire field names) over the stored record and PUT it.
        Failures are logged only; the session keeps its previous value.
        """
        if self._user is None:
            logger.warning("profile_update_skipped", reason="not_authenticated")
            return

        user_id = self._user.id
        try:
            users = response_data(await users_api.list_users(self.transport))
            current = next((u for u in users or [] if u.get("id") == user_id), None)
            if current is None:
                logger.error("profile_update_failed", reason="user_not_found", user_id=user_id)
                return

            merged = {**current, **updates}
            result = await users_api.update_user(self.transport, user_id, merged)
            if not is_status(result, 200):
                logger.error("profile_update_failed", reason="update_rejected", user_id=user_id)
                return

            self._set_session(result.json())
        except (ValueError, TypeError, AttributeError) as e:
            logger.error("profile_update_error", user_id=user_id, error=str(e), exc_info=True)
            return

        logger.info("profile_updated", user_id=user_id, fields=sorted(updates))
