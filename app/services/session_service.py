"""Client-side session handling: login, register and logout."""

import logging

from app.services.api_client import APIError
from app.services.session_store import TOKEN_KEY, USER_ID_KEY, USERNAME_KEY, SESSION_KEYS

log = logging.getLogger(__name__)

LOGIN_FAILED = "Login Failed"
REGISTER_FAILED = "Register Failed"

class AuthResult:
    """Outcome of a login or register call."""

    def __init__(self, success, data=None, message=None):
        self.success = success
        self.data = data
        self.message = message

    def to_dict(self):
        result = {"success": self.success}
        if self.data is not None:
            result["data"] = self.data
        if self.message is not None:
            result["message"] = self.message
        return result

    def __eq__(self, other):
        if isinstance(other, AuthResult):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self):
        return f"<AuthResult {self.to_dict()}>"

class SessionManager:
    """Keeps the authentication session of the current client.

    The session lives in the ``store`` handed in by the caller: it is created
    by a successful ``login`` and torn down by ``logout``. Nothing here
    validates the token or its expiry; that is left to the server.
    """

    def __init__(self, api_client, store):
        self.api_client = api_client
        self.store = store

    def login(self, email, password):
        """Log in and persist the session on success."""
        try:
            data = self.api_client.post("/auth/login", json={"email": email, "password": password})
        except APIError as e:
            log.info(f"Login failed: {e.message}")
            return AuthResult(False, message=e.server_message or LOGIN_FAILED)

        if not isinstance(data, dict) or not data.get("token"):
            log.warning("Login response did not contain a token")
            return AuthResult(False, message=LOGIN_FAILED)

        self.store.set(TOKEN_KEY, data["token"])
        # Don't keep identifiers left over from an earlier session
        if data.get("userId") is not None:
            self.store.set(USER_ID_KEY, data["userId"])
        else:
            self.store.remove(USER_ID_KEY)
        if data.get("username"):
            self.store.set(USERNAME_KEY, data["username"])
        else:
            self.store.remove(USERNAME_KEY)

        return AuthResult(True, data=data)

    def register(self, username, email, password):
        """Register a new account. Never logs the new account in."""
        try:
            data = self.api_client.post(
                "/auth/register",
                json={"username": username, "email": email, "password": password}
            )
        except APIError as e:
            log.info(f"Registration failed: {e.message}")
            return AuthResult(False, message=e.server_message or REGISTER_FAILED)

        return AuthResult(True, data=data)

    def logout(self):
        for key in SESSION_KEYS:
            self.store.remove(key)

    def is_authenticated(self):
        return bool(self.store.get(TOKEN_KEY))

    def get_token(self):
        return self.store.get(TOKEN_KEY)

    def get_user_id(self):
        return self.store.get(USER_ID_KEY)

    def get_username(self):
        return self.store.get(USERNAME_KEY)

    def auth_headers(self):
        """Authorization header for further API calls, empty without a session."""
        token = self.get_token()
        return {"Authorization": f"Bearer {token}"} if token else {}
