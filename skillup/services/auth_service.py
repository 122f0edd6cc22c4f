"""
auth_service.py - Hosted authentication boundary
Single responsibility: validate credentials locally, then make exactly one
call to the hosted auth REST API and turn its answer into a Session or an
AuthError carrying a user-facing message.
"""
import logging

import requests

from skillup.config import (
    AUTH_API_KEY,
    AUTH_BASE_URL,
    AUTH_TIMEOUT_SECONDS,
    MIN_PASSWORD_LENGTH,
)
from skillup.domain.models import Session

logger = logging.getLogger(__name__)

MSG_FILL_ALL_FIELDS = "Please fill all fields"
MSG_PASSWORD_TOO_SHORT = f"Password should be at least {MIN_PASSWORD_LENGTH} characters"
MSG_PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
MSG_EMAIL_REQUIRED = "Enter your email first"
MSG_NETWORK_ERROR = (
    "A network error (such as timeout, interrupted connection or unreachable host) has occurred."
)
MSG_NOT_CONFIGURED = "Authentication service is not configured"

# Provider error codes -> readable text. Unknown codes are shown as-is.
ERROR_MESSAGES: dict[str, str] = {
    "EMAIL_EXISTS": "The email address is already in use by another account.",
    "INVALID_EMAIL": "The email address is badly formatted.",
    "EMAIL_NOT_FOUND": "There is no user record corresponding to this identifier. The user may have been deleted.",
    "INVALID_PASSWORD": "The password is invalid or the user does not have a password.",
    "INVALID_LOGIN_CREDENTIALS": "The supplied auth credential is incorrect, malformed or has expired.",
    "USER_DISABLED": "The user account has been disabled by an administrator.",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "We have blocked all requests from this device due to unusual activity. Try again later.",
    "OPERATION_NOT_ALLOWED": "This operation is not allowed. Enable this sign-in method in the console.",
    "WEAK_PASSWORD": "The given password is invalid.",
}


class AuthError(Exception):
    """Auth failure with a message meant to be shown to the user verbatim."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthValidationError(AuthError):
    """Rejected locally; no remote call was made."""


# ---------------------------------------------------------------------------
# Local validation
# ---------------------------------------------------------------------------


def validate_sign_in(email: str, password: str) -> None:
    if not email or not password:
        raise AuthValidationError(MSG_FILL_ALL_FIELDS)


def validate_sign_up(email: str, password: str, confirm: str) -> None:
    if password != confirm:
        raise AuthValidationError(MSG_PASSWORDS_DO_NOT_MATCH)
    if not email or not password:
        raise AuthValidationError(MSG_FILL_ALL_FIELDS)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise AuthValidationError(MSG_PASSWORD_TOO_SHORT)


def validate_password_reset(email: str) -> None:
    if not email:
        raise AuthValidationError(MSG_EMAIL_REQUIRED)


def describe_error(payload, fallback: str = "Authentication failed") -> str:
    """
    Turn a provider error body into a message.
    Provider messages look like "CODE" or "CODE : detail".
    """
    if not isinstance(payload, dict):
        return fallback
    error = payload.get("error") or {}
    raw = error.get("message") if isinstance(error, dict) else None
    if not raw:
        return fallback
    code, _, detail = raw.partition(" : ")
    code = code.strip()
    detail = detail.strip()
    known = ERROR_MESSAGES.get(code)
    if known and detail:
        return f"{known} [ {detail} ]"
    return known or raw


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------


class AuthGateway:
    """One POST per operation; no retry and no token storage."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        http: requests.Session | None = None,
    ):
        self.api_key = AUTH_API_KEY if api_key is None else api_key
        self.base_url = (base_url or AUTH_BASE_URL).rstrip("/")
        self.timeout = AUTH_TIMEOUT_SECONDS if timeout is None else timeout
        self._owns_http = http is None
        self.http = http or requests.Session()
        self.session: Session | None = None

    def sign_in(self, email: str, password: str) -> Session:
        email = (email or "").strip()
        validate_sign_in(email, password)
        logger.info(f"Sign-in requested for {email}")
        data = self._post(
            "accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        self.session = self._session_from(data, email)
        return self.session

    def sign_up(self, email: str, password: str, confirm: str) -> Session:
        email = (email or "").strip()
        validate_sign_up(email, password, confirm)
        logger.info(f"Sign-up requested for {email}")
        data = self._post(
            "accounts:signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return self._session_from(data, email)

    def request_password_reset(self, email: str) -> None:
        email = (email or "").strip()
        validate_password_reset(email)
        logger.info(f"Password reset requested for {email}")
        self._post("accounts:sendOobCode", {"requestType": "PASSWORD_RESET", "email": email})

    def sign_out(self) -> None:
        if self.session:
            logger.info(f"Signed out {self.session.email}")
        self.session = None

    def close(self) -> None:
        """Release pooled connections of a session this gateway created."""
        if self._owns_http:
            self.http.close()

    # -- internals ---------------------------------------------------------

    def _post(self, endpoint: str, payload: dict) -> dict:
        if not self.api_key:
            raise AuthError(MSG_NOT_CONFIGURED)
        url = f"{self.base_url}/{endpoint}"
        try:
            resp = self.http.post(
                url,
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning(f"Auth request to {endpoint} failed: {exc}")
            raise AuthError(MSG_NETWORK_ERROR) from exc

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if resp.status_code >= 400 or "error" in data:
            message = describe_error(data, fallback=f"Authentication failed (HTTP {resp.status_code})")
            logger.warning(f"Auth request to {endpoint} rejected: {message}")
            raise AuthError(message)
        return data

    @staticmethod
    def _session_from(data: dict, email: str) -> Session:
        return Session(
            uid=data.get("localId", ""),
            email=data.get("email") or email,
            display_name=data.get("displayName") or "",
            id_token=data.get("idToken", ""),
        )
