"""Supabase auth and expenses table interactions."""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from pennywise.config import Session, Settings

logger = logging.getLogger(__name__)

EXPENSES_TABLE = "expenses"
REQUEST_TIMEOUT = 30


@dataclass(frozen=True)
class User:
    """Authenticated user identity."""

    id: str
    email: str


class SupabaseError(Exception):
    """Raised when a backend call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _headers(settings: Settings, access_token: str | None = None) -> dict[str, str]:
    return {
        "apikey": settings.anon_key,
        "Authorization": f"Bearer {access_token or settings.anon_key}",
        "Accept": "application/json",
    }


def _error_message(response: requests.Response) -> str:
    """Extract the backend's error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        for key in ("msg", "error_description", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"


def _request(method: str, url: str, **kwargs: Any) -> requests.Response:
    """Send a request and turn any failure into SupabaseError.

    Raises:
        SupabaseError: On connection failure or an error status.
    """
    logger.debug("%s %s", method, url)
    try:
        response = requests.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as e:
        raise SupabaseError(f"Could not reach backend: {e}") from e

    if not response.ok:
        raise SupabaseError(_error_message(response), response.status_code)

    return response


def _session_from_payload(payload: dict[str, Any], email: str) -> Session:
    user = payload.get("user") or {}
    return Session(
        access_token=payload["access_token"],
        refresh_token=payload.get("refresh_token", ""),
        user_id=user["id"],
        email=user.get("email") or email,
    )


def sign_up(settings: Settings, email: str, password: str) -> Session | None:
    """Register a new user with email and password.

    Args:
        settings: Backend settings.
        email: User email.
        password: User password.

    Returns:
        Session if the project signs users in immediately, or None when the
        user must confirm their email first.

    Raises:
        SupabaseError: If sign-up fails.
    """
    response = _request(
        "POST",
        f"{settings.supabase_url}/auth/v1/signup",
        headers=_headers(settings),
        json={"email": email, "password": password},
    )
    payload = response.json()
    if payload.get("access_token"):
        return _session_from_payload(payload, email)
    return None


def sign_in(settings: Settings, email: str, password: str) -> Session:
    """Sign in with email and password.

    Args:
        settings: Backend settings.
        email: User email.
        password: User password.

    Returns:
        Session for the signed-in user.

    Raises:
        SupabaseError: If credentials are rejected or the request fails.
    """
    response = _request(
        "POST",
        f"{settings.supabase_url}/auth/v1/token",
        params={"grant_type": "password"},
        headers=_headers(settings),
        json={"email": email, "password": password},
    )
    return _session_from_payload(response.json(), email)


def sign_out(settings: Settings, access_token: str) -> None:
    """Revoke the session's tokens on the backend.

    Raises:
        SupabaseError: If the request fails.
    """
    _request(
        "POST",
        f"{settings.supabase_url}/auth/v1/logout",
        headers=_headers(settings, access_token),
    )


def get_user(settings: Settings, access_token: str) -> User:
    """Get the user that owns an access token.

    Raises:
        SupabaseError: If the token is invalid or expired.
    """
    response = _request(
        "GET",
        f"{settings.supabase_url}/auth/v1/user",
        headers=_headers(settings, access_token),
    )
    payload = response.json()
    return User(id=payload["id"], email=payload.get("email", ""))


def fetch_expenses(settings: Settings, session: Session) -> list[dict[str, Any]]:
    """Fetch all of the user's expense rows, newest first.

    Args:
        settings: Backend settings.
        session: Signed-in session.

    Returns:
        List of expense row dictionaries sorted by date descending.

    Raises:
        SupabaseError: If the request fails.
    """
    response = _request(
        "GET",
        f"{settings.supabase_url}/rest/v1/{EXPENSES_TABLE}",
        headers=_headers(settings, session.access_token),
        params={
            "select": "*",
            "user_id": f"eq.{session.user_id}",
            "order": "date.desc",
        },
    )
    rows: list[dict[str, Any]] = response.json()
    logger.debug("Fetched %d expenses", len(rows))
    return rows


def insert_expense(settings: Settings, session: Session, row: dict[str, Any]) -> None:
    """Insert one expense row.

    Args:
        settings: Backend settings.
        session: Signed-in session.
        row: Row dictionary without an id.

    Raises:
        SupabaseError: If the insert is rejected or the request fails.
    """
    headers = _headers(settings, session.access_token)
    headers["Prefer"] = "return=minimal"
    _request(
        "POST",
        f"{settings.supabase_url}/rest/v1/{EXPENSES_TABLE}",
        headers=headers,
        json=[row],
    )
