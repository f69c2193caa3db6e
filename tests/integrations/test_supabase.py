"""Tests for pennywise.integrations.supabase with requests stubbed out."""

from typing import Any

import pytest
import requests

from pennywise.config import Session, Settings
from pennywise.integrations import supabase
from pennywise.integrations.supabase import (
    SupabaseError,
    fetch_expenses,
    get_user,
    insert_expense,
    sign_in,
    sign_out,
    sign_up,
)

SETTINGS = Settings(supabase_url="https://demo.supabase.co", anon_key="anon-key")
SESSION = Session(access_token="token", refresh_token="refresh", user_id="user-1", email="asha@example.com")


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self.payload is None:
            raise ValueError("No JSON")
        return self.payload


class RecordingRequest:
    """Records calls to requests.request and replies with a fixed response."""

    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []

    def __call__(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.response


@pytest.fixture
def stub(monkeypatch: pytest.MonkeyPatch):
    def install(response: FakeResponse) -> RecordingRequest:
        recorder = RecordingRequest(response)
        monkeypatch.setattr(supabase.requests, "request", recorder)
        return recorder

    return install


class TestAuth:
    """Tests for sign_up, sign_in, sign_out and get_user."""

    def test_sign_in(self, stub) -> None:
        """Should post the password grant and return a session."""
        recorder = stub(
            FakeResponse(
                payload={
                    "access_token": "token",
                    "refresh_token": "refresh",
                    "user": {"id": "user-1", "email": "asha@example.com"},
                }
            )
        )

        session = sign_in(SETTINGS, "asha@example.com", "secret")

        assert session == SESSION
        call = recorder.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == "https://demo.supabase.co/auth/v1/token"
        assert call["params"] == {"grant_type": "password"}
        assert call["json"] == {"email": "asha@example.com", "password": "secret"}
        assert call["headers"]["apikey"] == "anon-key"

    def test_sign_in_rejected(self, stub) -> None:
        """Should raise SupabaseError carrying the backend message."""
        stub(FakeResponse(status_code=400, payload={"error_description": "Invalid login credentials"}))

        with pytest.raises(SupabaseError) as exc_info:
            sign_in(SETTINGS, "asha@example.com", "wrong")

        assert exc_info.value.message == "Invalid login credentials"
        assert exc_info.value.status_code == 400

    def test_sign_up_pending_confirmation(self, stub) -> None:
        """Should return None when email confirmation is required."""
        stub(FakeResponse(payload={"id": "user-1", "email": "asha@example.com"}))

        assert sign_up(SETTINGS, "asha@example.com", "secret") is None

    def test_sign_up_signed_in(self, stub) -> None:
        """Should return a session when the backend signs the user in."""
        stub(
            FakeResponse(
                payload={
                    "access_token": "token",
                    "refresh_token": "refresh",
                    "user": {"id": "user-1", "email": "asha@example.com"},
                }
            )
        )

        assert sign_up(SETTINGS, "asha@example.com", "secret") == SESSION

    def test_sign_out_uses_access_token(self, stub) -> None:
        """Should send the user's token, not the anon key."""
        recorder = stub(FakeResponse(status_code=204))

        sign_out(SETTINGS, "token")

        call = recorder.calls[0]
        assert call["url"] == "https://demo.supabase.co/auth/v1/logout"
        assert call["headers"]["Authorization"] == "Bearer token"

    def test_get_user(self, stub) -> None:
        """Should return the token's user."""
        stub(FakeResponse(payload={"id": "user-1", "email": "asha@example.com"}))

        user = get_user(SETTINGS, "token")

        assert user.id == "user-1"
        assert user.email == "asha@example.com"


class TestExpenses:
    """Tests for fetch_expenses and insert_expense."""

    def test_fetch_filters_by_user_newest_first(self, stub) -> None:
        """Should query the user's rows ordered by date descending."""
        rows = [{"id": 1, "description": "Uber ride"}]
        recorder = stub(FakeResponse(payload=rows))

        assert fetch_expenses(SETTINGS, SESSION) == rows

        call = recorder.calls[0]
        assert call["method"] == "GET"
        assert call["url"] == "https://demo.supabase.co/rest/v1/expenses"
        assert call["params"]["user_id"] == "eq.user-1"
        assert call["params"]["order"] == "date.desc"

    def test_insert_posts_single_row(self, stub) -> None:
        """Should post the row as a one-element array."""
        recorder = stub(FakeResponse(status_code=201))
        row = {"description": "Swiggy order", "amount": 250.0}

        insert_expense(SETTINGS, SESSION, row)

        call = recorder.calls[0]
        assert call["method"] == "POST"
        assert call["json"] == [row]
        assert call["headers"]["Prefer"] == "return=minimal"

    def test_insert_rejected(self, stub) -> None:
        """Should raise SupabaseError with the backend's message."""
        stub(FakeResponse(status_code=403, payload={"message": "new row violates row-level security policy"}))

        with pytest.raises(SupabaseError, match="row-level security"):
            insert_expense(SETTINGS, SESSION, {})

    def test_error_without_json_body(self, stub) -> None:
        """Should fall back to the response text."""
        stub(FakeResponse(status_code=502, text="Bad Gateway"))

        with pytest.raises(SupabaseError, match="Bad Gateway"):
            fetch_expenses(SETTINGS, SESSION)

    def test_connection_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should wrap network failures in SupabaseError."""

        def fail(*args: Any, **kwargs: Any) -> None:
            raise requests.ConnectionError("connection refused")

        monkeypatch.setattr(supabase.requests, "request", fail)

        with pytest.raises(SupabaseError, match="Could not reach backend"):
            fetch_expenses(SETTINGS, SESSION)
