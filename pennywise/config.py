"""Configuration and session file management for pennywise."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from pennywise.domain.pagination import DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class Settings:
    """Resolved backend and display settings."""

    supabase_url: str
    anon_key: str
    page_size: int = DEFAULT_PAGE_SIZE
    currency: str = "₹"


@dataclass(frozen=True)
class Session:
    """Signed-in user session persisted between commands."""

    access_token: str
    refresh_token: str
    user_id: str
    email: str


class ConfigError(Exception):
    """Raised when configuration is missing or incomplete."""


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pennywise" / "config.toml"


def get_session_path() -> Path:
    """Get the session file path (XDG compliant)."""
    return get_xdg_config_home() / "pennywise" / "session.toml"


def _write_private_toml(data: dict[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "wb") as f:
        tomli_w.dump(data, f)

    os.chmod(path, 0o600)


def create_default_config(
    supabase_url: str = "",
    anon_key: str = "",
    config_path: Path | None = None,
) -> None:
    """Create default config file with secure permissions.

    Args:
        supabase_url: Project URL (e.g. https://xyz.supabase.co).
        anon_key: Project anon (public) API key.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    default_config: dict[str, Any] = {
        "supabase": {
            "url": supabase_url,
            "anon_key": anon_key,
        },
        "display": {
            "page_size": DEFAULT_PAGE_SIZE,
            "currency": "₹",
        },
    }

    _write_private_toml(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def load_settings(config_path: Path | None = None) -> Settings:
    """Resolve settings from the config file and environment.

    SUPABASE_URL and SUPABASE_ANON_KEY override the config file. The config
    file may be absent when both variables are set.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings for the backend client and display.

    Raises:
        ConfigError: If the backend URL or key cannot be resolved.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    supabase = config.get("supabase", {})
    display = config.get("display", {})

    url = os.environ.get("SUPABASE_URL") or supabase.get("url", "")
    anon_key = os.environ.get("SUPABASE_ANON_KEY") or supabase.get("anon_key", "")

    if not url or not anon_key:
        raise ConfigError("Backend not configured. Run 'pennywise init' or set SUPABASE_URL and SUPABASE_ANON_KEY.")

    page_size = int(display.get("page_size", DEFAULT_PAGE_SIZE))
    if page_size <= 0:
        raise ConfigError(f"display.page_size must be positive, got {page_size}")

    return Settings(
        supabase_url=url.rstrip("/"),
        anon_key=anon_key,
        page_size=page_size,
        currency=display.get("currency", "₹"),
    )


def save_session(session: Session, session_path: Path | None = None) -> None:
    """Persist the signed-in session with secure permissions.

    Args:
        session: Session to save.
        session_path: Path to session file. If None, uses default location.
    """
    if session_path is None:
        session_path = get_session_path()

    data = {
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "user_id": session.user_id,
        "email": session.email,
    }
    _write_private_toml(data, session_path)


def current_user(session_path: Path | None = None) -> Session | None:
    """Load the signed-in session.

    Args:
        session_path: Path to session file. If None, uses default location.

    Returns:
        Session, or None if nobody is signed in.
    """
    if session_path is None:
        session_path = get_session_path()

    try:
        with open(session_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None

    try:
        return Session(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token", ""),
            user_id=data["user_id"],
            email=data.get("email", ""),
        )
    except KeyError:
        return None


def clear_session(session_path: Path | None = None) -> None:
    """Remove the persisted session if present."""
    if session_path is None:
        session_path = get_session_path()

    session_path.unlink(missing_ok=True)
