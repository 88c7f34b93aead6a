"""Identity provider used to gate and authenticate profile submissions."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Protocol

from errors import TokenAcquisitionFailed
from storage.session_store import LOGGED_IN_KEY, SessionStore, is_flag_set

logger = logging.getLogger(__name__)

API_TOKEN_ENV = "HACKHUB_API_TOKEN"


class IdentityProvider(Protocol):
    def is_authenticated(self) -> bool: ...

    def get_token(self) -> str: ...


def _get_api_token() -> str | None:
    """Get the API bearer token from environment or Streamlit secrets."""
    # Prioritize environment variable (useful for local dev/overrides)
    env_value = os.getenv(API_TOKEN_ENV)
    if env_value:
        return env_value

    try:
        import streamlit as st
    except ImportError:
        return None

    for key_name in (API_TOKEN_ENV, API_TOKEN_ENV.lower()):
        try:
            value = st.secrets.get(key_name)
        except Exception:
            value = None
        if value:
            return str(value)

    return None


class StoreIdentityProvider:
    """Treats the durable "isLoggedIn" flag as the signed-in state.

    The token comes from `token_source` (environment / Streamlit secrets by
    default). A missing token or a failing source raises TokenAcquisitionFailed.
    """

    def __init__(
        self,
        store: SessionStore,
        token_source: Optional[Callable[[], Optional[str]]] = None,
    ):
        self.store = store
        self.token_source = token_source or _get_api_token

    def is_authenticated(self) -> bool:
        return is_flag_set(self.store, LOGGED_IN_KEY)

    def get_token(self) -> str:
        try:
            token = self.token_source()
        except Exception as exc:
            logger.warning("Token source failed: %s", exc)
            raise TokenAcquisitionFailed(f"Could not obtain API token: {exc}") from exc
        if not token:
            raise TokenAcquisitionFailed(
                f"Missing {API_TOKEN_ENV}. Add it to .streamlit/secrets.toml or env var."
            )
        return str(token)


class StaticIdentityProvider:
    """Fixed identity; handy for scripts and tests."""

    def __init__(self, authenticated: bool = True, token: Optional[str] = "test-token"):
        self.authenticated = authenticated
        self.token = token

    def is_authenticated(self) -> bool:
        return self.authenticated

    def get_token(self) -> str:
        if not self.token:
            raise TokenAcquisitionFailed("No token configured")
        return self.token
