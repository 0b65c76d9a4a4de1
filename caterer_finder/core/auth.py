"""OAuth authorization for the Google Sheets API.

Credentials come from a persisted token file when available; otherwise the user
is walked through the installed-application flow on the console and the
resulting token is written back for the next run.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Callable, Optional, Protocol

from google.auth.exceptions import GoogleAuthError, RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from caterer_finder.core.config import Settings

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/spreadsheets",
]
CODE_PROMPT = "Enter the code from that page here: "


class AuthorizationError(RuntimeError):
    """Raised when no usable Google credentials can be obtained."""


class TokenStore(Protocol):
    def load(self) -> Optional[Credentials]:
        ...

    def save(self, credentials: Credentials) -> None:
        ...


class CodeExchanger(Protocol):
    def exchange(self) -> Credentials:
        ...


class FileTokenStore:
    """Authorized-user token persisted as JSON on disk."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> Optional[Credentials]:
        if not os.path.exists(self.path):
            return None
        try:
            return Credentials.from_authorized_user_file(self.path, SCOPES)
        except (ValueError, OSError) as exc:
            logger.warning("Error loading token from %s: %s", self.path, exc)
            return None

    def save(self, credentials: Credentials) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(credentials.to_json())
        logger.info("Token stored to %s", self.path)


class ConsoleCodeExchanger:
    """Print the consent URL, read the code from stdin and trade it for a token."""

    def __init__(self, credentials_path: str, prompt: Callable[[str], str] = input) -> None:
        self.credentials_path = credentials_path
        self.prompt = prompt

    def _build_flow(self) -> InstalledAppFlow:
        try:
            with open(self.credentials_path, "r", encoding="utf-8") as fh:
                client_config = json.load(fh)
            redirect_uri = client_config["installed"]["redirect_uris"][0]
        except (OSError, ValueError, KeyError, IndexError) as exc:
            raise AuthorizationError(f"Invalid OAuth client file {self.credentials_path}: {exc}") from exc
        return InstalledAppFlow.from_client_config(client_config, scopes=SCOPES, redirect_uri=redirect_uri)

    def exchange(self) -> Credentials:
        flow = self._build_flow()
        auth_url, _ = flow.authorization_url(access_type="offline")
        logger.info("Authorize this app by visiting this URL: %s", auth_url)
        code = self.prompt(CODE_PROMPT).strip()
        if not code:
            raise AuthorizationError("No authorization code entered")
        try:
            flow.fetch_token(code=code)
        except OAuth2Error as exc:
            raise AuthorizationError(f"Error retrieving access token: {exc}") from exc
        return flow.credentials


def authorize(
    settings: Settings,
    store: Optional[TokenStore] = None,
    exchanger: Optional[CodeExchanger] = None,
) -> Credentials:
    store = store or FileTokenStore(settings.token_path)
    exchanger = exchanger or ConsoleCodeExchanger(settings.credentials_path)

    try:
        credentials = store.load()
        if credentials is not None and credentials.valid:
            return credentials
        if credentials is not None and credentials.expired and credentials.refresh_token:
            logger.info("Refreshing expired Google token")
            try:
                credentials.refresh(Request())
            except RefreshError as exc:
                logger.warning("Stored token could not be refreshed (%s); re-authorizing", exc)
                credentials = None
        else:
            credentials = None
        if credentials is None:
            credentials = exchanger.exchange()
        store.save(credentials)
    except AuthorizationError:
        raise
    except (GoogleAuthError, OSError, ValueError) as exc:
        raise AuthorizationError(f"Google authorization failed: {exc}") from exc
    return credentials
