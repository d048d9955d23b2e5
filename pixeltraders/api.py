"""HTTP client for the Space Traders API, with token file handling."""

import json
import logging
import os
import time
import urllib.error
import urllib.request
from http import HTTPStatus
from pathlib import Path
from urllib.parse import quote

from pixeltraders.assets import SPACE_TRADER_API

TOKEN_AGENT_PATH = "../.token-agent"
TOKEN_ACCOUNT_PATH = "../.token-account"

REQUEST_DELAY = 0.1
REQUEST_TIMEOUT = 30.0

DEFAULT_SYMBOL = "Roger2"
DEFAULT_FACTION = "COBALT"


class TokenFileError(OSError):
    """A token file could not be read."""


def _registered_token(payload):
    if not isinstance(payload, dict):
        return ""
    data = next((value for key, value in payload.items() if key.lower() == "data"), None)
    if not isinstance(data, dict):
        return ""
    token = next((value for key, value in data.items() if key.lower() == "token"), "")
    return token if isinstance(token, str) else ""


class SpaceTradersClient:
    """Sends authenticated requests to the Space Traders API."""

    def __init__(
        self,
        base_url=SPACE_TRADER_API,
        agent_token_path=TOKEN_AGENT_PATH,
        account_token_path=TOKEN_ACCOUNT_PATH,
        logger=None,
    ):
        self.base_url = base_url
        self.agent_token_path = Path(agent_token_path)
        self.account_token_path = Path(account_token_path)
        self.logger = logger or logging.getLogger("pixeltraders.API")

    def endpoint(self, parts):
        """Join path parts onto the base URL, skipping empty ones."""
        segments = [quote(part, safe="") for part in parts if part]
        return "/".join([self.base_url.rstrip("/"), *segments])

    def _read_token(self, path):
        try:
            return Path(os.path.normpath(path)).read_text(encoding="utf-8").strip()
        except OSError as exc:
            self.logger.error("Read Token file error", exc_info=exc)
            raise TokenFileError(f"cannot read token file {path}") from exc

    def read_agent_token(self):
        return self._read_token(self.agent_token_path)

    def read_account_token(self):
        return self._read_token(self.account_token_path)

    def get(self, parts):
        """GET an endpoint with the agent token and return the raw body."""
        return self._request("GET", parts, None, self.read_agent_token(), True)

    def post(self, parts, body=None):
        """POST to an endpoint with the agent token and return the raw body."""
        return self._request("POST", parts, body, self.read_agent_token(), True)

    def post_register(self, parts, body):
        """POST to an endpoint with the account token and return the raw body."""
        return self._request("POST", parts, body, self.read_account_token(), False)

    def _request(self, method, parts, body, token, reauthenticate):
        request = urllib.request.Request(self.endpoint(parts), data=body, method=method)
        request.add_header("Authorization", f"Bearer {token}")
        request.add_header("Content-Type", "application/json")
        return self._send(request, reauthenticate)

    def _send(self, request, reauthenticate):
        time.sleep(REQUEST_DELAY)
        try:
            response = urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT)
        except urllib.error.HTTPError as exc:
            response = exc
        except urllib.error.URLError as exc:
            self.logger.error("failed request", exc_info=exc)
            raise

        with response:
            status = response.getcode()
            if status == HTTPStatus.UNAUTHORIZED and reauthenticate:
                self.logger.error("Error authentication", extra={"fields": {"Code": status}})
                self.register_agent()
            data = response.read()

        self.logger.debug(
            "",
            extra={
                "fields": {
                    "URL": request.full_url,
                    "Method": request.get_method(),
                    "Code": status,
                    "Data": data.decode("utf-8", "replace"),
                }
            },
        )
        return data

    def register_agent(self, symbol=DEFAULT_SYMBOL, faction=DEFAULT_FACTION):
        """Register a new agent and store its token; return the token."""
        body = json.dumps({"symbol": symbol, "faction": faction}).encode("utf-8")
        data = self.post_register(["register"], body)
        try:
            token = _registered_token(json.loads(data))
        except ValueError as exc:
            self.logger.error("Parse body error", exc_info=exc)
            token = ""
        self.replace_agent_token(token)
        return token

    def replace_agent_token(self, token):
        """Overwrite the agent token file, readable by the owner only."""
        try:
            self.agent_token_path.unlink()
        except OSError as exc:
            self.logger.error("Failed remove token agent", exc_info=exc)
        try:
            descriptor = os.open(
                self.agent_token_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600
            )
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                handle.write(token)
        except OSError as exc:
            self.logger.error("Failed write token agent", exc_info=exc)