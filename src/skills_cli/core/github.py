"""Minimal GitHub client for reading repository contents."""

from __future__ import annotations

import logging
import os
import ssl
from typing import Any

import httpx
import truststore

from skills_cli.core.config import USER_AGENT, SkillsConfig

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class GitHubError(RuntimeError):
    """Raised when GitHub answers with an unexpected status or payload."""


def github_token(cli_token: str | None = None) -> str | None:
    """Return sanitized GitHub token (cli arg takes precedence) or None."""
    return ((cli_token or os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()) or None


def github_auth_headers(cli_token: str | None = None) -> dict:
    """Return Authorization header dict only when a non-empty token exists."""
    token = github_token(cli_token)
    return {"Authorization": f"Bearer {token}"} if token else {}


def default_http_client() -> httpx.Client:
    ssl_context = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    return httpx.Client(verify=ssl_context)


class GitHubClient:
    """Fetch JSON from the contents API and raw files for one repository."""

    def __init__(
        self,
        config: SkillsConfig,
        *,
        token: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config
        self.client = client if client is not None else default_http_client()
        self._headers = {"User-Agent": USER_AGENT, **github_auth_headers(token)}

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get(self, url: str, headers: dict, params: dict | None = None) -> httpx.Response:
        logger.debug("GET %s", url)
        response = self.client.get(
            url,
            params=params,
            timeout=REQUEST_TIMEOUT,
            follow_redirects=True,
            headers={**self._headers, **headers},
        )
        if not response.is_success:
            raise GitHubError(f"GitHub returned {response.status_code} {response.reason_phrase} for {url}")
        return response

    def get_json(self, path: str) -> Any:
        url = f"{self.config.api_base}/{path}"
        response = self._get(url, {"Accept": "application/vnd.github.v3+json"}, params={"ref": self.config.branch})
        try:
            return response.json()
        except ValueError as exc:
            raise GitHubError(f"Failed to parse JSON from {url}: {exc}") from exc

    def get_raw(self, path: str) -> str:
        return self._get(self.raw_url(path), {}).text

    def raw_url(self, path: str) -> str:
        return f"{self.config.raw_base}/{path}"


__all__ = ["GitHubClient", "GitHubError", "default_http_client", "github_auth_headers", "github_token"]
