"""
Truth Engine profile fetcher.

• One GET of ``{api_base}/api/u/{handle}/json`` per call; no retries, no
  timeout policy, no local cache.
• ``load_profile`` raises ``ConfigurationMissing`` / ``FetchFailed``;
  ``fetch_profile`` logs those and returns None so callers can fall back to
  the error panel.
"""

from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, cast

import requests
from requests import RequestException, Response, Session

import config
from schema_profile import Profile

logger = logging.getLogger(__name__)

USER_AGENT = "truth-engine-viewer/0.1"


class ProfileUnavailable(RuntimeError):
    """No profile can be shown."""


class ConfigurationMissing(ProfileUnavailable):
    """The profile handle is not configured."""


class FetchFailed(ProfileUnavailable):
    """Network error, non-2xx status or an unparseable body."""

    def __init__(self, message: str, *, url: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


def profile_url(api_base: str, handle: str) -> str:
    return f"{api_base}/api/u/{handle}/json"


class ProfileClient:
    """Thin ``requests.Session`` wrapper that retrieves one profile document.

    Default headers are set once on the session; each call performs a
    single GET and either returns the decoded JSON object or raises
    ``FetchFailed``.
    """

    def __init__(
        self,
        *,
        user_agent: str = USER_AGENT,
        default_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._session: Session = requests.Session()
        base: dict[str, str] = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        if default_headers:
            base.update(default_headers)
        self._session.headers.update(base)

    def get_profile(self, url: str) -> Profile:
        try:
            resp: Response = self._session.request(method="GET", url=url)
        except RequestException as e:
            raise FetchFailed(f"request to {url} failed: {e}", url=url) from e

        if not 200 <= resp.status_code < 300:
            raise FetchFailed(
                f"Failed to fetch profile from {url}: {resp.status_code} {resp.reason}",
                url=url,
                status=resp.status_code,
            )

        try:
            data: Any = resp.json()
        except ValueError as e:
            raise FetchFailed(
                f"invalid JSON body from {url}: {e}", url=url, status=resp.status_code
            ) from e

        if not isinstance(data, dict):
            raise FetchFailed(
                f"expected a JSON object from {url}, got {type(data).__name__}",
                url=url,
                status=resp.status_code,
            )
        return cast(Profile, data)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ProfileClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_profile(
    handle: Optional[str] = None,
    api_base: Optional[str] = None,
    *,
    client: Optional[ProfileClient] = None,
) -> Profile:
    """Fetch the profile for ``handle`` or raise ``ProfileUnavailable``.

    ``None`` arguments fall back to configuration. An empty handle counts as
    unset and no request is made.
    """
    handle = config.get_handle() if handle is None else handle
    api_base = config.get_api_base() if api_base is None else api_base
    if not handle:
        raise ConfigurationMissing(
            f"Error: {config.HANDLE_ENV_VAR} environment variable is not set."
        )

    url = profile_url(api_base, handle)
    if client is not None:
        return client.get_profile(url)
    with ProfileClient() as own:
        return own.get_profile(url)


def fetch_profile(
    handle: Optional[str] = None,
    api_base: Optional[str] = None,
    *,
    client: Optional[ProfileClient] = None,
) -> Optional[Profile]:
    """Return the profile, or None after logging why it is unavailable."""
    try:
        profile = load_profile(handle, api_base, client=client)
    except ConfigurationMissing as e:
        logger.error("%s", e)
        return None
    except FetchFailed as e:
        logger.error("Error fetching profile: %s", e)
        return None
    logger.info("Loaded profile %r", profile.get("handle"))
    return profile
