from typing import Any

import httpx

from .errors import ParseFailure, RemoteStatusFailure, TransportFailure

_user_agent = "playwith/1.0 (Shared Steam library finder)"
_default_timeout = 30.0


def fetch(url: str, params: dict[str, str] | None = None, timeout: float = _default_timeout) -> httpx.Response:
    """
    Perform a single blocking GET request.

    There is no retry: every failure is reported to the caller.

    Args:
        url: The URL to fetch
        params: Optional query parameters
        timeout: Seconds to wait before giving up

    Returns:
        The response, guaranteed to have status 200

    Raises:
        TransportFailure: If the request could not complete
        RemoteStatusFailure: If the server answered with a non-200 status
    """
    headers = {"User-Agent": _user_agent}

    try:
        response = httpx.get(url, params=params, headers=headers, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        raise TransportFailure(f"could not contact {_redact(url)}") from e

    if response.status_code != 200:
        raise RemoteStatusFailure(
            f"{_redact(url)} returned status {response.status_code}",
            status_code=response.status_code,
            url=url,
        )

    return response


def fetch_text(url: str, params: dict[str, str] | None = None, timeout: float = _default_timeout) -> str:
    """Fetch a URL and return the decoded body."""
    return fetch(url, params=params, timeout=timeout).text


def fetch_bytes(url: str, params: dict[str, str] | None = None, timeout: float = _default_timeout) -> bytes:
    """Fetch a URL and return the raw body."""
    return fetch(url, params=params, timeout=timeout).content


def fetch_json(url: str, params: dict[str, str] | None = None, timeout: float = _default_timeout) -> Any:
    """
    Fetch a URL and decode its JSON body.

    Raises:
        ParseFailure: If the body is not valid JSON
    """
    response = fetch(url, params=params, timeout=timeout)
    try:
        return response.json()
    except ValueError as e:
        raise ParseFailure(f"could not parse JSON from {_redact(url)}") from e


def _redact(url: str) -> str:
    """Strip the query string so API keys never reach logs or error messages."""
    return url.split("?", 1)[0]
