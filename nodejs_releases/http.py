"""HTTP client abstraction for fetching the release index.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from nodejs_releases.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from nodejs_releases.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network and decode errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    The release cache only ever needs one thing: GET a URL and decode the
    body as JSON. Tests inject MockHttpClient to avoid the network.
    """

    def get_json(self, url: str) -> Result[object, HttpError]:
        """Fetch URL and parse the body as JSON.

        Args:
            url: URL to fetch

        Returns:
            Ok with the decoded JSON value (any JSON type), or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - JSON decoding
    - Timeout handling
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def _request(self, url: str) -> Result[bytes, HttpError]:
        """Make HTTP GET request."""
        try:
            req = urllib.request.Request(
                url,
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

    def get_json(self, url: str) -> Result[object, HttpError]:
        """Fetch URL and parse as JSON."""
        result = self._request(url)
        if isinstance(result, Err):
            return result

        try:
            data: object = json.loads(result.value.decode("utf-8"))
            return Ok(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json(RELEASE_INDEX_URL, [{"version": "v4.9.1", ...}])
        cache = ReleaseCache(client)
        cache.preload()
        assert client.calls == [("get_json", RELEASE_INDEX_URL)]
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, object | HttpError] = {}
        self.calls: list[tuple[str, str]] = []

    def set_json(self, url: str, response: object | HttpError) -> None:
        """Set the decoded JSON value (or an error) returned for URL."""
        self._json_responses[url] = response

    def get_json(self, url: str) -> Result[object, HttpError]:
        """Get mocked JSON response."""
        self.calls.append(("get_json", url))

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
