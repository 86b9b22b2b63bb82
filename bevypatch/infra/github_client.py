"""
GitHub API client infrastructure for bevy-patch.

Provides the one capability crate discovery needs from GitHub: fetch a
"list directory contents" URL and return its entries.

- Every request carries a User-Agent (GitHub rejects requests without one)
- One fixed timeout, no retries, no caching
- Non-success responses become RemoteApiError with GitHub's status and message
"""

import logging
from dataclasses import dataclass
from typing import Optional, List, Dict, Any, Tuple

import requests

from ..errors import RemoteApiError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5
DEFAULT_USER_AGENT = "bevy-patch"
DEFAULT_ACCEPT = "application/vnd.github.v3+json"


@dataclass(frozen=True)
class ContentEntry:
    """One entry of a GitHub directory listing."""
    name: str
    type: str  # dir, file, symlink, submodule

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"

    @classmethod
    def from_api_response(cls, data: Any) -> 'ContentEntry':
        """
        Create from a single item of a contents API response.

        Raises:
            TransportError: If the item is not an object with string name and type
        """
        if not isinstance(data, dict):
            raise TransportError(f"Failed to parse GitHub response: expected object, got {type(data).__name__}")

        name = data.get('name')
        entry_type = data.get('type')
        if not isinstance(name, str) or not isinstance(entry_type, str):
            raise TransportError("Failed to parse GitHub response: entry is missing 'name' or 'type'")

        return cls(name=name, type=entry_type)


@dataclass(frozen=True)
class GitHubError:
    """Error body returned by the GitHub API for a failed request."""
    status: str
    message: str
    documentation_url: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Any, http_status: int) -> 'GitHubError':
        """
        Create from an error response body.

        GitHub sends ``status`` as a string; when it is absent the HTTP
        status code is used instead.

        Raises:
            TransportError: If the body is not an error object with a message
        """
        if not isinstance(data, dict) or not isinstance(data.get('message'), str):
            raise TransportError(f"Failed to parse GitHub error response (HTTP {http_status})")

        status = data.get('status')
        return cls(
            status=str(status) if status is not None else str(http_status),
            message=data['message'],
            documentation_url=data.get('documentation_url'),
        )

    def to_exception(self) -> RemoteApiError:
        return RemoteApiError(self.status, self.message)

    def __str__(self) -> str:
        return f"{self.status}: {self.message}"


class GitHubClient:
    """
    Minimal GitHub REST client for directory listings.

    Example:
        with GitHubClient() as client:
            entries = client.list_contents(url)
            dirs = [e.name for e in entries if e.is_dir]
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        accept: str = DEFAULT_ACCEPT,
    ):
        """
        Initialize GitHubClient.

        Args:
            token: Optional GitHub token, sent as an Authorization header
            timeout: Request timeout in seconds
            user_agent: User-Agent header value (required by GitHub)
            accept: Accept header value
        """
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': accept,
            'User-Agent': user_agent,
        })
        if token:
            self.session.headers['Authorization'] = f'token {token}'

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'GitHubClient':
        """Create a client from the ``github`` section of the configuration."""
        github = config.get('github', {})
        return cls(
            token=github.get('token') or None,
            timeout=github.get('timeout_seconds', DEFAULT_TIMEOUT),
            user_agent=github.get('user_agent', DEFAULT_USER_AGENT),
            accept=github.get('api_accept', DEFAULT_ACCEPT),
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_json(self, url: str) -> Tuple[int, Any]:
        """
        GET a URL and decode its JSON body.

        Returns:
            Tuple of (HTTP status code, decoded body)

        Raises:
            TransportError: If the request fails or the body is not JSON
        """
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Failed to fetch from GitHub: {e}") from e

        logger.debug(f"GitHub responded {response.status_code} for {url}")

        try:
            return response.status_code, response.json()
        except ValueError as e:
            raise TransportError(f"Failed to parse GitHub response: {e}") from e

    def list_contents(self, url: str) -> List[ContentEntry]:
        """
        List a directory through the contents API.

        Args:
            url: Fully built ``.../contents/<dir>?ref=<ref>`` URL

        Returns:
            Directory entries in the order GitHub returned them

        Raises:
            RemoteApiError: If GitHub answers with a non-200 status
            TransportError: If the request fails or the body has an unexpected shape
        """
        status_code, data = self.get_json(url)

        if status_code != 200:
            raise GitHubError.from_api_response(data, status_code).to_exception()

        if not isinstance(data, list):
            raise TransportError(
                f"Failed to parse GitHub response: expected a directory listing, got {type(data).__name__}"
            )

        return [ContentEntry.from_api_response(item) for item in data]
