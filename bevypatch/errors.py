"""
Error taxonomy for crate discovery.

Every failure that can stop the patch block from being printed is one of:

- LocalIOError: the local ``crates`` directory is missing or unreadable
- NameEncodingError: a local directory name is not representable as text
- TransportError: the GitHub request failed or its body was not the expected JSON
- RemoteApiError: GitHub answered with a non-success status

Errors are raised bare by the providers and annotated with the repository,
ref or path being queried before they reach the CLI.
"""

from typing import Optional

from .exit_codes import (
    CommandError,
    GENERAL_ERROR,
    API_ERROR,
    DATA_ERROR,
    IO_ERROR,
    NETWORK_ERROR,
)


class PatchError(CommandError):
    """Base class for discovery failures, with optional context."""

    default_exit_code = GENERAL_ERROR

    def __init__(self, message: str, context: Optional[str] = None,
                 exit_code: Optional[int] = None):
        super().__init__(message, exit_code if exit_code is not None else self.default_exit_code)
        self.message = message
        self.context = context

    def with_context(self, context: str) -> 'PatchError':
        """Attach the operation context and return the same error."""
        self.context = context
        return self

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class LocalIOError(PatchError):
    """The local crates directory could not be listed."""
    default_exit_code = IO_ERROR


class NameEncodingError(LocalIOError):
    """A crate directory name could not be converted to text."""
    default_exit_code = DATA_ERROR


class TransportError(PatchError):
    """The request could not be sent or the response body could not be parsed."""
    default_exit_code = NETWORK_ERROR


class RemoteApiError(PatchError):
    """GitHub reported an error for the directory listing request."""
    default_exit_code = API_ERROR

    def __init__(self, status: str, api_message: str, context: Optional[str] = None):
        super().__init__(f"{status}: {api_message}", context=context)
        self.status = status
        self.api_message = api_message
