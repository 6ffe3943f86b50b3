"""
Error types for relfetch and the decorator that maps client library
failures onto them.
"""

import functools
from typing import Callable, List, Optional, Sequence, TypeVar

import httpx
import requests
from github import GithubException

from .logger import logger


F = TypeVar("F", bound=Callable)


####
##      EXCEPTION HIERARCHY
#####
class ReleaseToolError(Exception):
    """Base class for every failure that ends a run."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class NetworkError(ReleaseToolError):
    """Release metadata or asset content could not be fetched."""


class RateLimitError(NetworkError):
    """The API refused the request because the rate limit is exhausted."""


class AuthenticationError(NetworkError):
    """The API rejected the supplied credentials."""


class ReleaseNotFoundError(ReleaseToolError):
    """The repository or the requested release does not exist."""


class AssetSelectionError(ReleaseToolError):
    """The asset pattern did not select exactly one asset."""

    def __init__(self, message: str, pattern: str, available: Sequence[str]):
        super().__init__(message)
        self.pattern = pattern
        self.available: List[str] = list(available)


class NoMatchError(AssetSelectionError):
    """No asset name matched the pattern."""


class AmbiguousMatchError(AssetSelectionError):
    """More than one asset name matched the pattern."""

    def __init__(
        self,
        message: str,
        pattern: str,
        available: Sequence[str],
        matches: Sequence[str]
    ):
        super().__init__(message, pattern, available)
        self.matches: List[str] = list(matches)


class DownloadError(ReleaseToolError):
    """The downloaded content could not be written to disk."""


class ToolMissingError(ReleaseToolError):
    """The configured archive tool does not exist."""


class ExtractionError(ReleaseToolError):
    """The archive tool could not unpack the archive."""


class DeletionWarning(UserWarning):
    """The archive was extracted but could not be removed afterwards."""


####
##      API ERROR TRANSLATION
#####
def _is_rate_limited(status: Optional[int], text: str) -> bool:
    text = text.lower()
    if status == 429:
        return True
    return (status == 403 or status is None) and (
        "rate limit" in text or "429" in text
    )


def _from_status(status: Optional[int], text: str, error: Exception) -> ReleaseToolError:
    if _is_rate_limited(status, text):
        return RateLimitError("GitHub API rate limit exceeded", error)
    if status == 401:
        return AuthenticationError("GitHub rejected the supplied credentials", error)
    if status == 403:
        return AuthenticationError("Access to the resource was denied", error)
    if status == 404:
        return ReleaseNotFoundError("Repository or release not found", error)
    return NetworkError(f"GitHub API request failed with status {status}", error)


def handle_api_error(func: F) -> F:
    """
    Translate PyGithub and httpx failures into ReleaseToolError subclasses.

    Errors that already belong to the hierarchy pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)

        except ReleaseToolError:
            raise

        except GithubException as e:
            raise _from_status(getattr(e, 'status', None), str(e), e) from e

        except httpx.HTTPStatusError as e:
            raise _from_status(e.response.status_code, str(e), e) from e

        except httpx.RequestError as e:
            if _is_rate_limited(None, str(e)):
                raise RateLimitError("GitHub API rate limit exceeded", e) from e
            raise NetworkError("Network request failed", e) from e

        except requests.exceptions.RequestException as e:
            raise NetworkError("Network request failed", e) from e

        except Exception as e:
            logger.debug(f"Unexpected error in {func.__name__}: {e!r}")
            raise ReleaseToolError("Unexpected error", e) from e

    return wrapper  # type: ignore[return-value]


__all__ = [
    "ReleaseToolError",
    "NetworkError",
    "RateLimitError",
    "AuthenticationError",
    "ReleaseNotFoundError",
    "AssetSelectionError",
    "NoMatchError",
    "AmbiguousMatchError",
    "DownloadError",
    "ToolMissingError",
    "ExtractionError",
    "DeletionWarning",
    "handle_api_error",
]
