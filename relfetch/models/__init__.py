"""
Core data models API surface for relfetch.

This file re-exports model classes from domain-specific modules so callers
can use imports like `from relfetch.models import X`.
"""

from .github import (
    LATEST_TAG,
    RepositoryRef,
    ReleaseTagSelector,
    Asset,
    Release,
)
from .download import (
    RunStatus,
    FetchResult,
)
from .config import RunConfiguration, default_archive_tool

__all__ = [
    # GitHub models
    "LATEST_TAG",
    "RepositoryRef",
    "ReleaseTagSelector",
    "Asset",
    "Release",
    # Run models
    "RunStatus",
    "FetchResult",
    # Config models
    "RunConfiguration",
    "default_archive_tool",
]
