"""
GitHub domain models for relfetch.

This module contains strongly typed data classes representing the
repository, release and asset entities consumed from the releases API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


LATEST_TAG = "latest"


@dataclass(frozen=True)
class RepositoryRef:
    """Immutable `owner/name` reference to a GitHub repository."""

    owner: str
    name: str

    def __post_init__(self) -> None:
        if not self.owner or not self.name:
            raise ValueError("Repository owner and name are required")

    @classmethod
    def parse(cls, value: str) -> "RepositoryRef":
        """Build a reference from an `owner/name` string."""

        parts = value.strip().split('/') if value else []
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise ValueError(
                f"Invalid repository '{value}': expected the form 'owner/name'"
            )
        return cls(owner=parts[0].strip(), name=parts[1].strip())

    @property
    def full_name(self) -> str:
        return f'{self.owner}/{self.name}'

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class ReleaseTagSelector:
    """Either a literal release tag or the "most recent release" sentinel."""

    tag: Optional[str] = None  # None selects the latest release

    @classmethod
    def parse(cls, value: Optional[str]) -> "ReleaseTagSelector":
        if value is None or not value.strip() or value.strip().lower() == LATEST_TAG:
            return cls()
        return cls(tag=value.strip())

    @classmethod
    def latest(cls) -> "ReleaseTagSelector":
        return cls()

    @property
    def is_latest(self) -> bool:
        return self.tag is None

    def __str__(self) -> str:
        return LATEST_TAG if self.is_latest else self.tag


@dataclass(frozen=True)
class Asset:
    """A single downloadable file attached to a release."""

    name: str
    download_url: str
    size: int = 0  # Size in bytes, informational only

    def __post_init__(self) -> None:
        if not self.name or not self.download_url:
            raise ValueError("Asset name and download URL are required")


@dataclass
class Release:
    """A tagged release and its assets, in the order the API returned them."""

    tag_name: str
    assets: List[Asset] = field(default_factory=list)

    @property
    def asset_names(self) -> List[str]:
        return [asset.name for asset in self.assets]


__all__ = [
    "LATEST_TAG",
    "RepositoryRef",
    "ReleaseTagSelector",
    "Asset",
    "Release",
]
