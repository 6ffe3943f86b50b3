"""
Configuration models for relfetch runs.
"""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .github import RepositoryRef, ReleaseTagSelector


WINDOWS_ARCHIVE_TOOL = r"C:\Program Files\7-Zip\7z.exe"
POSIX_ARCHIVE_TOOL = "/usr/bin/7z"
ARCHIVE_TOOL_NAMES = ("7z", "7zz", "7za")


def default_archive_tool() -> Path:
    """Return the platform-specific default location of the archiver."""

    if sys.platform.startswith("win"):
        return Path(WINDOWS_ARCHIVE_TOOL)

    for name in ARCHIVE_TOOL_NAMES:
        found = shutil.which(name)
        if found:
            return Path(found)
    return Path(POSIX_ARCHIVE_TOOL)


@dataclass
class RunConfiguration:
    """
    Everything a single fetch run needs.

    Built once from invocation arguments and treated as read-only afterwards.
    Only the repository is mandatory.
    """

    repository: RepositoryRef

    # Mode and selection
    list_releases: bool = False
    asset_pattern: str = "*"
    tag: ReleaseTagSelector = field(default_factory=ReleaseTagSelector.latest)
    ignore_case: bool = False

    # Download and extraction
    download_folder: Path = field(default_factory=Path.cwd)
    extract: bool = True
    archive_tool: Path = field(default_factory=default_archive_tool)
    extract_folder: Optional[Path] = None  # Defaults to <download_folder>/<repo name>
    delete_archive: bool = True

    # Network
    auth_token: Optional[str] = None
    timeout: int = 300
    chunk_size: int = 8192

    def __post_init__(self) -> None:
        if isinstance(self.repository, str):
            self.repository = RepositoryRef.parse(self.repository)
        if isinstance(self.tag, str):
            self.tag = ReleaseTagSelector.parse(self.tag)
        self.download_folder = Path(self.download_folder)
        self.archive_tool = Path(self.archive_tool)
        if self.extract_folder is not None:
            self.extract_folder = Path(self.extract_folder)

        if not self.asset_pattern and not self.list_releases:
            raise ValueError("Asset pattern must not be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

    @property
    def resolved_extract_folder(self) -> Path:
        if self.extract_folder is not None:
            return self.extract_folder
        return self.download_folder / self.repository.name


__all__ = [
    "RunConfiguration",
    "default_archive_tool",
]
