"""
Programmatic entry point for relfetch.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..models import FetchResult, Release, RepositoryRef, RunConfiguration
from ..services import GitHubAPIService, DownloadService
from ..core.orchestrator import ReleaseOrchestrator
from ..infrastructure.logger import logger


class ReleaseDownloader:
    """
    High-level facade: fetch one release asset or list releases.

    Example:
        >>> downloader = ReleaseDownloader()
        >>> result = downloader.fetch(RunConfiguration(
        ...     repository=RepositoryRef.parse("ffuf/ffuf"),
        ...     asset_pattern="ffuf_*_windows_amd64.zip",
        ... ))
        >>> result.is_successful
        True
    """

    def __init__(
        self,
        auth_token: Optional[str] = None,
        verbose: bool = False,
        timeout: int = 300,
        chunk_size: int = 8192
    ):
        self.auth_token = auth_token
        self.verbose = verbose
        self._apply_log_level()

        self.github_service = GitHubAPIService(auth_token, timeout=timeout)
        self.download_service = DownloadService(
            timeout=timeout, chunk_size=chunk_size, auth_token=auth_token
        )
        self.orchestrator = ReleaseOrchestrator(
            self.github_service, self.download_service
        )

    @classmethod
    def from_config(cls, config: RunConfiguration, verbose: bool = False) -> "ReleaseDownloader":
        return cls(
            auth_token=config.auth_token,
            verbose=verbose,
            timeout=config.timeout,
            chunk_size=config.chunk_size
        )

    def _apply_log_level(self) -> None:
        logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

    def set_verbose(self, verbose: bool) -> None:
        """Switch debug logging on or off."""

        self.verbose = verbose
        self._apply_log_level()

    def fetch(self, config: RunConfiguration) -> FetchResult:
        """Resolve, select, download and (optionally) extract one asset."""

        return self.orchestrator.execute(config)

    def download(
        self,
        repository: Union[str, RepositoryRef],
        asset_pattern: str = "*",
        tag: Optional[str] = None,
        download_folder: Optional[Path] = None,
        **options
    ) -> FetchResult:
        """Convenience wrapper building the RunConfiguration from arguments."""

        config = RunConfiguration(
            repository=repository,
            asset_pattern=asset_pattern,
            tag=tag or "latest",
            download_folder=download_folder or Path.cwd(),
            auth_token=self.auth_token,
            **options
        )
        return self.fetch(config)

    def list_releases(self, repository: Union[str, RepositoryRef]) -> List[Release]:
        """Every release of `repository` with its assets, newest first."""

        if isinstance(repository, str):
            repository = RepositoryRef.parse(repository)
        return self.orchestrator.list_releases(repository)

    def close(self) -> None:
        self.github_service.close()
        self.download_service.close()


__all__ = [
    "ReleaseDownloader",
]
