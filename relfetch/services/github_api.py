"""
Service for reading release metadata from the GitHub REST API.
"""

from typing import List, Optional

from github import Auth, Github

from ..models import Asset, Release, RepositoryRef, ReleaseTagSelector
from ..infrastructure.error_handler import handle_api_error
from ..infrastructure.logger import logger


class GitHubAPIService:
    """
    Thin read-only wrapper over PyGithub's release endpoints.

    Every method issues exactly one logical request (list mode follows
    pagination) and converts the PyGithub objects into relfetch models.
    """

    def __init__(self, auth_token: Optional[str] = None, timeout: int = 300):
        self.auth_token = auth_token
        self.timeout = timeout

        # No retries; lazy objects skip the GET /repos/{owner}/{name} round trip
        if auth_token:
            self.client = Github(
                auth=Auth.Token(auth_token), timeout=timeout, retry=None, lazy=True
            )
        else:
            self.client = Github(timeout=timeout, retry=None, lazy=True)

    def _repository(self, repository: RepositoryRef):
        return self.client.get_repo(repository.full_name)

    @staticmethod
    def _to_release(gh_release) -> Release:
        assets = [
            Asset(
                name=asset.name,
                download_url=asset.browser_download_url,
                size=asset.size or 0
            )
            for asset in gh_release.assets
        ]
        return Release(tag_name=gh_release.tag_name, assets=assets)

    @handle_api_error
    def get_latest_release(self, repository: RepositoryRef) -> Release:
        logger.debug(f"GET latest release of {repository}")
        return self._to_release(self._repository(repository).get_latest_release())

    @handle_api_error
    def get_release_by_tag(self, repository: RepositoryRef, tag: str) -> Release:
        logger.debug(f"GET release '{tag}' of {repository}")
        return self._to_release(self._repository(repository).get_release(tag))

    def get_release(
        self,
        repository: RepositoryRef,
        selector: ReleaseTagSelector
    ) -> Release:
        """Resolve the release chosen by `selector`."""

        if selector.is_latest:
            return self.get_latest_release(repository)
        return self.get_release_by_tag(repository, selector.tag)

    @handle_api_error
    def list_releases(self, repository: RepositoryRef) -> List[Release]:
        """Fetch every release of the repository, newest first."""

        logger.debug(f"GET all releases of {repository}")
        releases = [
            self._to_release(gh_release)
            for gh_release in self._repository(repository).get_releases()
        ]
        logger.debug(f"Received {len(releases)} releases")
        return releases

    def close(self) -> None:
        self.client.close()


__all__ = [
    "GitHubAPIService",
]
