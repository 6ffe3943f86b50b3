"""
Orchestrator for a complete fetch run: resolve the release, select the
asset, download it, then extract and clean up.
"""

from typing import List

from ..models import FetchResult, Release, RepositoryRef, RunConfiguration, RunStatus
from ..services import GitHubAPIService, DownloadService
from ..infrastructure.error_handler import ReleaseToolError
from .selector import AssetSelector
from .extractor import ArchiveExtractor, is_archive

from relfetch.infrastructure.logger import logger



####
##      RELEASE ORCHESTRATOR
#####
class ReleaseOrchestrator:
    """
    Runs the resolve -> select -> download -> extract -> delete pipeline.

    Stages run strictly in order and the first failure ends the run. Nothing
    done by earlier stages is rolled back.
    """

    def __init__(
        self,
        github_service: GitHubAPIService,
        download_service: DownloadService
    ):
        self.github_service = github_service
        self.download_service = download_service

    def execute(self, config: RunConfiguration) -> FetchResult:
        """
        Execute one fetch run.

        Args:
            config: Run configuration

        Returns:
            FetchResult describing what happened; failures are reported
            through its `error`, never raised
        """
        result = FetchResult(config=config, status=RunStatus.IN_PROGRESS)

        logger.debug(
            f"Starting fetch of {config.repository}@{config.tag} "
            f"with pattern '{config.asset_pattern}'"
        )

        try:
            # Resolve
            logger.info(f"Resolving release {config.tag} of {config.repository}")
            release = self.github_service.get_release(config.repository, config.tag)
            result.release = release
            logger.info(f"Found release {release.tag_name} with {len(release.assets)} assets")

            # Select
            selector = AssetSelector(config.asset_pattern, config.ignore_case)
            asset = selector.select(release)
            result.asset = asset
            logger.info(f"Selected asset {asset.name}")

            # Download
            result.archive_path = self.download_service.download_asset(
                asset, config.download_folder
            )

            # Extract and clean
            if not config.extract:
                logger.debug("Extraction disabled")
            elif not is_archive(result.archive_path):
                logger.info(f"{asset.name} is not a recognized archive, skipping extraction")
            else:
                self._extract_and_clean(config, result)

            result.mark_completed()
            return result

        except ReleaseToolError as e:
            logger.error(f"Fetch failed: {e}")
            result.mark_failed(e)
            return result

    def _extract_and_clean(self, config: RunConfiguration, result: FetchResult) -> None:
        extractor = ArchiveExtractor(config.archive_tool)
        destination = config.resolved_extract_folder

        result.extracted_to = extractor.extract(result.archive_path, destination)

        if not config.delete_archive:
            return

        warning = extractor.delete_archive(result.archive_path)
        if warning is None:
            result.archive_deleted = True
        else:
            result.warnings.append(str(warning))

    def list_releases(self, repository: RepositoryRef) -> List[Release]:
        """
        Fetch every release of `repository` for listing.

        Never downloads or extracts anything.
        """
        releases = self.github_service.list_releases(repository)
        logger.debug(f"Listing {len(releases)} releases of {repository}")
        return releases


__all__ = [
    "ReleaseOrchestrator",
]
