"""
Service for streaming a release asset to the local file system.
"""

from pathlib import Path
from typing import Optional

import httpx

from ..models import Asset
from ..infrastructure.error_handler import (
    DownloadError, NetworkError, handle_api_error
)
from ..infrastructure.logger import logger


class DownloadService:
    """Streams asset content to disk with httpx."""

    def __init__(
        self,
        timeout: int = 300,
        chunk_size: int = 8192,
        auth_token: Optional[str] = None,
        client: Optional[httpx.Client] = None
    ):
        self.timeout = timeout
        self.chunk_size = chunk_size

        if client is None:
            headers = {"Accept": "application/octet-stream"}
            if auth_token:
                headers["Authorization"] = f"Bearer {auth_token}"
            client = httpx.Client(
                timeout=timeout, follow_redirects=True, headers=headers
            )
        self.client = client

    @staticmethod
    def ensure_directory(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloadError(f"Cannot create directory {path}", e) from e

    @handle_api_error
    def download_asset(self, asset: Asset, folder: Path) -> Path:
        """
        Download `asset` into `folder`, replacing any file of the same name.

        Args:
            asset: Asset to fetch
            folder: Destination directory, created when missing

        Returns:
            Path of the written file

        Raises:
            NetworkError: If the content could not be fetched
            DownloadError: If the content could not be written
        """
        self.ensure_directory(folder)
        target_path = folder / asset.name

        logger.info(f"Downloading {asset.name}")
        logger.debug(f"GET {asset.download_url} -> {target_path}")

        bytes_written = 0
        with self.client.stream("GET", asset.download_url) as response:
            if response.is_error:
                raise NetworkError(
                    f"Download of {asset.name} failed with status "
                    f"{response.status_code}"
                )
            try:
                with open(target_path, "wb") as handle:
                    for chunk in response.iter_bytes(self.chunk_size):
                        handle.write(chunk)
                        bytes_written += len(chunk)
            except OSError as e:
                raise DownloadError(f"Cannot write {target_path}", e) from e

        logger.info(f"Saved {target_path} ({bytes_written} bytes)")
        return target_path

    def close(self) -> None:
        self.client.close()


__all__ = [
    "DownloadService",
]
