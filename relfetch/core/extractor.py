"""
Archive extraction through an external 7-Zip compatible tool, and removal
of the archive afterwards.
"""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from ..infrastructure.error_handler import (
    DeletionWarning, ExtractionError, ToolMissingError
)
from ..infrastructure.logger import logger


ARCHIVE_EXTENSIONS = frozenset({"zip", "7z", "gz", "rar", "xz", "bz2"})

# 7-Zip exit codes: 0 ok, 1 warning (e.g. locked files), >= 2 fatal
WARNING_EXIT_CODE = 1

TOOL_GUIDANCE = (
    "Install 7-Zip (https://www.7-zip.org/ on Windows, the 'p7zip-full' or "
    "'7zip' package on Linux, 'brew install sevenzip' on macOS) or pass "
    "--archive-tool-path pointing at an existing 7z executable."
)


def is_archive(path: Path) -> bool:
    """True when the file extension names a supported archive format."""

    return Path(path).suffix.lower().lstrip(".") in ARCHIVE_EXTENSIONS


class ArchiveExtractor:
    """Unpacks archives with an external tool and cleans them up."""

    def __init__(self, tool_path: Path):
        self.tool_path = Path(tool_path)

    def locate_tool(self) -> Path:
        """
        Resolve the configured tool to an existing executable.

        A bare command name (no directory part) is also looked up on PATH.

        Raises:
            ToolMissingError: If the tool cannot be found
        """
        if self.tool_path.is_file():
            return self.tool_path

        if self.tool_path.parent == Path("."):
            found = shutil.which(str(self.tool_path))
            if found:
                return Path(found)

        raise ToolMissingError(
            f"Archive tool not found at {self.tool_path}. {TOOL_GUIDANCE}"
        )

    def build_command(self, tool: Path, archive: Path, destination: Path) -> List[str]:
        # x: extract with full paths, -o: output dir, -y: assume yes on overwrite
        return [str(tool), "x", str(archive), f"-o{destination}", "-y"]

    def extract(self, archive: Path, destination: Path) -> Path:
        """
        Unpack `archive` into `destination`, overwriting existing files.

        Raises:
            ToolMissingError: If the archive tool does not exist
            ExtractionError: If the tool cannot run or reports a fatal error
        """
        tool = self.locate_tool()
        command = self.build_command(tool, archive, destination)

        logger.info(f"Extracting {archive.name} to {destination}")
        logger.debug(f"Running {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False
            )
        except OSError as e:
            raise ExtractionError(f"Could not run {tool}", e) from e

        if completed.returncode > WARNING_EXIT_CODE:
            details = (completed.stderr or completed.stdout or "").strip()
            raise ExtractionError(
                f"{tool.name} failed on {archive.name} with exit code "
                f"{completed.returncode}" + (f": {details}" if details else "")
            )
        if completed.returncode == WARNING_EXIT_CODE:
            logger.warning(
                f"{tool.name} reported warnings while extracting {archive.name}"
            )

        logger.info(f"Extracted {archive.name}")
        return destination

    def delete_archive(self, archive: Path) -> Optional[DeletionWarning]:
        """
        Remove the archive file.

        Returns:
            None on success, or a DeletionWarning describing the failure
        """
        try:
            archive.unlink()
        except OSError as e:
            warning = DeletionWarning(f"Could not delete {archive}: {e}")
            logger.warning(str(warning))
            return warning

        logger.info(f"Deleted {archive.name}")
        return None


__all__ = [
    "ARCHIVE_EXTENSIONS",
    "TOOL_GUIDANCE",
    "is_archive",
    "ArchiveExtractor",
]
