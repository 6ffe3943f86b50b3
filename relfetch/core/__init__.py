from .selector import AssetSelector, matches_glob
from .extractor import ArchiveExtractor, is_archive
from .orchestrator import ReleaseOrchestrator

__all__ = [
    "AssetSelector",
    "matches_glob",
    "ArchiveExtractor",
    "is_archive",
    "ReleaseOrchestrator",
]
