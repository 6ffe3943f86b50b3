"""
Run outcome models for relfetch.

This module contains the data classes describing what a single fetch run
did: which asset it selected, where the files went and how it ended.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .config import RunConfiguration
from .github import Asset, Release


class RunStatus(Enum):
    """Status enumeration for a fetch run."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class FetchResult:
    """Result of one resolve/select/download/extract run."""

    config: RunConfiguration
    status: RunStatus = RunStatus.PENDING

    release: Optional[Release] = None
    asset: Optional[Asset] = None
    archive_path: Optional[Path] = None
    extracted_to: Optional[Path] = None
    archive_deleted: bool = False

    # Non-fatal problems (e.g. the archive could not be removed)
    warnings: List[str] = field(default_factory=list)
    error: Optional[Exception] = None

    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def is_successful(self) -> bool:
        return self.status == RunStatus.COMPLETED and self.error is None

    @property
    def was_extracted(self) -> bool:
        return self.extracted_to is not None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    @property
    def duration_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()

    def mark_completed(self) -> None:
        self.completed_at = datetime.now()
        self.status = RunStatus.COMPLETED

    def mark_failed(self, error: Exception) -> None:
        self.completed_at = datetime.now()
        self.status = RunStatus.FAILED
        self.error = error


__all__ = [
    "RunStatus",
    "FetchResult",
]
