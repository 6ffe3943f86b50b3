"""
Glob-based selection of a single release asset.
"""

import re
from dataclasses import dataclass, field
from typing import List

from ..models import Asset, Release
from ..infrastructure.error_handler import AmbiguousMatchError, NoMatchError
from ..infrastructure.logger import logger


def compile_glob(pattern: str, ignore_case: bool = False) -> "re.Pattern[str]":
    """
    Compile a glob where `*` matches any run of characters (including none).

    No other character is special.
    """

    body = ".*".join(re.escape(part) for part in pattern.split("*"))
    flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
    return re.compile(f"{body}\\Z", flags)


def matches_glob(pattern: str, name: str, ignore_case: bool = False) -> bool:
    return compile_glob(pattern, ignore_case).match(name) is not None


@dataclass
class SelectionResult:
    """Outcome of matching a pattern against a release's assets."""

    matched: List[Asset] = field(default_factory=list)
    excluded: List[Asset] = field(default_factory=list)

    @property
    def total_assets(self) -> int:
        return len(self.matched) + len(self.excluded)


class AssetSelector:
    """Picks exactly one asset from a release by name pattern."""

    def __init__(self, pattern: str = "*", ignore_case: bool = False):
        self.pattern = pattern
        self.ignore_case = ignore_case
        self._regex = compile_glob(pattern, ignore_case)

    def matches(self, asset: Asset) -> bool:
        return self._regex.match(asset.name) is not None

    def filter_assets(self, assets: List[Asset]) -> SelectionResult:
        result = SelectionResult()
        for asset in assets:
            if self.matches(asset):
                result.matched.append(asset)
            else:
                result.excluded.append(asset)
        return result

    def select(self, release: Release) -> Asset:
        """
        Return the single asset of `release` matching the pattern.

        Raises:
            NoMatchError: If no asset matches
            AmbiguousMatchError: If more than one asset matches
        """
        result = self.filter_assets(release.assets)
        logger.debug(
            f"Pattern '{self.pattern}' matched {len(result.matched)}/"
            f"{result.total_assets} assets of {release.tag_name}"
        )

        if not result.matched:
            raise NoMatchError(
                f"No asset of release {release.tag_name} matches "
                f"'{self.pattern}'",
                pattern=self.pattern,
                available=release.asset_names
            )

        if len(result.matched) > 1:
            raise AmbiguousMatchError(
                f"{len(result.matched)} assets of release {release.tag_name} "
                f"match '{self.pattern}'",
                pattern=self.pattern,
                available=release.asset_names,
                matches=[asset.name for asset in result.matched]
            )

        return result.matched[0]


__all__ = [
    "compile_glob",
    "matches_glob",
    "SelectionResult",
    "AssetSelector",
]
