"""
Command line interface for relfetch.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..models import Release, RepositoryRef, RunConfiguration, default_archive_tool
from ..infrastructure.error_handler import (
    AmbiguousMatchError, AssetSelectionError, ReleaseToolError
)
from .api import ReleaseDownloader


app = typer.Typer(add_completion=False)
console = Console(soft_wrap=True)


def _parse_repository(value: str) -> RepositoryRef:
    try:
        return RepositoryRef.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"relfetch {__version__}")
        raise typer.Exit()


def print_releases(releases: List[Release]) -> None:
    if not releases:
        console.print("[yellow]No releases found.[/yellow]")
        return

    for release in releases:
        console.print(f"[bold]{escape(release.tag_name)}[/bold]")
        if not release.assets:
            console.print("  (no assets)")
        for name in release.asset_names:
            console.print(f"  {name}", markup=False, highlight=False)


def print_selection_error(error: AssetSelectionError) -> None:
    if isinstance(error, AmbiguousMatchError):
        console.print("Matching assets:")
        for name in error.matches:
            console.print(f"  {name}", markup=False, highlight=False)

    console.print("Available assets:")
    if not error.available:
        console.print("  (none)")
    for name in error.available:
        console.print(f"  {name}", markup=False, highlight=False)


@app.command()
def main(
    repository: str = typer.Option(
        ..., "--repository", "-r", help="GitHub repository in 'owner/name' form"
    ),
    list_mode: bool = typer.Option(
        False, "--list", help="List every release tag and its assets, then exit"
    ),
    asset_pattern: str = typer.Option(
        "*", "--asset-pattern", "-p",
        help="Asset name pattern; '*' matches any run of characters"
    ),
    tag: str = typer.Option(
        "latest", "--tag", "-t", help="Release tag, or 'latest'"
    ),
    download_folder: Path = typer.Option(
        Path("."), "--download-folder", "-d", help="Where the asset is saved"
    ),
    extract: bool = typer.Option(
        True, "--extract/--no-extract", help="Extract recognized archives"
    ),
    archive_tool_path: Optional[Path] = typer.Option(
        None, "--archive-tool-path", envvar="RELFETCH_ARCHIVE_TOOL",
        help="Path to the 7-Zip executable (default depends on the platform)"
    ),
    extract_folder: Optional[Path] = typer.Option(
        None, "--extract-folder",
        help="Extraction destination (default: <download-folder>/<repo-name>)"
    ),
    delete_archive: bool = typer.Option(
        True, "--delete-archive/--keep-archive",
        help="Delete the archive after a successful extraction"
    ),
    ignore_case: bool = typer.Option(
        False, "--ignore-case", help="Match the asset pattern case-insensitively"
    ),
    token: Optional[str] = typer.Option(
        None, "--token", envvar="GITHUB_TOKEN", help="GitHub access token"
    ),
    timeout: int = typer.Option(300, "--timeout", help="Network timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit"
    ),
):
    """
    Download one asset from a GitHub release and unpack it.

    The latest release is used unless --tag is given. The asset pattern
    must match exactly one asset of the release.
    """
    repo = _parse_repository(repository)

    try:
        config = RunConfiguration(
            repository=repo,
            list_releases=list_mode,
            asset_pattern=asset_pattern,
            tag=tag,
            ignore_case=ignore_case,
            download_folder=download_folder,
            extract=extract,
            archive_tool=archive_tool_path or default_archive_tool(),
            extract_folder=extract_folder,
            delete_archive=delete_archive,
            auth_token=token,
            timeout=timeout,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    downloader = ReleaseDownloader.from_config(config, verbose=verbose)
    try:
        if config.list_releases:
            try:
                releases = downloader.list_releases(config.repository)
            except ReleaseToolError as e:
                console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
                raise typer.Exit(code=1)
            print_releases(releases)
            return

        result = downloader.fetch(config)
    finally:
        downloader.close()

    if not result.is_successful:
        console.print(f"[red]Error:[/red] {escape(result.error_message)}", highlight=False)
        if isinstance(result.error, AssetSelectionError):
            print_selection_error(result.error)
        raise typer.Exit(code=1)

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}", highlight=False)

    if result.was_extracted:
        console.print(f"[green]Done.[/green] {escape(result.asset.name)} extracted to {escape(str(result.extracted_to))}")
    else:
        console.print(f"[green]Done.[/green] {escape(result.asset.name)} saved to {escape(str(result.archive_path))}")


if __name__ == "__main__":
    raise SystemExit(app())
