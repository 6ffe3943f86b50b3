from pathlib import Path
from unittest.mock import patch

import pytest

from relfetch.models import (
    Asset, FetchResult, Release, RepositoryRef, ReleaseTagSelector,
    RunConfiguration, RunStatus, default_archive_tool
)


# ---- RepositoryRef ----

def test_repository_ref_parses_owner_and_name():
    ref = RepositoryRef.parse("ffuf/ffuf")
    assert ref.owner == "ffuf"
    assert ref.name == "ffuf"
    assert ref.full_name == "ffuf/ffuf"
    assert str(ref) == "ffuf/ffuf"


def test_repository_ref_strips_whitespace():
    assert RepositoryRef.parse("  owner/name ").full_name == "owner/name"


@pytest.mark.parametrize("value", ["", "ffuf", "ffuf/", "/ffuf", "a/b/c", " / "])
def test_repository_ref_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        RepositoryRef.parse(value)


def test_repository_ref_is_immutable():
    ref = RepositoryRef.parse("ffuf/ffuf")
    with pytest.raises(Exception):
        ref.owner = "other"


# ---- ReleaseTagSelector ----

@pytest.mark.parametrize("value", [None, "", "latest", "LATEST", " Latest "])
def test_tag_selector_latest_sentinel(value):
    selector = ReleaseTagSelector.parse(value)
    assert selector.is_latest
    assert str(selector) == "latest"


def test_tag_selector_literal_tag():
    selector = ReleaseTagSelector.parse("v2.0.0")
    assert not selector.is_latest
    assert selector.tag == "v2.0.0"
    assert str(selector) == "v2.0.0"


# ---- Release / Asset ----

def test_release_asset_names_keep_order():
    release = Release(tag_name="v1", assets=[
        Asset(name="b.zip", download_url="https://example.com/b.zip"),
        Asset(name="a.zip", download_url="https://example.com/a.zip"),
    ])
    assert release.asset_names == ["b.zip", "a.zip"]


def test_asset_requires_name_and_url():
    with pytest.raises(ValueError):
        Asset(name="", download_url="https://example.com/x")
    with pytest.raises(ValueError):
        Asset(name="x", download_url="")


# ---- RunConfiguration ----

def test_run_configuration_defaults():
    config = RunConfiguration(repository=RepositoryRef.parse("ffuf/ffuf"))

    assert config.list_releases is False
    assert config.asset_pattern == "*"
    assert config.tag.is_latest
    assert config.download_folder == Path.cwd()
    assert config.extract is True
    assert config.delete_archive is True
    assert config.ignore_case is False
    assert config.extract_folder is None
    assert config.resolved_extract_folder == Path.cwd() / "ffuf"


def test_run_configuration_accepts_strings():
    config = RunConfiguration(
        repository="owner/tool",
        tag="v1.2.3",
        download_folder="downloads",
        extract_folder="unpacked",
        archive_tool="7z",
    )
    assert config.repository == RepositoryRef("owner", "tool")
    assert config.tag == ReleaseTagSelector("v1.2.3")
    assert config.download_folder == Path("downloads")
    assert config.resolved_extract_folder == Path("unpacked")
    assert config.archive_tool == Path("7z")


def test_extract_folder_follows_download_folder(tmp_path):
    config = RunConfiguration(repository="owner/tool", download_folder=tmp_path)
    assert config.resolved_extract_folder == tmp_path / "tool"


@pytest.mark.parametrize("overrides", [
    {"timeout": 0},
    {"chunk_size": -1},
    {"asset_pattern": ""},
])
def test_run_configuration_validation(overrides):
    with pytest.raises(ValueError):
        RunConfiguration(repository="owner/tool", **overrides)


def test_empty_pattern_is_accepted_in_list_mode():
    config = RunConfiguration(repository="owner/tool", list_releases=True, asset_pattern="")
    assert config.list_releases is True


def test_default_archive_tool_on_windows():
    with patch("relfetch.models.config.sys.platform", "win32"):
        assert default_archive_tool() == Path(r"C:\Program Files\7-Zip\7z.exe")


def test_default_archive_tool_found_on_path():
    with patch("relfetch.models.config.sys.platform", "linux"), \
         patch("relfetch.models.config.shutil.which", side_effect=lambda n: "/opt/bin/7zz" if n == "7zz" else None):
        assert default_archive_tool() == Path("/opt/bin/7zz")


def test_default_archive_tool_fallback():
    with patch("relfetch.models.config.sys.platform", "linux"), \
         patch("relfetch.models.config.shutil.which", return_value=None):
        assert default_archive_tool() == Path("/usr/bin/7z")


# ---- FetchResult ----

def test_fetch_result_lifecycle():
    result = FetchResult(config=RunConfiguration(repository="owner/tool"))
    assert result.status == RunStatus.PENDING
    assert not result.is_successful

    result.mark_completed()
    assert result.is_successful
    assert result.duration_seconds >= 0.0

    result.mark_failed(RuntimeError("late failure"))
    assert result.status == RunStatus.FAILED
    assert result.error_message == "late failure"
    assert not result.is_successful
