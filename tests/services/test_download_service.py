import pytest
import httpx

from relfetch.services.download import DownloadService
from relfetch.models import Asset
from relfetch.infrastructure.error_handler import DownloadError, NetworkError


ASSET_URL = "https://github.com/ffuf/ffuf/releases/download/v2.1.0/ffuf_2.1.0_windows_amd64.zip"
PAYLOAD = b"PK\x03\x04" + b"x" * 20000


def make_service(handler, chunk_size: int = 1024) -> DownloadService:
    client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
    return DownloadService(chunk_size=chunk_size, client=client)


@pytest.fixture
def asset():
    return Asset(name="ffuf_2.1.0_windows_amd64.zip", download_url=ASSET_URL)


def test_download_writes_content_to_named_file(tmp_path, asset):
    service = make_service(lambda request: httpx.Response(200, content=PAYLOAD))

    path = service.download_asset(asset, tmp_path / "downloads")

    assert path == tmp_path / "downloads" / asset.name
    assert path.read_bytes() == PAYLOAD


def test_download_follows_redirects(tmp_path, asset):
    def handler(request):
        if request.url.host == "github.com":
            return httpx.Response(302, headers={"Location": "https://objects.example.com/blob"})
        return httpx.Response(200, content=b"blob")

    service = make_service(handler)
    path = service.download_asset(asset, tmp_path)

    assert path.read_bytes() == b"blob"


def test_download_overwrites_existing_file(tmp_path, asset):
    existing = tmp_path / asset.name
    existing.write_bytes(b"old content that is longer than the new one")
    service = make_service(lambda request: httpx.Response(200, content=b"new"))

    path = service.download_asset(asset, tmp_path)

    assert path == existing
    assert existing.read_bytes() == b"new"


def test_http_error_status_raises_network_error(tmp_path, asset):
    service = make_service(lambda request: httpx.Response(404))

    with pytest.raises(NetworkError) as excinfo:
        service.download_asset(asset, tmp_path)
    assert "404" in str(excinfo.value)


def test_transport_failure_raises_network_error(tmp_path, asset):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    service = make_service(handler)

    with pytest.raises(NetworkError):
        service.download_asset(asset, tmp_path)


def test_unwritable_destination_raises_download_error(tmp_path, asset):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way")
    service = make_service(lambda request: httpx.Response(200, content=PAYLOAD))

    with pytest.raises(DownloadError):
        service.download_asset(asset, blocker)
