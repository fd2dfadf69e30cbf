import pytest

from webbind.errors import RuntimeDownloadError
from webbind.runtime_download import (
    DownloadResult,
    download_runtime_installer,
    download_url_content,
    require_executable_bytes,
)


class _FakeResponse:
    def __init__(self, content=b"", content_type="application/octet-stream", status_code=200):
        self.content = content
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests

            raise requests.HTTPError(f"http {self.status_code}")


def test_require_executable_bytes_accepts_pe_signature():
    result = DownloadResult(success=True, url="https://example.com/setup.exe", content=b"MZ\x90\x00")
    assert require_executable_bytes(result).startswith(b"MZ")


def test_require_executable_bytes_rejects_html():
    result = DownloadResult(success=True, url="https://example.com/", content=b"<html>nope</html>")
    with pytest.raises(RuntimeDownloadError):
        require_executable_bytes(result)


def test_download_url_content_wraps_http_errors(monkeypatch):
    from webbind import runtime_download

    monkeypatch.setattr(
        runtime_download.requests,
        "get",
        lambda url, allow_redirects, timeout: _FakeResponse(status_code=404),
    )

    with pytest.raises(RuntimeDownloadError):
        download_url_content("https://example.com/missing")


def test_download_runtime_installer_writes_file(tmp_path, monkeypatch):
    from webbind import runtime_download

    def fake_get(url, allow_redirects, timeout):
        assert url == "https://example.com/bootstrapper"
        assert allow_redirects is True
        assert timeout
        return _FakeResponse(content=b"MZ-installer")

    monkeypatch.setattr(runtime_download.requests, "get", fake_get)
    result = download_runtime_installer(str(tmp_path / "dl"), url="https://example.com/bootstrapper")

    assert result.success is True
    assert result.status_code == 200
    with open(result.local_path, "rb") as f:
        assert f.read() == b"MZ-installer"
