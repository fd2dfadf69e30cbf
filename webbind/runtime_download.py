from dataclasses import dataclass
import logging
import os

import requests

from webbind.constants import (
    HTTP_CONNECT_TIMEOUT_SEC,
    HTTP_READ_TIMEOUT_SEC,
    WEBVIEW2_BOOTSTRAPPER_NAME,
    WEBVIEW2_BOOTSTRAPPER_URL,
)
from webbind.errors import RuntimeDownloadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadResult:
    success: bool
    url: str
    content: bytes | None = None
    content_type: str | None = None
    status_code: int | None = None
    local_path: str | None = None


def download_url_content(
    url: str,
    timeout=(HTTP_CONNECT_TIMEOUT_SEC, HTTP_READ_TIMEOUT_SEC),
    allow_redirects: bool = True,
) -> DownloadResult:
    try:
        response = requests.get(url, allow_redirects=allow_redirects, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise RuntimeDownloadError(f"Download failed: {exc}") from exc

    return DownloadResult(
        success=True,
        url=url,
        content=response.content or b"",
        content_type=(response.headers.get("Content-Type") or "").lower(),
        status_code=response.status_code,
    )


def require_executable_bytes(result: DownloadResult) -> bytes:
    if not result.success or not result.content:
        raise RuntimeDownloadError("No content available.")
    if not result.content.startswith(b"MZ"):
        raise RuntimeDownloadError("Download did not return a Windows executable.")
    return result.content


def download_runtime_installer(dest_dir: str, url: str = WEBVIEW2_BOOTSTRAPPER_URL) -> DownloadResult:
    """Fetch the WebView2 Evergreen bootstrapper into ``dest_dir``."""
    result = download_url_content(url)
    content = require_executable_bytes(result)

    os.makedirs(dest_dir, exist_ok=True)
    local_path = os.path.join(dest_dir, WEBVIEW2_BOOTSTRAPPER_NAME)
    try:
        with open(local_path, "wb") as f:
            f.write(content)
    except OSError as exc:
        raise RuntimeDownloadError(f"Could not save installer: {exc}") from exc
    logger.info("Saved WebView2 bootstrapper to %s (%d bytes)", local_path, len(content))

    return DownloadResult(
        success=True,
        url=url,
        content=content,
        content_type=result.content_type,
        status_code=result.status_code,
        local_path=local_path,
    )


__all__ = ["DownloadResult", "download_runtime_installer", "download_url_content", "require_executable_bytes"]
