from dataclasses import dataclass
from enum import Enum
import sys

from webbind.constants import BROWSER_RUNTIME_INSTALL_URL, WEBVIEW2_REGISTRY_KEYS
from webbind.errors import MissingDependencyError
from webbind.native import library


class NativeRuntimeStatus(str, Enum):
    READY = "READY"
    MISSING_RUNTIME = "MISSING_RUNTIME"
    INIT_FAILED = "INIT_FAILED"


@dataclass(frozen=True)
class NativeRuntimeInfo:
    status: NativeRuntimeStatus
    detail: str
    library_path: str | None = None


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def _webview2_runtime_installed() -> bool:
    import winreg

    for hive in (winreg.HKEY_LOCAL_MACHINE, winreg.HKEY_CURRENT_USER):
        for key_path in WEBVIEW2_REGISTRY_KEYS:
            try:
                with winreg.OpenKey(hive, key_path) as key:
                    version, _ = winreg.QueryValueEx(key, "pv")
            except OSError:
                continue
            if version and version != "0.0.0.0":
                return True
    return False


def detect_native_runtime(path: str | None = None, config=None) -> NativeRuntimeInfo:
    try:
        lib = library.load_library(path, config)
    except MissingDependencyError as exc:
        return NativeRuntimeInfo(
            status=NativeRuntimeStatus.MISSING_RUNTIME,
            detail=str(exc),
        )
    except Exception as exc:
        return NativeRuntimeInfo(
            status=NativeRuntimeStatus.INIT_FAILED,
            detail=f"Native library failed to load: {exc}",
        )

    library_path = getattr(lib, "_name", None)
    if _is_windows():
        try:
            runtime_ready = _webview2_runtime_installed()
        except Exception as exc:
            return NativeRuntimeInfo(
                status=NativeRuntimeStatus.INIT_FAILED,
                detail=f"Runtime check failed: {exc}",
                library_path=library_path,
            )
        if not runtime_ready:
            return NativeRuntimeInfo(
                status=NativeRuntimeStatus.MISSING_RUNTIME,
                detail=(
                    "Microsoft Edge WebView2 Runtime is missing. "
                    f"Install it from: {BROWSER_RUNTIME_INSTALL_URL}"
                ),
                library_path=library_path,
            )

    return NativeRuntimeInfo(
        status=NativeRuntimeStatus.READY,
        detail="Native webview library loaded.",
        library_path=library_path,
    )


__all__ = ["NativeRuntimeInfo", "NativeRuntimeStatus", "detect_native_runtime"]
