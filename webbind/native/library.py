"""Locate the native webview library and declare its C signatures."""

import ctypes
import ctypes.util
import logging
import os
import sys
import threading

from webbind.constants import LIBRARY_BASE_NAME, LIBRARY_ENV_VAR, LIBRARY_FILE_NAMES
from webbind.errors import MissingDependencyError
from webbind.native.structs import BindFn, DispatchFn, WebviewVersionInfo
from webbind.paths import BUNDLED_LIB_DIR

logger = logging.getLogger(__name__)

_w = ctypes.c_void_p
_err = ctypes.c_int

SIGNATURES = {
    "webview_create": ([ctypes.c_int, ctypes.c_void_p], _w),
    "webview_destroy": ([_w], _err),
    "webview_run": ([_w], _err),
    "webview_terminate": ([_w], _err),
    "webview_dispatch": ([_w, DispatchFn, ctypes.c_void_p], _err),
    "webview_get_window": ([_w], ctypes.c_void_p),
    "webview_get_native_handle": ([_w, ctypes.c_int], ctypes.c_void_p),
    "webview_set_title": ([_w, ctypes.c_char_p], _err),
    "webview_set_size": ([_w, ctypes.c_int, ctypes.c_int, ctypes.c_int], _err),
    "webview_navigate": ([_w, ctypes.c_char_p], _err),
    "webview_set_html": ([_w, ctypes.c_char_p], _err),
    "webview_init": ([_w, ctypes.c_char_p], _err),
    "webview_eval": ([_w, ctypes.c_char_p], _err),
    "webview_bind": ([_w, ctypes.c_char_p, BindFn, ctypes.c_void_p], _err),
    "webview_unbind": ([_w, ctypes.c_char_p], _err),
    "webview_return": ([_w, ctypes.c_char_p, ctypes.c_int, ctypes.c_char_p], _err),
    "webview_version": ([], ctypes.POINTER(WebviewVersionInfo)),
}

_library_lock = threading.Lock()
_loaded = {}


def _platform_key() -> str:
    if sys.platform.startswith("win"):
        return "win32"
    if sys.platform == "darwin":
        return "darwin"
    return "linux"


def candidate_paths(path: str | None = None, config=None) -> list[str]:
    """Library locations in lookup order; the first one that loads wins."""
    candidates = []
    if path:
        candidates.append(path)
    env_path = os.getenv(LIBRARY_ENV_VAR, "").strip()
    if env_path:
        candidates.append(env_path)
    if config is not None:
        configured = config.library_path()
        if configured:
            candidates.append(configured)
    for file_name in LIBRARY_FILE_NAMES[_platform_key()]:
        bundled = os.path.join(BUNDLED_LIB_DIR, file_name)
        if os.path.exists(bundled):
            candidates.append(bundled)
    found = ctypes.util.find_library(LIBRARY_BASE_NAME)
    if found:
        candidates.append(found)
    return candidates


def declare_signatures(lib):
    missing = []
    for name, (argtypes, restype) in SIGNATURES.items():
        try:
            fn = getattr(lib, name)
        except AttributeError:
            missing.append(name)
            continue
        fn.argtypes = argtypes
        fn.restype = restype
    if missing:
        raise MissingDependencyError(
            "Native webview library is missing symbols: " + ", ".join(missing),
            operation="load_library",
        )
    return lib


def load_library(path: str | None = None, config=None):
    """Load and configure the native library, caching one handle per resolved path."""
    errors = []
    for candidate in candidate_paths(path, config):
        with _library_lock:
            cached = _loaded.get(candidate)
            if cached is not None:
                return cached
            try:
                lib = ctypes.CDLL(candidate)
            except OSError as exc:
                errors.append(f"{candidate}: {exc}")
                continue
            declare_signatures(lib)
            _loaded[candidate] = lib
            logger.info("Loaded native webview library from %s", candidate)
            return lib

    detail = "; ".join(errors) if errors else "no candidate paths"
    raise MissingDependencyError(
        f"Native webview library not found ({detail}). Set {LIBRARY_ENV_VAR} to its path.",
        operation="load_library",
    )


__all__ = ["SIGNATURES", "candidate_paths", "declare_signatures", "load_library"]
