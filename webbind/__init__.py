"""Python bindings for the native webview library."""

from webbind.errors import (
    CanceledError,
    DuplicateError,
    ErrorKind,
    InvalidArgumentError,
    InvalidStateError,
    MissingDependencyError,
    NotFoundError,
    ProjectError,
    UnspecifiedError,
    WebviewError,
)
from webbind.native.runtime import NativeRuntimeInfo, NativeRuntimeStatus, detect_native_runtime
from webbind.native.structs import NativeHandleKind, WindowSizeHint
from webbind.native.version import VersionInfo
from webbind.webview import Webview, create, version

__all__ = [
    "CanceledError",
    "DuplicateError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidStateError",
    "MissingDependencyError",
    "NativeHandleKind",
    "NativeRuntimeInfo",
    "NativeRuntimeStatus",
    "NotFoundError",
    "ProjectError",
    "UnspecifiedError",
    "VersionInfo",
    "Webview",
    "WebviewError",
    "WindowSizeHint",
    "create",
    "detect_native_runtime",
    "version",
]
