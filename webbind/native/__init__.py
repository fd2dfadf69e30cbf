"""ctypes surface of the native webview library."""

from webbind.native.library import load_library
from webbind.native.marshal import decode_fixed_buffer, from_native, to_native
from webbind.native.runtime import NativeRuntimeInfo, NativeRuntimeStatus, detect_native_runtime
from webbind.native.structs import NativeHandleKind, WebviewVersionInfo, WindowSizeHint
from webbind.native.version import VersionInfo, decode_version_buffer, decode_version_info

__all__ = [
    "NativeHandleKind",
    "NativeRuntimeInfo",
    "NativeRuntimeStatus",
    "VersionInfo",
    "WebviewVersionInfo",
    "WindowSizeHint",
    "decode_fixed_buffer",
    "decode_version_buffer",
    "decode_version_info",
    "detect_native_runtime",
    "from_native",
    "load_library",
    "to_native",
]
