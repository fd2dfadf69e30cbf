import ctypes
from enum import IntEnum

from webbind.constants import BUILD_METADATA_CAPACITY, PRE_RELEASE_CAPACITY, VERSION_NUMBER_CAPACITY


class WindowSizeHint(IntEnum):
    NONE = 0
    MIN = 1
    MAX = 2
    FIXED = 3


class NativeHandleKind(IntEnum):
    """Which platform object ``get_native_handle`` returns.

    UI_WINDOW: ``GtkWindow*`` / ``NSWindow*`` / ``HWND``.
    UI_WIDGET: ``GtkWidget*`` / ``NSView*`` / ``HWND`` of the client area.
    BROWSER_CONTROLLER: ``WebKitWebView*`` / ``WKWebView*`` / ``ICoreWebView2Controller*``.
    """

    UI_WINDOW = 0
    UI_WIDGET = 1
    BROWSER_CONTROLLER = 2


class WebviewVersion(ctypes.Structure):
    _fields_ = [
        ("major", ctypes.c_uint),
        ("minor", ctypes.c_uint),
        ("patch", ctypes.c_uint),
    ]


class WebviewVersionInfo(ctypes.Structure):
    _fields_ = [
        ("version", WebviewVersion),
        ("version_number", ctypes.c_char * VERSION_NUMBER_CAPACITY),
        ("pre_release", ctypes.c_char * PRE_RELEASE_CAPACITY),
        ("build_metadata", ctypes.c_char * BUILD_METADATA_CAPACITY),
    ]


# void (*)(webview_t w, void *arg)
DispatchFn = ctypes.CFUNCTYPE(None, ctypes.c_void_p, ctypes.c_void_p)
# void (*)(const char *id, const char *req, void *arg)
BindFn = ctypes.CFUNCTYPE(None, ctypes.c_char_p, ctypes.c_char_p, ctypes.c_void_p)


__all__ = [
    "BindFn",
    "DispatchFn",
    "NativeHandleKind",
    "WebviewVersion",
    "WebviewVersionInfo",
    "WindowSizeHint",
]
