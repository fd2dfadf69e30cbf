APP_NAME = "webbind"

LIBRARY_ENV_VAR = "WEBBIND_LIBRARY"
LIBRARY_BASE_NAME = "webview"
LIBRARY_FILE_NAMES = {
    "win32": ("webview.dll",),
    "darwin": ("libwebview.dylib",),
    "linux": ("libwebview.so", "libwebview.so.0"),
}

VERSION_NUMBER_CAPACITY = 32
PRE_RELEASE_CAPACITY = 48
BUILD_METADATA_CAPACITY = 48

WEBVIEW2_CLIENT_GUID = "{F3017226-FE2A-4295-8BDF-00C3A9A7E4C5}"
WEBVIEW2_REGISTRY_KEYS = (
    "SOFTWARE\\WOW6432Node\\Microsoft\\EdgeUpdate\\Clients\\" + WEBVIEW2_CLIENT_GUID,
    "SOFTWARE\\Microsoft\\EdgeUpdate\\Clients\\" + WEBVIEW2_CLIENT_GUID,
)
BROWSER_RUNTIME_INSTALL_URL = "https://developer.microsoft.com/microsoft-edge/webview2/"
WEBVIEW2_BOOTSTRAPPER_URL = "https://go.microsoft.com/fwlink/p/?LinkId=2124703"
WEBVIEW2_BOOTSTRAPPER_NAME = "MicrosoftEdgeWebview2Setup.exe"
HTTP_CONNECT_TIMEOUT_SEC = 10
HTTP_READ_TIMEOUT_SEC = 45

DEFAULT_WINDOW_TITLE = "webbind"
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
