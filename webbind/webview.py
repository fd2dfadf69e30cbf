import logging
import threading

from webbind.bridge import CallbackBridge
from webbind.errors import InvalidArgumentError, InvalidStateError, UnspecifiedError, check_status
from webbind.native.library import load_library
from webbind.native.marshal import to_native
from webbind.native.structs import NativeHandleKind, WindowSizeHint
from webbind.native.version import VersionInfo, decode_version_info

logger = logging.getLogger(__name__)


def _coerce_enum(enum_type, value, field: str):
    try:
        return enum_type(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid {field}: {value!r}") from exc


class Webview:
    """Owns one native webview instance.

    The event loop (``run``) and everything the page calls back into run on the
    thread that called ``run``. From other threads, only ``dispatch`` and
    ``terminate`` are safe. ``destroy`` is the only way to release the native
    instance; afterwards every method raises ``InvalidStateError``.
    """

    def __init__(self, debug: bool = False, window=None, library=None, library_path: str | None = None, config=None):
        self._lib = library if library is not None else load_library(library_path, config)
        self._state_lock = threading.Lock()
        self._calls_done = threading.Condition(self._state_lock)
        self._cross_thread_calls = 0
        self._running = False
        self._terminate_requested = False
        self._handle = None

        handle = self._lib.webview_create(int(bool(debug)), window)
        if not handle:
            raise UnspecifiedError("Native webview could not be created.", operation="webview_create")
        self._handle = handle
        self._bridge = CallbackBridge(self, self._lib)
        logger.debug("Created webview %#x (debug=%s)", handle, bool(debug))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._handle is not None:
            self.destroy()
        return False

    def __repr__(self):
        state = "destroyed" if self._handle is None else f"{self._handle:#x}"
        return f"<Webview {state}>"

    @property
    def native_pointer(self) -> int | None:
        return self._handle

    @property
    def is_alive(self) -> bool:
        return self._handle is not None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def bound_names(self) -> list[str]:
        return self._bridge.bound_names

    def _require_handle(self, operation: str):
        handle = self._handle
        if handle is None:
            raise InvalidStateError("Webview has been destroyed.", operation=operation)
        return handle

    def _enter_cross_thread_call(self, operation: str):
        # Caller holds _state_lock. destroy waits for the count to drop to zero.
        handle = self._require_handle(operation)
        self._cross_thread_calls += 1
        return handle

    def _leave_cross_thread_call(self) -> None:
        with self._state_lock:
            self._cross_thread_calls -= 1
            self._calls_done.notify_all()

    def _call(self, operation: str, *args) -> None:
        handle = self._require_handle(operation)
        check_status(getattr(self._lib, operation)(handle, *args), operation)

    # -- lifecycle ---------------------------------------------------------

    def run(self) -> None:
        handle = self._require_handle("webview_run")
        with self._state_lock:
            if self._running:
                raise InvalidStateError("Event loop is already running.", operation="webview_run")
            self._running = True
            self._terminate_requested = False
        try:
            status = self._lib.webview_run(handle)
        finally:
            with self._state_lock:
                self._running = False
        check_status(status, "webview_run")

    def terminate(self) -> None:
        with self._state_lock:
            self._require_handle("webview_terminate")
            if not self._running:
                raise InvalidStateError("Event loop is not running.", operation="webview_terminate")
            if self._terminate_requested:
                return
            handle = self._enter_cross_thread_call("webview_terminate")
            self._terminate_requested = True
        try:
            status = self._lib.webview_terminate(handle)
        finally:
            self._leave_cross_thread_call()
        check_status(status, "webview_terminate")

    def destroy(self) -> None:
        with self._state_lock:
            handle = self._require_handle("webview_destroy")
            if self._running:
                raise InvalidStateError(
                    "Cannot destroy while the event loop is running.",
                    operation="webview_destroy",
                )
            self._handle = None
            self._calls_done.wait_for(lambda: self._cross_thread_calls == 0)
        released = self._bridge.release_all()
        logger.debug("Destroying webview %#x (%d callback records released)", handle, released)
        check_status(self._lib.webview_destroy(handle), "webview_destroy")

    # -- window ------------------------------------------------------------

    def get_window(self) -> int | None:
        return self._lib.webview_get_window(self._require_handle("webview_get_window")) or None

    def get_native_handle(self, kind: NativeHandleKind) -> int | None:
        kind = _coerce_enum(NativeHandleKind, kind, "native handle kind")
        handle = self._require_handle("webview_get_native_handle")
        return self._lib.webview_get_native_handle(handle, int(kind)) or None

    def set_title(self, title: str) -> None:
        self._call("webview_set_title", to_native(title, "title"))

    def set_size(self, width: int, height: int, hint: WindowSizeHint = WindowSizeHint.NONE) -> None:
        hint = _coerce_enum(WindowSizeHint, hint, "size hint")
        for field, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidArgumentError(f"{field} must be a non-negative int, got {value!r}")
        self._call("webview_set_size", width, height, int(hint))

    # -- content -----------------------------------------------------------

    def navigate(self, url: str) -> None:
        native_url = to_native(url, "url").strip()
        if not native_url:
            raise InvalidArgumentError("Empty URL cannot be opened.", operation="webview_navigate")
        self._call("webview_navigate", native_url)

    def set_html(self, html: str) -> None:
        self._call("webview_set_html", to_native(html, "html"))

    def init(self, js: str) -> None:
        """Inject ``js`` into every page before ``window.onload``."""
        self._call("webview_init", to_native(js, "js"))

    def eval(self, js: str) -> None:
        self._call("webview_eval", to_native(js, "js"))

    # -- callbacks ---------------------------------------------------------

    def dispatch(self, callback, arg=None) -> None:
        """Schedule ``callback(webview, arg)`` once on the UI thread. Safe from any thread."""
        with self._state_lock:
            handle = self._enter_cross_thread_call("webview_dispatch")
        try:
            self._bridge.dispatch(handle, callback, arg)
        finally:
            self._leave_cross_thread_call()

    def bind(self, name: str, handler, arg=None) -> None:
        """Expose ``name`` to page JavaScript.

        ``handler(webview, seq, req, arg)`` receives the sequence token and the
        call arguments as a JSON array string, and must answer exactly once
        with ``ret(seq, status, result_json)``.
        """
        self._bridge.bind(self._require_handle("webview_bind"), name, handler, arg)

    def bind_function(self, name: str, fn) -> None:
        """Expose ``fn`` to page JavaScript; its JSON-decoded arguments are passed positionally."""
        self._bridge.bind_function(self._require_handle("webview_bind"), name, fn)

    def unbind(self, name: str) -> None:
        self._bridge.unbind(self._require_handle("webview_unbind"), name)

    def ret(self, seq: str, status, result: str) -> None:
        """Answer call ``seq``. ``status`` is 0 for success, or an error code, ``ErrorKind`` or ``WebviewError``."""
        self._bridge.ret(self._require_handle("webview_return"), seq, status, result)


def create(debug: bool = False, window=None, **kwargs) -> Webview:
    return Webview(debug=debug, window=window, **kwargs)


def version(library=None, library_path: str | None = None, config=None) -> VersionInfo:
    lib = library if library is not None else load_library(library_path, config)
    return decode_version_info(lib.webview_version())


__all__ = ["Webview", "create", "version"]
