import ctypes
import itertools
import queue
import threading

import pytest

from webbind.native.structs import WebviewVersion, WebviewVersionInfo, WindowSizeHint

_TERMINATE = object()


class FakeNativeLibrary:
    """Pure-Python stand-in for the webview C API.

    Callbacks handed over by the binding are the real ctypes trampolines, so
    invoking them here exercises the same path the native loop would.
    """

    def __init__(self):
        self._handles = itertools.count(0x1000, 0x10)
        self._seqs = itertools.count(1)
        self.created = []
        self.destroyed = []
        self.calls = []
        self.bindings = {}
        self.returns = []
        self.queue = queue.Queue()
        self.run_thread = None
        self.size = (0, 0)
        self.size_hint = WindowSizeHint.NONE
        self.min_size = None
        self.max_size = None
        self.statuses = {}
        self.create_result = None

    def _status(self, name):
        return self.statuses.get(name, 0)

    def webview_create(self, debug, window):
        handle = self.create_result if self.create_result is not None else next(self._handles)
        self.created.append((debug, window, handle))
        return handle

    def webview_destroy(self, w):
        self.destroyed.append(w)
        return self._status("webview_destroy")

    def webview_run(self, w):
        self.run_thread = threading.get_ident()
        while True:
            item = self.queue.get(timeout=5)
            if item is _TERMINATE:
                break
            fn, arg = item
            fn(w, arg)
        return self._status("webview_run")

    def webview_terminate(self, w):
        self.calls.append(("webview_terminate", w))
        self.queue.put(_TERMINATE)
        return self._status("webview_terminate")

    def webview_dispatch(self, w, fn, arg):
        status = self._status("webview_dispatch")
        if status == 0:
            self.queue.put((fn, arg))
        return status

    def webview_get_window(self, w):
        return 0xAAAA

    def webview_get_native_handle(self, w, kind):
        return {0: 0xAAAA, 1: 0xBBBB, 2: 0}.get(kind)

    def webview_set_title(self, w, title):
        self.calls.append(("webview_set_title", title))
        return self._status("webview_set_title")

    def webview_set_size(self, w, width, height, hint):
        self.calls.append(("webview_set_size", width, height, hint))
        if hint == WindowSizeHint.MIN:
            self.min_size = (width, height)
        elif hint == WindowSizeHint.MAX:
            self.max_size = (width, height)
        else:
            self.size = (width, height)
            self.size_hint = WindowSizeHint(hint)
        return self._status("webview_set_size")

    def webview_navigate(self, w, url):
        self.calls.append(("webview_navigate", url))
        return self._status("webview_navigate")

    def webview_set_html(self, w, html):
        self.calls.append(("webview_set_html", html))
        return self._status("webview_set_html")

    def webview_init(self, w, js):
        self.calls.append(("webview_init", js))
        return self._status("webview_init")

    def webview_eval(self, w, js):
        self.calls.append(("webview_eval", js))
        return self._status("webview_eval")

    def webview_bind(self, w, name, fn, arg):
        if name in self.bindings:
            return 1
        status = self._status("webview_bind")
        if status == 0:
            self.bindings[name] = (fn, arg)
        return status

    def webview_unbind(self, w, name):
        if self.bindings.pop(name, None) is None:
            return 2
        return self._status("webview_unbind")

    def webview_return(self, w, seq, status, result):
        self.returns.append((seq.decode(), status, result.decode()))
        return self._status("webview_return")

    def webview_version(self):
        info = WebviewVersionInfo(WebviewVersion(0, 12, 0), b"0.12.0", b"", b"")
        return ctypes.pointer(info)

    # -- simulation helpers ------------------------------------------------

    def call_js(self, name, args_json, seq=None, fn=None, arg=None):
        """Simulate page JavaScript calling a bound function."""
        if fn is None:
            fn, arg = self.bindings[name.encode()]
        seq = seq or str(next(self._seqs))
        fn(seq.encode(), args_json.encode(), arg)
        return seq

    def user_resize(self, width, height):
        """Simulate the user dragging the window border."""
        if self.size_hint == WindowSizeHint.FIXED:
            return
        self.size = (width, height)


@pytest.fixture
def fake_lib():
    return FakeNativeLibrary()


@pytest.fixture
def webview(fake_lib):
    from webbind.webview import Webview

    view = Webview(library=fake_lib)
    yield view
    if view.is_alive:
        view.destroy()
