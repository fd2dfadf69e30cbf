"""Routes native callbacks (dispatch and bound JS functions) to Python callables.

The native layer only understands a function pointer plus one ``void *``
argument. Each protocol gets a single ctypes trampoline per bridge, and the
``void *`` is an integer token naming a context record held in this bridge's
registries. Records stay referenced here until the native side can no longer
call them:

* a dispatch record is dropped as soon as its one invocation starts;
* a bind record is dropped on ``unbind`` or ``release_all``, but only once no
  call made through it is still waiting for ``ret``.

Trampolines never let an exception escape into native code.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
import itertools
import json
import logging
import threading

from webbind.errors import (
    DuplicateError,
    ErrorKind,
    InvalidArgumentError,
    NotFoundError,
    STATUS_OK,
    WebviewError,
    check_status,
    native_status,
)
from webbind.native.marshal import from_native, to_native
from webbind.native.structs import BindFn, DispatchFn

logger = logging.getLogger(__name__)


@dataclass
class DispatchRegistration:
    callback: Callable
    arg: object = None


@dataclass
class BindRegistration:
    name: str
    handler: Callable
    arg: object = None
    token: int = 0
    active: bool = True
    pending: set = field(default_factory=set)


def _error_payload(message: str) -> str:
    return json.dumps(message)


def _failure_status(exc: Exception):
    return exc if isinstance(exc, WebviewError) else ErrorKind.UNSPECIFIED


class CallbackBridge:
    def __init__(self, webview, lib):
        self._webview = webview
        self._lib = lib
        self._lock = threading.Lock()
        self._tokens = itertools.count(1)
        self._dispatches: dict[int, DispatchRegistration] = {}
        self._bindings: dict[int, BindRegistration] = {}
        self._names: dict[str, int] = {}
        self._pending: dict[str, int] = {}
        # Referenced for the bridge's lifetime; the native layer keeps raw pointers to them.
        self._dispatch_trampoline = DispatchFn(self._on_dispatch)
        self._bind_trampoline = BindFn(self._on_bind_call)

    @property
    def bound_names(self) -> list[str]:
        with self._lock:
            return sorted(self._names)

    @property
    def pending_calls(self) -> list[str]:
        with self._lock:
            return list(self._pending)

    def has_pending(self, seq: str) -> bool:
        with self._lock:
            return seq in self._pending

    # -- dispatch protocol -------------------------------------------------

    def dispatch(self, handle, callback, arg=None) -> None:
        if not callable(callback):
            raise InvalidArgumentError("dispatch callback must be callable", operation="webview_dispatch")

        with self._lock:
            token = next(self._tokens)
            self._dispatches[token] = DispatchRegistration(callback, arg)
        try:
            status = self._lib.webview_dispatch(handle, self._dispatch_trampoline, token)
        except BaseException:
            self._drop_dispatch(token)
            raise
        if status != STATUS_OK:
            self._drop_dispatch(token)
            check_status(status, "webview_dispatch")

    def _drop_dispatch(self, token: int) -> None:
        with self._lock:
            self._dispatches.pop(token, None)

    def _on_dispatch(self, _native_handle, token):
        with self._lock:
            registration = self._dispatches.pop(token, None)
        if registration is None:
            logger.warning("Dropping dispatch for unknown token %s", token)
            return
        try:
            registration.callback(self._webview, registration.arg)
        except Exception:
            logger.exception("Dispatched callback %r failed", registration.callback)

    # -- bind protocol -----------------------------------------------------

    def bind(self, handle, name, handler, arg=None) -> None:
        if not callable(handler):
            raise InvalidArgumentError("bind handler must be callable", operation="webview_bind")
        native_name = to_native(name, "name")
        if not native_name:
            raise InvalidArgumentError("bound function name must not be empty", operation="webview_bind")
        name = native_name.decode()

        with self._lock:
            if name in self._names:
                raise DuplicateError(f"Function is already bound: {name}", operation="webview_bind")
            token = next(self._tokens)
            self._bindings[token] = BindRegistration(name=name, handler=handler, arg=arg, token=token)
            self._names[name] = token

        status = self._lib.webview_bind(handle, native_name, self._bind_trampoline, token)
        if status != STATUS_OK:
            with self._lock:
                self._bindings.pop(token, None)
                self._names.pop(name, None)
            check_status(status, "webview_bind")
        logger.debug("Bound JS function %s (token %s)", name, token)

    def bind_function(self, handle, name, fn) -> None:
        """Bind ``fn`` so that ``fn(*args)`` answers each JS call synchronously."""
        if not callable(fn):
            raise InvalidArgumentError("bound function must be callable", operation="webview_bind")
        self.bind(handle, name, self._call_synchronously, fn)

    def _call_synchronously(self, webview, seq, req, fn):
        try:
            args = json.loads(req) if req else []
            if not isinstance(args, list):
                raise ValueError("arguments must be a JSON array")
        except ValueError as exc:
            webview.ret(seq, ErrorKind.INVALID_ARGUMENT, _error_payload(f"Invalid arguments: {exc}"))
            return

        try:
            result = json.dumps(fn(*args))
        except Exception as exc:
            logger.exception("Bound function %r failed", fn)
            webview.ret(seq, _failure_status(exc), _error_payload(str(exc) or type(exc).__name__))
            return
        webview.ret(seq, STATUS_OK, result)

    def _on_bind_call(self, raw_seq, raw_req, token):
        seq = from_native(raw_seq)
        req = from_native(raw_req)
        with self._lock:
            registration = self._bindings.get(token)
            accepted = registration is not None and registration.active
            if accepted:
                registration.pending.add(seq)
                self._pending[seq] = token

        if not accepted:
            logger.warning("Refusing call %s for unbound token %s", seq, token)
            self._reply_directly(seq, native_status(ErrorKind.NOT_FOUND), _error_payload("Function is no longer bound"))
            return

        try:
            registration.handler(self._webview, seq, req, registration.arg)
        except Exception as exc:
            logger.exception("Handler for bound function %s failed", registration.name)
            if self.has_pending(seq):
                try:
                    self._webview.ret(seq, _failure_status(exc), _error_payload(str(exc) or type(exc).__name__))
                except WebviewError:
                    logger.exception("Could not report failure of %s to the page", registration.name)

    def _reply_directly(self, seq: str, status: int, result: str) -> None:
        handle = self._webview.native_pointer
        if handle is None:
            return
        code = self._lib.webview_return(handle, to_native(seq, "seq"), status, to_native(result, "result"))
        if code != STATUS_OK:
            logger.warning("webview_return for refused call %s failed with status %s", seq, code)

    def ret(self, handle, seq, status, result) -> None:
        native_seq = to_native(seq, "seq")
        native_result = to_native(result, "result")
        status = native_status(status)
        seq = native_seq.decode()

        with self._lock:
            if seq not in self._pending:
                raise NotFoundError(f"No pending call with sequence token {seq!r}", operation="webview_return")

        # The call stays pending until the native side has accepted the reply.
        check_status(self._lib.webview_return(handle, native_seq, status, native_result), "webview_return")

        with self._lock:
            token = self._pending.pop(seq, None)
            registration = self._bindings.get(token)
            if registration is not None:
                registration.pending.discard(seq)
                if not registration.active and not registration.pending:
                    del self._bindings[token]

    def unbind(self, handle, name) -> None:
        native_name = to_native(name, "name")
        name = native_name.decode()
        with self._lock:
            token = self._names.get(name)
            if token is None:
                raise NotFoundError(f"Function is not bound: {name}", operation="webview_unbind")

        check_status(self._lib.webview_unbind(handle, native_name), "webview_unbind")

        with self._lock:
            if self._names.get(name) == token:
                del self._names[name]
            registration = self._bindings.get(token)
            if registration is not None:
                registration.active = False
                if not registration.pending:
                    del self._bindings[token]
        logger.debug("Unbound JS function %s", name)

    def release_all(self) -> int:
        with self._lock:
            released = len(self._bindings) + len(self._dispatches)
            self._bindings.clear()
            self._names.clear()
            self._pending.clear()
            self._dispatches.clear()
        return released


__all__ = ["BindRegistration", "CallbackBridge", "DispatchRegistration"]
