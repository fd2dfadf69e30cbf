"""Project-wide error types and native status code translation."""

from enum import Enum


class ProjectError(Exception):
    """Base for all webbind errors."""


class RuntimeDownloadError(ProjectError):
    """Raised when the browser runtime installer cannot be fetched."""


class ErrorKind(str, Enum):
    MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
    CANCELED = "CANCELED"
    INVALID_STATE = "INVALID_STATE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNSPECIFIED = "UNSPECIFIED"
    DUPLICATE = "DUPLICATE"
    NOT_FOUND = "NOT_FOUND"


STATUS_OK = 0

_CODE_TO_KIND = {
    -5: ErrorKind.MISSING_DEPENDENCY,
    -4: ErrorKind.CANCELED,
    -3: ErrorKind.INVALID_STATE,
    -2: ErrorKind.INVALID_ARGUMENT,
    -1: ErrorKind.UNSPECIFIED,
    1: ErrorKind.DUPLICATE,
    2: ErrorKind.NOT_FOUND,
}
_KIND_TO_CODE = {kind: code for code, kind in _CODE_TO_KIND.items()}


class WebviewError(ProjectError):
    """Base for errors reported by, or on behalf of, the native webview."""

    kind = ErrorKind.UNSPECIFIED

    def __init__(self, message: str = "", operation: str | None = None, code: int | None = None):
        self.operation = operation
        self.code = code_for_kind(self.kind) if code is None else code
        if not message:
            message = f"{operation or 'webview'} failed ({self.kind.value}, status {self.code})"
        super().__init__(message)


class MissingDependencyError(WebviewError):
    """The native library or its browser runtime is not installed."""

    kind = ErrorKind.MISSING_DEPENDENCY


class CanceledError(WebviewError):
    kind = ErrorKind.CANCELED


class InvalidStateError(WebviewError):
    """Handle destroyed, loop not running, or the call came at the wrong time."""

    kind = ErrorKind.INVALID_STATE


class InvalidArgumentError(WebviewError):
    kind = ErrorKind.INVALID_ARGUMENT


class UnspecifiedError(WebviewError):
    kind = ErrorKind.UNSPECIFIED


class DuplicateError(WebviewError):
    """A binding with the same name is already live."""

    kind = ErrorKind.DUPLICATE


class NotFoundError(WebviewError):
    kind = ErrorKind.NOT_FOUND


_KIND_TO_ERROR = {
    ErrorKind.MISSING_DEPENDENCY: MissingDependencyError,
    ErrorKind.CANCELED: CanceledError,
    ErrorKind.INVALID_STATE: InvalidStateError,
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.UNSPECIFIED: UnspecifiedError,
    ErrorKind.DUPLICATE: DuplicateError,
    ErrorKind.NOT_FOUND: NotFoundError,
}


def error_kind_for_code(code: int) -> ErrorKind | None:
    """Map a native status to its kind; ``None`` for success, UNSPECIFIED for unknown codes."""
    code = int(code)
    if code == STATUS_OK:
        return None
    return _CODE_TO_KIND.get(code, ErrorKind.UNSPECIFIED)


def code_for_kind(kind: ErrorKind) -> int:
    return _KIND_TO_CODE[ErrorKind(kind)]


def error_for_kind(kind: ErrorKind, message: str = "", operation: str | None = None, code: int | None = None):
    return _KIND_TO_ERROR[ErrorKind(kind)](message, operation=operation, code=code)


def native_status(value) -> int:
    """Status code to hand to the native layer for an int, ErrorKind or WebviewError."""
    if isinstance(value, WebviewError):
        return code_for_kind(value.kind)
    if isinstance(value, ErrorKind):
        return code_for_kind(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"status must be an int, ErrorKind or WebviewError, not {type(value).__name__}",
            operation="webview_return",
        )
    return value


def check_status(code: int, operation: str) -> None:
    kind = error_kind_for_code(code)
    if kind is None:
        return
    raise error_for_kind(kind, operation=operation, code=int(code))


__all__ = [
    "CanceledError",
    "DuplicateError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidStateError",
    "MissingDependencyError",
    "NotFoundError",
    "ProjectError",
    "RuntimeDownloadError",
    "STATUS_OK",
    "UnspecifiedError",
    "WebviewError",
    "check_status",
    "code_for_kind",
    "error_for_kind",
    "error_kind_for_code",
    "native_status",
]
