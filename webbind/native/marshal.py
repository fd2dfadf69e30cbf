"""Conversions between Python text and NUL-terminated / fixed-capacity native buffers."""

from webbind.errors import InvalidArgumentError, UnspecifiedError


ENCODING = "utf-8"


def to_native(value, field: str = "value") -> bytes:
    """Encode ``value`` for a ``const char *`` parameter."""
    if isinstance(value, str):
        try:
            encoded = value.encode(ENCODING)
        except UnicodeEncodeError as exc:
            raise InvalidArgumentError(f"{field} is not valid text: {exc}") from exc
    elif isinstance(value, (bytes, bytearray)):
        encoded = bytes(value)
        try:
            encoded.decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise InvalidArgumentError(f"{field} is not valid UTF-8: {exc}") from exc
    else:
        raise InvalidArgumentError(f"{field} must be str or bytes, not {type(value).__name__}")

    if b"\0" in encoded:
        raise InvalidArgumentError(f"{field} contains an embedded NUL character")
    return encoded


def from_native(raw) -> str:
    if raw is None:
        return ""
    return bytes(raw).decode(ENCODING, errors="replace")


def decode_fixed_buffer(raw, capacity: int) -> str:
    """Decode a char array that is not guaranteed to be NUL-terminated at capacity."""
    data = bytes(raw[:capacity])
    end = data.find(b"\0")
    if end != -1:
        data = data[:end]
    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise UnspecifiedError(f"Native buffer is not valid UTF-8: {exc}") from exc


__all__ = ["ENCODING", "decode_fixed_buffer", "from_native", "to_native"]
