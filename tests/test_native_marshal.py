import pytest

from webbind.errors import InvalidArgumentError, UnspecifiedError
from webbind.native.marshal import decode_fixed_buffer, from_native, to_native


def test_to_native_encodes_text_as_utf8():
    assert to_native("héllo") == "héllo".encode("utf-8")
    assert to_native(b"plain") == b"plain"


def test_to_native_rejects_embedded_nul():
    with pytest.raises(InvalidArgumentError) as excinfo:
        to_native("a\0b", "title")
    assert "title" in str(excinfo.value)


def test_to_native_rejects_non_text():
    with pytest.raises(InvalidArgumentError):
        to_native(None)
    with pytest.raises(InvalidArgumentError):
        to_native(12)


def test_to_native_rejects_invalid_text():
    with pytest.raises(InvalidArgumentError):
        to_native("\ud800")
    with pytest.raises(InvalidArgumentError):
        to_native(b"\xff\xfe")


def test_from_native_handles_null():
    assert from_native(None) == ""
    assert from_native(b"[2,3]") == "[2,3]"


def test_decode_fixed_buffer_truncates_at_first_nul():
    assert decode_fixed_buffer(b"1.2.3\0garbage", 32) == "1.2.3"


def test_decode_fixed_buffer_truncates_at_capacity_without_terminator():
    assert decode_fixed_buffer(b"abcdefgh", 4) == "abcd"
    assert decode_fixed_buffer(b"", 4) == ""


def test_decode_fixed_buffer_rejects_malformed_text():
    with pytest.raises(UnspecifiedError):
        decode_fixed_buffer(b"\xff\xff\0", 8)
