import ctypes
import struct

import pytest

from webbind.errors import UnspecifiedError
from webbind.native.structs import WebviewVersion, WebviewVersionInfo
from webbind.native.version import VersionInfo, decode_version_buffer, decode_version_info


def _record(major, minor, patch, number=b"", pre=b"", build=b""):
    return (
        struct.pack("=3I", major, minor, patch)
        + number.ljust(32, b"\0")[:32]
        + pre.ljust(48, b"\0")[:48]
        + build.ljust(48, b"\0")[:48]
    )


def test_record_layout_matches_native_struct():
    assert ctypes.sizeof(WebviewVersionInfo) == len(_record(0, 0, 0))


def test_decode_version_buffer_reads_numbers_and_strings():
    info = decode_version_buffer(_record(1, 2, 3, b"1.2.3"))

    assert info.as_tuple() == (1, 2, 3)
    assert info.version_number == "1.2.3"
    assert info.pre_release == ""
    assert info.build_metadata == ""
    assert str(info) == "1.2.3"


def test_unterminated_field_stops_at_capacity():
    info = decode_version_buffer(_record(0, 0, 1, b"x" * 32, b"-rc.1", b"+abc"))

    assert info.version_number == "x" * 32
    assert info.pre_release == "-rc.1"
    assert info.build_metadata == "+abc"


def test_bytes_after_terminator_are_ignored():
    info = decode_version_buffer(_record(0, 12, 0, b"0.12.0\0junk", b"\0junk"))

    assert info.version_number == "0.12.0"
    assert info.pre_release == ""


def test_short_buffer_is_unspecified_error():
    with pytest.raises(UnspecifiedError):
        decode_version_buffer(b"\x01\x00")


def test_decode_version_info_accepts_pointer():
    record = WebviewVersionInfo(WebviewVersion(0, 12, 0), b"0.12.0", b"beta", b"")
    info = decode_version_info(ctypes.pointer(record))

    assert info == VersionInfo(0, 12, 0, "0.12.0", "beta", "")
    assert str(info) == "0.12.0-beta"


def test_decode_version_info_rejects_null_pointer():
    with pytest.raises(UnspecifiedError):
        decode_version_info(ctypes.POINTER(WebviewVersionInfo)())
