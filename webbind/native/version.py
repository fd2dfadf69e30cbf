import ctypes
from dataclasses import dataclass

from webbind.errors import UnspecifiedError
from webbind.native.marshal import decode_fixed_buffer
from webbind.native.structs import WebviewVersionInfo


@dataclass(frozen=True)
class VersionInfo:
    major: int
    minor: int
    patch: int
    version_number: str
    pre_release: str = ""
    build_metadata: str = ""

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self):
        text = self.version_number or f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += self.pre_release if self.pre_release.startswith("-") else f"-{self.pre_release}"
        if self.build_metadata:
            text += self.build_metadata if self.build_metadata.startswith("+") else f"+{self.build_metadata}"
        return text


def _char_field(info: WebviewVersionInfo, name: str) -> str:
    descriptor = getattr(WebviewVersionInfo, name)
    raw = ctypes.string_at(ctypes.addressof(info) + descriptor.offset, descriptor.size)
    return decode_fixed_buffer(raw, descriptor.size)


def decode_version_info(info) -> VersionInfo:
    """Copy a native ``webview_version_info_t`` (struct or pointer) into a ``VersionInfo``."""
    if isinstance(info, ctypes._Pointer):
        if not info:
            raise UnspecifiedError("Native version record is NULL.", operation="webview_version")
        info = info.contents
    if not isinstance(info, WebviewVersionInfo):
        raise UnspecifiedError(
            f"Unexpected native version record: {type(info).__name__}",
            operation="webview_version",
        )
    return VersionInfo(
        major=int(info.version.major),
        minor=int(info.version.minor),
        patch=int(info.version.patch),
        version_number=_char_field(info, "version_number"),
        pre_release=_char_field(info, "pre_release"),
        build_metadata=_char_field(info, "build_metadata"),
    )


def decode_version_buffer(raw: bytes) -> VersionInfo:
    size = ctypes.sizeof(WebviewVersionInfo)
    if len(raw) < size:
        raise UnspecifiedError(
            f"Native version record is {len(raw)} bytes, expected {size}.",
            operation="webview_version",
        )
    return decode_version_info(WebviewVersionInfo.from_buffer_copy(raw[:size]))


__all__ = ["VersionInfo", "decode_version_buffer", "decode_version_info"]
