"""Immutable UUID values with RFC 4122 text and binary codecs."""

from __future__ import annotations

import enum
from dataclasses import dataclass

SIZE = 16

_URN_PREFIX = b"urn:uuid:"
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_CANONICAL_DASHES = (8, 13, 18, 23)


class UUIDError(ValueError):
    """Raised when a UUID cannot be built from the given input."""


class Version(enum.IntEnum):
    """UUID generation algorithm versions."""

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4
    V5 = 5


class Variant(enum.IntEnum):
    """UUID layout variants."""

    NCS = 0
    RFC4122 = 1
    MICROSOFT = 2
    FUTURE = 3


class Domain(enum.IntEnum):
    """DCE security domains."""

    PERSON = 0
    GROUP = 1
    ORG = 2


def _decode_hex(chunk: bytes, original: bytes) -> bytes:
    if not chunk or any(ch not in _HEX_DIGITS for ch in chunk):
        raise UUIDError(f"uuid: invalid hex in UUID: {original!r}")
    return bytes.fromhex(chunk.decode("ascii"))


def _decode_hash_like(text: bytes, original: bytes) -> bytes:
    return _decode_hex(text, original)


def _decode_canonical(text: bytes, original: bytes) -> bytes:
    if any(text[pos] != ord("-") for pos in _CANONICAL_DASHES):
        raise UUIDError(f"uuid: incorrect UUID format {original!r}")
    groups = (text[0:8], text[9:13], text[14:18], text[19:23], text[24:36])
    return b"".join(_decode_hex(group, original) for group in groups)


def _decode_plain(text: bytes, original: bytes) -> bytes:
    if len(text) == 32:
        return _decode_hash_like(text, original)
    if len(text) == 36:
        return _decode_canonical(text, original)
    raise UUIDError(f"uuid: incorrect UUID length: {original!r}")


def _decode_braced(text: bytes) -> bytes:
    if text[:1] != b"{" or text[-1:] != b"}":
        raise UUIDError(f"uuid: incorrect UUID format {text!r}")
    return _decode_plain(text[1:-1], text)


def _decode_urn(text: bytes) -> bytes:
    if text[: len(_URN_PREFIX)] != _URN_PREFIX:
        raise UUIDError(f"uuid: incorrect UUID format: {text!r}")
    return _decode_plain(text[len(_URN_PREFIX):], text)


def _parse_text(text: str | bytes) -> bytes:
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    length = len(raw)
    if length == 32:
        return _decode_hash_like(raw, raw)
    if length == 36:
        return _decode_canonical(raw, raw)
    if length == 38:
        return _decode_braced(raw)
    if length in (41, 45):
        return _decode_urn(raw)
    raise UUIDError(f"uuid: incorrect UUID length: {raw!r}")


@dataclass(frozen=True)
class UUID:
    """A 16-byte universally unique identifier."""

    raw: bytes = bytes(SIZE)

    def __post_init__(self) -> None:
        data = bytes(self.raw)
        if len(data) != SIZE:
            raise UUIDError(
                f"uuid: UUID must be exactly 16 bytes long, got {len(data)} bytes"
            )
        object.__setattr__(self, "raw", data)

    @classmethod
    def from_bytes(cls, data: bytes) -> UUID:
        """Build a UUID from exactly 16 raw bytes."""
        return cls(bytes(data))

    @classmethod
    def from_bytes_or_nil(cls, data: bytes) -> UUID:
        """Like from_bytes, but return the nil UUID on bad input."""
        try:
            return cls.from_bytes(data)
        except UUIDError:
            return NIL

    @classmethod
    def from_string(cls, text: str | bytes) -> UUID:
        """Parse canonical, hash-like, braced or URN text."""
        return cls(_parse_text(text))

    @classmethod
    def from_string_or_nil(cls, text: str | bytes) -> UUID:
        """Like from_string, but return the nil UUID on bad input."""
        try:
            return cls.from_string(text)
        except UUIDError:
            return NIL

    def version(self) -> int:
        """Return the version number stored in the UUID."""
        return self.raw[6] >> 4

    def variant(self) -> Variant:
        """Return the layout variant of the UUID."""
        octet = self.raw[8]
        if octet >> 7 == 0x00:
            return Variant.NCS
        if octet >> 6 == 0x02:
            return Variant.RFC4122
        if octet >> 5 == 0x06:
            return Variant.MICROSOFT
        return Variant.FUTURE

    def with_version(self, version: int) -> UUID:
        """Return a copy with the version bits set."""
        data = bytearray(self.raw)
        data[6] = (data[6] & 0x0F) | ((int(version) << 4) & 0xFF)
        return UUID(bytes(data))

    def with_variant(self, variant: int) -> UUID:
        """Return a copy with the variant bits set."""
        data = bytearray(self.raw)
        octet = data[8]
        if variant == Variant.NCS:
            octet &= 0x7F
        elif variant == Variant.RFC4122:
            octet = (octet & 0x3F) | 0x80
        elif variant == Variant.MICROSOFT:
            octet = (octet & 0x1F) | 0xC0
        else:
            octet = (octet & 0x1F) | 0xE0
        data[8] = octet
        return UUID(bytes(data))

    def to_bytes(self) -> bytes:
        """Return the 16 raw bytes."""
        return self.raw

    def to_text(self) -> str:
        """Return the canonical text form."""
        return str(self)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        h = self.raw.hex()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


NIL = UUID()

NAMESPACE_DNS = UUID.from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_URL = UUID.from_string("6ba7b811-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_OID = UUID.from_string("6ba7b812-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_X500 = UUID.from_string("6ba7b814-9dad-11d1-80b4-00c04fd430c8")