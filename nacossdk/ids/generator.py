"""RFC 4122 and DCE 1.1 UUID generation."""

from __future__ import annotations

import hashlib
import os
import struct
import threading
import time
import uuid as _stdlib_uuid
from typing import Callable, Protocol

from nacossdk.ids.uuid_value import UUID, UUIDError, Domain, Variant, Version

# 100-nanosecond intervals between 1582-10-15 and 1970-01-01.
_EPOCH_START = 122192928000000000

_POSIX_UID = os.getuid() & 0xFFFFFFFF if hasattr(os, "getuid") else 0
_POSIX_GID = os.getgid() & 0xFFFFFFFF if hasattr(os, "getgid") else 0


class RandomReader(Protocol):
    """A source of random bytes with a file-like read method."""

    def read(self, size: int) -> bytes: ...


class _SystemRandom:
    def read(self, size: int) -> bytes:
        return os.urandom(size)


def _read_full(reader: RandomReader, size: int) -> bytes:
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = reader.read(size - len(buf))
        except OSError as exc:
            raise UUIDError(f"uuid: reading random bytes failed: {exc}") from exc
        if not chunk:
            raise UUIDError("uuid: unexpected end of random data")
        buf += chunk
    return bytes(buf)


def default_hardware_address() -> bytes:
    """Return the 6-byte hardware address of this host.

    Raises UUIDError when no real hardware address can be found.
    """
    node = _stdlib_uuid.getnode()
    if (node >> 40) & 0x01:
        # The multicast bit marks a randomly generated node, not a real interface.
        raise UUIDError("uuid: no HW address found")
    return node.to_bytes(6, "big")


class Generator:
    """Generates UUIDs of versions 1 to 5."""

    def __init__(
        self,
        epoch_func: Callable[[], int] | None = None,
        hw_addr_func: Callable[[], bytes] | None = None,
        rand: RandomReader | None = None,
    ) -> None:
        self._epoch_func = epoch_func or time.time_ns
        self._hw_addr_func = hw_addr_func or default_hardware_address
        self._rand = rand if rand is not None else _SystemRandom()
        self._lock = threading.Lock()
        self._clock_sequence_ready = False
        self._clock_sequence = 0
        self._last_time = 0
        self._hardware_addr_ready = False
        self._hardware_addr = bytes(6)

    def _epoch(self) -> int:
        return _EPOCH_START + self._epoch_func() // 100

    def _next_clock_sequence(self) -> tuple[int, int]:
        with self._lock:
            if not self._clock_sequence_ready:
                self._clock_sequence_ready = True
                self._clock_sequence = int.from_bytes(_read_full(self._rand, 2), "big")
            now = self._epoch()
            if now <= self._last_time:
                self._clock_sequence = (self._clock_sequence + 1) & 0xFFFF
            self._last_time = now
            return now, self._clock_sequence

    def _hardware_address(self) -> bytes:
        with self._lock:
            if not self._hardware_addr_ready:
                self._hardware_addr_ready = True
                try:
                    address = bytes(self._hw_addr_func())
                except (UUIDError, OSError):
                    random_addr = bytearray(_read_full(self._rand, 6))
                    random_addr[0] |= 0x01
                    self._hardware_addr = bytes(random_addr)
                else:
                    self._hardware_addr = address[:6].ljust(6, b"\x00")
            return self._hardware_addr

    def new_v1(self) -> UUID:
        """Return a UUID built from the current time and hardware address."""
        now, clock_seq = self._next_clock_sequence()
        hardware = self._hardware_address()
        raw = struct.pack(
            ">IHHH",
            now & 0xFFFFFFFF,
            (now >> 32) & 0xFFFF,
            (now >> 48) & 0xFFFF,
            clock_seq,
        ) + hardware
        return UUID(raw).with_version(Version.V1).with_variant(Variant.RFC4122)

    def new_v2(self, domain: int) -> UUID:
        """Return a DCE security UUID based on the POSIX UID or GID."""
        data = bytearray(self.new_v1().raw)
        if domain == Domain.PERSON:
            data[0:4] = struct.pack(">I", _POSIX_UID)
        elif domain == Domain.GROUP:
            data[0:4] = struct.pack(">I", _POSIX_GID)
        data[9] = int(domain) & 0xFF
        return UUID(bytes(data)).with_version(Version.V2).with_variant(Variant.RFC4122)

    def new_v3(self, namespace: UUID, name: str) -> UUID:
        """Return a UUID from the MD5 hash of a namespace and a name."""
        return _from_hash(hashlib.md5(), namespace, name, Version.V3)

    def new_v4(self) -> UUID:
        """Return a randomly generated UUID."""
        raw = _read_full(self._rand, 16)
        return UUID(raw).with_version(Version.V4).with_variant(Variant.RFC4122)

    def new_v5(self, namespace: UUID, name: str) -> UUID:
        """Return a UUID from the SHA-1 hash of a namespace and a name."""
        return _from_hash(hashlib.sha1(), namespace, name, Version.V5)


def _from_hash(hasher, namespace: UUID, name: str, version: Version) -> UUID:
    hasher.update(namespace.raw)
    hasher.update(name.encode("utf-8"))
    raw = hasher.digest()[:16]
    return UUID(raw).with_version(version).with_variant(Variant.RFC4122)


_GLOBAL = Generator()


def new_v1() -> UUID:
    """Return a time-based UUID from the shared generator."""
    return _GLOBAL.new_v1()


def new_v2(domain: int) -> UUID:
    """Return a DCE security UUID from the shared generator."""
    return _GLOBAL.new_v2(domain)


def new_v3(namespace: UUID, name: str) -> UUID:
    """Return an MD5 name-based UUID."""
    return _GLOBAL.new_v3(namespace, name)


def new_v4() -> UUID:
    """Return a random UUID from the shared generator."""
    return _GLOBAL.new_v4()


def new_v5(namespace: UUID, name: str) -> UUID:
    """Return a SHA-1 name-based UUID."""
    return _GLOBAL.new_v5(namespace, name)