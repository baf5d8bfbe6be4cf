"""Conversions between UUID values and database column values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nacossdk.ids.uuid_value import NIL, SIZE, UUID, UUIDError


def uuid_db_value(uuid: UUID) -> str:
    """Return the value stored in a database column for a UUID."""
    return str(uuid)


def scan_uuid(src: Any) -> UUID:
    """Build a UUID from a value read out of a database column.

    A 16-byte value is taken as raw bytes; longer bytes or a string as text.
    """
    if isinstance(src, (bytes, bytearray, memoryview)):
        data = bytes(src)
        if len(data) == SIZE:
            return UUID.from_bytes(data)
        return UUID.from_string(data)
    if isinstance(src, str):
        return UUID.from_string(src)
    raise UUIDError(f"uuid: cannot convert {type(src).__name__} to UUID")


@dataclass(frozen=True)
class NullUUID:
    """A UUID column value that may be NULL."""

    uuid: UUID = NIL
    valid: bool = False

    def db_value(self) -> str | None:
        """Return None for NULL, otherwise the UUID's text."""
        if not self.valid:
            return None
        return uuid_db_value(self.uuid)

    @classmethod
    def scan(cls, src: Any) -> NullUUID:
        """Build a NullUUID from a column value; None gives a NULL."""
        if src is None:
            return cls(NIL, False)
        return cls(scan_uuid(src), True)