import pytest

from nacossdk.ids.sql import NullUUID, scan_uuid, uuid_db_value
from nacossdk.ids.uuid_value import NIL, UUID, UUIDError

RAW = bytes(
    [0x6B, 0xA7, 0xB8, 0x10, 0x9D, 0xAD, 0x11, 0xD1,
     0x80, 0xB4, 0x00, 0xC0, 0x4F, 0xD4, 0x30, 0xC8]
)
CANONICAL = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"


def test_value():
    u = UUID.from_string(CANONICAL)
    assert uuid_db_value(u) == str(u)


def test_value_nil():
    assert uuid_db_value(UUID()) == str(NIL)


def test_null_uuid_value_nil():
    assert NullUUID().db_value() is None


def test_null_uuid_value_valid():
    assert NullUUID(UUID(RAW), True).db_value() == CANONICAL


def test_scan_binary():
    assert scan_uuid(RAW) == UUID(RAW)
    with pytest.raises(UUIDError):
        scan_uuid(b"")


def test_scan_string():
    assert scan_uuid(CANONICAL) == UUID(RAW)
    with pytest.raises(UUIDError):
        scan_uuid("")


def test_scan_text():
    assert scan_uuid(CANONICAL.encode()) == UUID(RAW)
    with pytest.raises(UUIDError):
        scan_uuid(b"")


def test_scan_unsupported():
    with pytest.raises(UUIDError):
        scan_uuid(True)


def test_scan_nil():
    with pytest.raises(UUIDError):
        scan_uuid(None)


def test_null_uuid_scan_valid():
    result = NullUUID.scan(CANONICAL)
    assert result.valid is True
    assert result.uuid == UUID(RAW)


def test_null_uuid_scan_nil():
    result = NullUUID.scan(None)
    assert result.valid is False
    assert result.uuid == NIL


def test_null_uuid_scan_invalid():
    with pytest.raises(UUIDError):
        NullUUID.scan("not-a-uuid")