"""Small helpers shared by the configuration and naming clients."""

from __future__ import annotations

import dataclasses
import enum
import json
import logging
import re
import socket
import time
import urllib.parse
from datetime import timedelta
from typing import Any, Mapping

from nacossdk.model.service import Service

logger = logging.getLogger(__name__)

SERVICE_INFO_SPLITER = "@@"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

_local_ip_cache: dict[str, str] = {}


def current_millis() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def json_to_service(result: str) -> Service | None:
    """Parse a service from JSON text, or return None if it cannot be parsed."""
    try:
        data = json.loads(result)
    except (TypeError, ValueError) as exc:
        logger.error("failed to unmarshal json string:%s err:%r", result, exc)
        return None
    if not isinstance(data, dict):
        logger.error("failed to unmarshal json string:%s err:not an object", result)
        return None
    try:
        service = Service.from_dict(data)
    except (TypeError, ValueError, AttributeError) as exc:
        logger.error("failed to unmarshal json string:%s err:%r", result, exc)
        return None
    if not service.hosts:
        logger.warning("instance list is empty,json string:%s", result)
    return service


def _jsonable(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict) and not isinstance(obj, type):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, Mapping):
        return {str(key): _jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(item) for item in obj]
    return obj


def to_json_string(obj: Any) -> str:
    """Return compact JSON for the object, or "" if it cannot be encoded."""
    try:
        return json.dumps(_jsonable(obj), separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError):
        return ""


def get_group_name(service_name: str, group_name: str) -> str:
    """Return the service name qualified by its group."""
    return group_name + SERVICE_INFO_SPLITER + service_name


def get_service_cache_key(service_name: str, clusters: str) -> str:
    """Return the cache key of a service and its clusters."""
    if not clusters:
        return service_name
    return service_name + SERVICE_INFO_SPLITER + clusters


def _is_usable_ipv4(address: str) -> bool:
    try:
        socket.inet_aton(address)
    except OSError:
        return False
    return address.count(".") == 3 and not address.startswith("127.")


def _discover_local_ip() -> str:
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError as exc:
        logger.debug("host name lookup failed: %r", exc)
        infos = []
    for info in infos:
        address = info[4][0]
        if _is_usable_ipv4(address):
            return address
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
            # A UDP connect sends nothing; it only selects the outgoing interface.
            probe.connect(("10.255.255.255", 1))
            address = probe.getsockname()[0]
    except OSError as exc:
        logger.error("get interface address failed,err:%r", exc)
        return ""
    return address if _is_usable_ipv4(address) else ""


def local_ip() -> str:
    """Return a non-loopback IPv4 address of this host, or "" if none is found."""
    cached = _local_ip_cache.get("ip")
    if cached:
        return cached
    address = _discover_local_ip()
    if address:
        _local_ip_cache["ip"] = address
        logger.info("Local IP:%s", address)
    return address


def get_duration_with_default(
    metadata: Mapping[str, str] | None, key: str, default: timedelta
) -> timedelta:
    """Read a duration given in nanoseconds from metadata, else return the default."""
    if not metadata or key not in metadata:
        return default
    data = metadata[key]
    if not isinstance(data, str) or not _INTEGER.fullmatch(data):
        logger.error("key:%s is not a number", key)
        return default
    value = int(data)
    if not _INT64_MIN <= value <= _INT64_MAX:
        logger.error("key:%s is not a number", key)
        return default
    return timedelta(microseconds=value / 1000)


def get_url_formed_map(source: Mapping[str, str]) -> str:
    """Return the form-encoded query string of the map, sorted by key."""
    return urllib.parse.urlencode(sorted(source.items()))


def get_status_code(response: Any) -> str:
    """Return the response's status code as text, or "NA" without a response."""
    if response is None:
        return "NA"
    code = getattr(response, "status_code", None)
    if code is None:
        code = getattr(response, "status", None)
    return "NA" if code is None else str(int(code))


def deep_copy_map(params: Mapping[str, str] | None) -> dict[str, str]:
    """Return a new dict with the same entries."""
    return dict(params or {})