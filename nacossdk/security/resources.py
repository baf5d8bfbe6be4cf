"""Descriptions of the resource a request acts on, used for signing."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class RequestType(str, enum.Enum):
    """Which service a request is sent to."""

    CONFIG = "config"
    NAMING = "naming"


@dataclass(frozen=True)
class RequestResource:
    """The namespace, group and resource name a request refers to."""

    request_type: RequestType
    namespace: str = ""
    group: str = ""
    resource: str = ""


def build_config_resource(tenant: str, group: str, data_id: str) -> RequestResource:
    """Return the resource of a configuration request."""
    return RequestResource(RequestType.CONFIG, tenant, group, data_id)


def build_naming_resource(namespace: str, group: str, service_name: str) -> RequestResource:
    """Return the resource of a naming request."""
    return RequestResource(RequestType.NAMING, namespace, group, service_name)