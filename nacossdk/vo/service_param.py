"""Parameters of naming requests."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Optional

from nacossdk.model.service import Instance
from nacossdk.util.params import param_field

SubscribeCallback = Callable[[list[Instance], Optional[BaseException]], None]


@dataclass
class RegisterInstanceParam:
    """An instance to register; weight must be above zero."""

    ip: str = param_field("ip", default="")
    port: int = param_field("port", default=0)
    weight: float = param_field("weight", default=0.0)
    enable: bool = param_field("enabled", default=False)
    healthy: bool = param_field("healthy", default=False)
    metadata: Optional[dict[str, str]] = param_field("metadata", default=None)
    cluster_name: str = param_field("clusterName", default="")
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    ephemeral: bool = param_field("ephemeral", default=False)


@dataclass
class BatchRegisterInstanceParam:
    """Several instances of one service to register together."""

    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    instances: list[RegisterInstanceParam] = dataclasses.field(default_factory=list)


@dataclass
class DeregisterInstanceParam:
    """An instance to remove."""

    ip: str = param_field("ip", default="")
    port: int = param_field("port", default=0)
    cluster: str = param_field("cluster", default="")
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    ephemeral: bool = param_field("ephemeral", default=False)


@dataclass
class UpdateInstanceParam:
    """New values for a registered instance."""

    ip: str = param_field("ip", default="")
    port: int = param_field("port", default=0)
    weight: float = param_field("weight", default=0.0)
    enable: bool = param_field("enabled", default=False)
    healthy: bool = param_field("healthy", default=False)
    metadata: Optional[dict[str, str]] = param_field("metadata", default=None)
    cluster_name: str = param_field("clusterName", default="")
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    ephemeral: bool = param_field("ephemeral", default=False)


@dataclass
class GetServiceParam:
    """A service lookup, optionally limited to clusters."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")


@dataclass
class GetAllServiceInfoParam:
    """A paged listing of service names."""

    name_space: str = param_field("nameSpace", default="")
    group_name: str = param_field("groupName", default="")
    page_no: int = param_field("pageNo", default=0)
    page_size: int = param_field("pageSize", default=0)


@dataclass
class SubscribeParam:
    """A subscription to instance changes of a service."""

    service_name: str = param_field("serviceName", default="")
    clusters: list[str] = param_field("clusters", default_factory=list)
    group_name: str = param_field("groupName", default="")
    subscribe_callback: Optional[SubscribeCallback] = dataclasses.field(
        default=None, compare=False, repr=False
    )


@dataclass
class SelectAllInstancesParam:
    """A query for all instances of a service."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")


@dataclass
class SelectInstancesParam:
    """A query for instances that are healthy, or for those that are not."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")
    healthy_only: bool = param_field("healthyOnly", default=False)


@dataclass
class SelectOneHealthInstanceParam:
    """A query for one healthy instance chosen by weight."""

    clusters: list[str] = param_field("clusters", default_factory=list)
    service_name: str = param_field("serviceName", default="")
    group_name: str = param_field("groupName", default="")