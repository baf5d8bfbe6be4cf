"""Service discovery records exchanged with the naming service."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any


class BeatState(enum.IntEnum):
    """Whether a heartbeat task is running or shut down."""

    RUNNING = 0
    SHUTDOWN = 1


@dataclass
class Instance:
    """One registered instance of a service."""

    instance_id: str = ""
    ip: str = ""
    port: int = 0
    weight: float = 0.0
    healthy: bool = False
    enable: bool = False
    ephemeral: bool = False
    cluster_name: str = ""
    service_name: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    instance_heart_beat_interval: int = 0
    ip_delete_timeout: int = 0
    instance_heart_beat_time_out: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Instance:
        """Build an instance from its JSON object."""
        return cls(
            instance_id=data.get("instanceId") or "",
            ip=data.get("ip") or "",
            port=int(data.get("port") or 0),
            weight=float(data.get("weight") or 0.0),
            healthy=bool(data.get("healthy", False)),
            enable=bool(data.get("enabled", False)),
            ephemeral=bool(data.get("ephemeral", False)),
            cluster_name=data.get("clusterName") or "",
            service_name=data.get("serviceName") or "",
            metadata=dict(data.get("metadata") or {}),
            instance_heart_beat_interval=int(data.get("instanceHeartBeatInterval") or 0),
            ip_delete_timeout=int(data.get("ipDeleteTimeout") or 0),
            instance_heart_beat_time_out=int(data.get("instanceHeartBeatTimeOut") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the instance."""
        return {
            "instanceId": self.instance_id,
            "ip": self.ip,
            "port": self.port,
            "weight": self.weight,
            "healthy": self.healthy,
            "enabled": self.enable,
            "ephemeral": self.ephemeral,
            "clusterName": self.cluster_name,
            "serviceName": self.service_name,
            "metadata": dict(self.metadata),
            "instanceHeartBeatInterval": self.instance_heart_beat_interval,
            "ipDeleteTimeout": self.ip_delete_timeout,
            "instanceHeartBeatTimeOut": self.instance_heart_beat_time_out,
        }


@dataclass
class Service:
    """A service with its instances as returned by the server."""

    cache_millis: int = 0
    hosts: list[Instance] = field(default_factory=list)
    checksum: str = ""
    last_ref_time: int = 0
    clusters: str = ""
    name: str = ""
    group_name: str = ""
    valid: bool = False
    all_ips: bool = False
    reach_protection_threshold: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Service:
        """Build a service from its JSON object."""
        return cls(
            cache_millis=int(data.get("cacheMillis") or 0),
            hosts=[Instance.from_dict(host) for host in data.get("hosts") or []],
            checksum=data.get("checksum") or "",
            last_ref_time=int(data.get("lastRefTime") or 0),
            clusters=data.get("clusters") or "",
            name=data.get("name") or "",
            group_name=data.get("groupName") or "",
            valid=bool(data.get("valid", False)),
            all_ips=bool(data.get("allIPs", False)),
            reach_protection_threshold=bool(data.get("reachProtectionThreshold", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the service."""
        return {
            "cacheMillis": self.cache_millis,
            "hosts": [host.to_dict() for host in self.hosts],
            "checksum": self.checksum,
            "lastRefTime": self.last_ref_time,
            "clusters": self.clusters,
            "name": self.name,
            "groupName": self.group_name,
            "valid": self.valid,
            "allIPs": self.all_ips,
            "reachProtectionThreshold": self.reach_protection_threshold,
        }


@dataclass
class ServiceSelector:
    """The selector expression attached to a service."""

    selector: str = ""


@dataclass
class ServiceInfo:
    """Descriptive information about a service."""

    app: str = ""
    group: str = ""
    health_check_mode: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    name: str = ""
    protect_threshold: float = 0.0
    selector: ServiceSelector = field(default_factory=ServiceSelector)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceInfo:
        """Build service information from its JSON object."""
        selector = data.get("selector") or {}
        return cls(
            app=data.get("app") or "",
            group=data.get("group") or "",
            health_check_mode=data.get("healthCheckMode") or "",
            metadata=dict(data.get("metadata") or {}),
            name=data.get("name") or "",
            protect_threshold=float(data.get("protectThreshold") or 0.0),
            selector=ServiceSelector(
                selector=selector.get("selector") or selector.get("Selector") or ""
            ),
        )


@dataclass
class ClusterHealthChecker:
    """The health check type of a cluster."""

    type: str = ""


@dataclass
class Cluster:
    """A cluster of instances within a service."""

    service_name: str = ""
    name: str = ""
    healthy_checker: ClusterHealthChecker = field(default_factory=ClusterHealthChecker)
    default_port: int = 0
    default_check_port: int = 0
    use_ip_port_for_check: bool = False
    metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cluster:
        """Build a cluster from its JSON object."""
        checker = data.get("healthyChecker") or {}
        return cls(
            service_name=data.get("serviceName") or "",
            name=data.get("name") or "",
            healthy_checker=ClusterHealthChecker(type=checker.get("type") or ""),
            default_port=int(data.get("defaultPort") or 0),
            default_check_port=int(data.get("defaultCheckPort") or 0),
            use_ip_port_for_check=bool(data.get("useIpPort4Check", False)),
            metadata=dict(data.get("metadata") or {}),
        )


@dataclass
class ServiceDetail:
    """A service with its clusters."""

    service: ServiceInfo = field(default_factory=ServiceInfo)
    clusters: list[Cluster] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceDetail:
        """Build a service detail from its JSON object."""
        return cls(
            service=ServiceInfo.from_dict(data.get("service") or {}),
            clusters=[Cluster.from_dict(c) for c in data.get("clusters") or []],
        )


@dataclass
class BeatInfo:
    """The heartbeat sent for one instance."""

    ip: str = ""
    port: int = 0
    weight: float = 0.0
    service_name: str = ""
    cluster: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    scheduled: bool = False
    period: timedelta = timedelta(0)
    state: BeatState = BeatState.RUNNING

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the beat; period and state are local only."""
        return {
            "ip": self.ip,
            "port": self.port,
            "weight": self.weight,
            "serviceName": self.service_name,
            "cluster": self.cluster,
            "metadata": dict(self.metadata),
            "scheduled": self.scheduled,
        }


@dataclass
class ExpressionSelector:
    """A selector given by type and expression."""

    type: str = ""
    expression: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object of the selector."""
        return {"type": self.type, "expression": self.expression}


@dataclass
class ServiceList:
    """A count of services and their names."""

    count: int = 0
    doms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceList:
        """Build a service list from its JSON object."""
        return cls(
            count=int(data.get("count") or 0),
            doms=list(data.get("doms") or []),
        )