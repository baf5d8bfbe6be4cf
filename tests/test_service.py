from datetime import timedelta

from nacossdk.model.service import (
    BeatInfo,
    BeatState,
    Cluster,
    ExpressionSelector,
    Instance,
    Service,
    ServiceDetail,
    ServiceInfo,
    ServiceList,
)


def _instance_dict():
    return {
        "instanceId": "10.0.0.10#8848#cluster-a#group-a@@demo.go",
        "ip": "10.0.0.10",
        "port": 8848,
        "weight": 10.0,
        "healthy": True,
        "enabled": True,
        "ephemeral": True,
        "clusterName": "cluster-a",
        "serviceName": "group-a@@demo.go",
        "metadata": {"idc": "shanghai"},
        "instanceHeartBeatInterval": 5000,
        "ipDeleteTimeout": 30000,
        "instanceHeartBeatTimeOut": 15000,
    }


def test_instance_from_dict_maps_enabled():
    inst = Instance.from_dict(_instance_dict())
    assert inst.enable is True
    assert inst.ip == "10.0.0.10"
    assert inst.port == 8848
    assert inst.metadata == {"idc": "shanghai"}


def test_instance_round_trip():
    data = _instance_dict()
    assert Instance.from_dict(data).to_dict() == data


def test_service_round_trip_with_hosts():
    data = {
        "cacheMillis": 10000,
        "hosts": [_instance_dict()],
        "checksum": "abc",
        "lastRefTime": 1,
        "clusters": "cluster-a",
        "name": "demo.go",
        "groupName": "group-a",
        "valid": True,
        "allIPs": False,
        "reachProtectionThreshold": False,
    }
    service = Service.from_dict(data)
    assert len(service.hosts) == 1
    assert service.hosts[0].cluster_name == "cluster-a"
    assert service.to_dict() == data


def test_service_empty_defaults():
    service = Service.from_dict({})
    assert service == Service()
    assert service.hosts == []


def test_service_detail_parses_nested():
    data = {
        "service": {
            "app": "app",
            "group": "group-a",
            "healthCheckMode": "client",
            "metadata": {"k": "v"},
            "name": "demo.go",
            "protectThreshold": 0.5,
            "selector": {"selector": "label"},
        },
        "clusters": [
            {
                "serviceName": "demo.go",
                "name": "cluster-a",
                "healthyChecker": {"type": "TCP"},
                "defaultPort": 80,
                "defaultCheckPort": 80,
                "useIpPort4Check": True,
                "metadata": {},
            }
        ],
    }
    detail = ServiceDetail.from_dict(data)
    assert detail.service.protect_threshold == 0.5
    assert detail.service.selector.selector == "label"
    assert detail.clusters[0].healthy_checker.type == "TCP"
    assert detail.clusters[0].use_ip_port_for_check is True


def test_service_info_and_cluster_defaults():
    assert ServiceInfo.from_dict({}) == ServiceInfo()
    assert Cluster.from_dict({}) == Cluster()


def test_beat_info_excludes_local_fields():
    beat = BeatInfo(
        ip="10.0.0.10",
        port=8848,
        weight=1.0,
        service_name="demo.go",
        cluster="DEFAULT",
        period=timedelta(seconds=5),
        state=BeatState.SHUTDOWN,
    )
    data = beat.to_dict()
    assert "period" not in data
    assert "state" not in data
    assert data["serviceName"] == "demo.go"
    assert BeatInfo().state == BeatState.RUNNING


def test_expression_selector_to_dict():
    sel = ExpressionSelector(type="label", expression="CONSUMER.label.a = PROVIDER.label.a")
    assert sel.to_dict() == {
        "type": "label",
        "expression": "CONSUMER.label.a = PROVIDER.label.a",
    }


def test_service_list_from_dict():
    lst = ServiceList.from_dict({"count": 2, "doms": ["a", "b"]})
    assert lst.count == 2
    assert lst.doms == ["a", "b"]
    assert ServiceList.from_dict({}) == ServiceList()