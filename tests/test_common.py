import ipaddress
import json
import time
import urllib.parse
from datetime import timedelta
from types import SimpleNamespace

from nacossdk.model.service import Instance, Service
from nacossdk.util.common import (
    current_millis,
    deep_copy_map,
    get_duration_with_default,
    get_group_name,
    get_service_cache_key,
    get_status_code,
    get_url_formed_map,
    json_to_service,
    local_ip,
    to_json_string,
)


def test_current_millis_tracks_clock():
    before = int(time.time() * 1000)
    now = current_millis()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_json_to_service_round_trip():
    service = Service(
        name="demo.go",
        group_name="group-a",
        hosts=[Instance(ip="10.0.0.10", port=8848, healthy=True)],
        valid=True,
    )
    parsed = json_to_service(json.dumps(service.to_dict()))
    assert parsed == service


def test_json_to_service_invalid_returns_none():
    assert json_to_service("{not json") is None
    assert json_to_service("[1, 2]") is None


def test_json_to_service_without_hosts():
    parsed = json_to_service('{"name": "demo.go"}')
    assert parsed is not None
    assert parsed.name == "demo.go"
    assert parsed.hosts == []


def test_to_json_string_round_trip():
    instance = Instance(ip="10.0.0.10", port=8848, metadata={"idc": "shanghai"})
    decoded = json.loads(to_json_string(instance))
    assert decoded == instance.to_dict()
    assert json.loads(to_json_string([instance])) == [instance.to_dict()]


def test_to_json_string_of_unencodable_is_empty():
    assert to_json_string(object()) == ""


def test_group_name_and_cache_key():
    assert get_group_name("demo.go", "group-a") == "group-a@@demo.go"
    assert get_service_cache_key("demo.go", "") == "demo.go"
    assert get_service_cache_key("demo.go", "cluster-a") == "demo.go@@cluster-a"


def test_local_ip_is_stable_and_not_loopback():
    first = local_ip()
    assert first == local_ip()
    assert first == "" or not ipaddress.IPv4Address(first).is_loopback


def test_duration_with_default():
    default = timedelta(seconds=1)
    assert get_duration_with_default({}, "k", default) == default
    assert get_duration_with_default({"k": "abc"}, "k", default) == default
    assert get_duration_with_default({"k": "5000000000"}, "k", default) == timedelta(seconds=5)


def test_duration_scales_with_value():
    default = timedelta(0)
    small = get_duration_with_default({"k": "3000000"}, "k", default)
    large = get_duration_with_default({"k": "3000000000"}, "k", default)
    assert large == small * 1000


def test_url_formed_map_round_trip_and_sorted():
    source = {"serviceName": "demo go", "groupName": "a&b", "ip": "10.0.0.10"}
    encoded = get_url_formed_map(source)
    assert dict(urllib.parse.parse_qsl(encoded)) == source
    keys = [pair.split("=")[0] for pair in encoded.split("&")]
    assert keys == sorted(source)


def test_status_code():
    assert get_status_code(None) == "NA"
    assert get_status_code(SimpleNamespace(status_code=404)) == str(404)
    assert get_status_code(SimpleNamespace(status=200)) == str(200)


def test_deep_copy_map_is_independent():
    original = {"a": "1"}
    copied = deep_copy_map(original)
    copied["b"] = "2"
    assert original == {"a": "1"}
    assert deep_copy_map(None) == {}