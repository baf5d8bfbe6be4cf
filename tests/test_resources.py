from nacossdk.security.resources import (
    RequestResource,
    RequestType,
    build_config_resource,
    build_naming_resource,
)


def test_build_config_resource():
    resource = build_config_resource("tenant", "grp", "data")
    assert resource == RequestResource(RequestType.CONFIG, "tenant", "grp", "data")
    assert resource.request_type.value == "config"


def test_build_naming_resource():
    resource = build_naming_resource("ns", "grp", "svc")
    assert resource.request_type.value == "naming"
    assert (resource.namespace, resource.group, resource.resource) == ("ns", "grp", "svc")


def test_bare_resource_has_empty_fields():
    resource = RequestResource(RequestType.NAMING)
    assert (resource.namespace, resource.group, resource.resource) == ("", "", "")
    assert resource != build_naming_resource("ns", "", "")