# nacossdk

Client-side building blocks for talking to a service discovery and
configuration registry: data models, request parameters, UUIDs, request
signing and TLS settings. The package has no third-party dependencies.

## What is inside

- `nacossdk.ids.uuid_value`: an immutable `UUID` value type.
  `UUID.from_string` parses canonical, braced (`{...}`), URN
  (`urn:uuid:...`) and 32-digit hash-like text; `UUID.from_bytes` takes
  exactly 16 bytes. Both raise `UUIDError`; the `*_or_nil` variants return
  the nil UUID instead. `version()`, `variant()`, `with_version()`,
  `with_variant()`, `to_bytes()` and `to_text()` inspect and build values.
  The `Version`, `Variant` and `Domain` enums and the `NIL` and
  `NAMESPACE_DNS` / `NAMESPACE_URL` / `NAMESPACE_OID` / `NAMESPACE_X500`
  constants live here too.
- `nacossdk.ids.generator`: a `Generator` for UUID versions 1 to 5 and the
  module functions `new_v1()` … `new_v5()` backed by a shared generator.
  A generator can be given its own clock, hardware-address lookup and
  random source.
- `nacossdk.ids.sql`: `uuid_db_value`, `scan_uuid` and the `NullUUID`
  dataclass move UUIDs in and out of database column values.
- `nacossdk.model.config` and `nacossdk.model.service`: dataclasses for
  configuration items and pages, and for services, instances, clusters,
  heartbeat info, selectors and service lists, with `from_dict` /
  `to_dict` where the JSON wire format needs them.
- `nacossdk.vo.config_param` and `nacossdk.vo.service_param`: request
  parameters such as `ConfigParam`, `SearchConfigParam`,
  `RegisterInstanceParam`, `DeregisterInstanceParam`, `SubscribeParam` and
  `SelectInstancesParam`.
- `nacossdk.util`: `md5_hex`, `truncate_content`, `param_field` and
  `transform_object_to_param` (dataclass to flat string parameters), a
  counting `Semaphore` usable as a context manager, and in
  `nacossdk.util.common` helpers for cache keys, group names, JSON,
  local IPv4 lookup, duration metadata and URL-encoded forms.
- `nacossdk.security`: HMAC request signing (`sign`,
  `sign_with_hmac_sha1`, `final_signing_key_string` and its
  today's-date variant), `RequestResource` with `build_config_resource` /
  `build_naming_resource`, the `NamingResourceInjector` and
  `ConfigResourceInjector` that add access keys, tokens, timestamps and
  signatures to request parameters, `RamAuthClient`, which signs with the
  first matching `RamCredentialProvider`, and `SecurityProxy`, which merges
  several auth clients and can repeat logins in a background thread.
- `nacossdk.tls`: `new_tls` builds a `TLSClientConfig` (an
  `ssl.SSLContext` plus server name) from certificate, key and CA files.
  Without a CA file the server certificate is not verified.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Examples

Parse and inspect a UUID:

    from nacossdk.ids.uuid_value import UUID, Version

    u = UUID.from_string("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
    assert u.version() == Version.V1
    print(u.to_text())

Generate a name-based UUID:

    from nacossdk.ids.generator import new_v5
    from nacossdk.ids.uuid_value import NAMESPACE_DNS

    print(new_v5(NAMESPACE_DNS, "www.example.com").to_text())
    # 2ed6657d-e927-568b-95e1-2665a8aea6a2

Turn a request parameter into form fields:

    from nacossdk.util.params import transform_object_to_param
    from nacossdk.vo.service_param import RegisterInstanceParam

    param = RegisterInstanceParam(ip="10.0.0.10", port=8848, service_name="demo.go")
    print(transform_object_to_param(param))

Hash configuration content the way the registry does:

    from nacossdk.util.md5 import md5_hex

    assert md5_hex("demo") == "fe01ce2a7fbac8fafaed7c982a04e229"

Sign a naming request:

    from nacossdk.security.injector import RamContext, NamingResourceInjector
    from nacossdk.security.resources import build_naming_resource

    context = RamContext(access_key="placeholder", secret_key="secret")
    params = {}
    NamingResourceInjector().inject(
        build_naming_resource("public", "DEFAULT_GROUP", "demo.go"), context, params
    )
    print(params["signature"], params["data"])

## What this package does not do

There is no configuration client or naming client here: nothing connects
to a registry server, publishes or fetches configurations, registers
instances, sends heartbeats or pushes change notifications. The models,
parameters, signing and TLS settings are the pieces such a client would
use. `RamAuthClient` ships no credential providers of its own; pass it
objects that follow the `RamCredentialProvider` protocol. There is no
command-line program.