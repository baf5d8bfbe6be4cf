"""Adding RAM credentials and signatures to request parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import MutableMapping

from nacossdk.security.resources import RequestResource
from nacossdk.security.signature import (
    final_signing_key_string_with_default_info,
    sign,
    sign_with_hmac_sha1,
)
from nacossdk.util.common import current_millis

logger = logging.getLogger(__name__)

CONFIG_AK_FIELD = "Spas-AccessKey"
NAMING_AK_FIELD = "ak"
SECURITY_TOKEN_HEADER = "Spas-SecurityToken"
SIGNATURE_VERSION_HEADER = "signatureVersion"
SIGNATURE_VERSION_V4 = "v4"
SERVICE_INFO_SPLITER = "@@"
TIMESTAMP_HEADER = "Timestamp"
SIGNATURE_HEADER = "Spas-Signature"


@dataclass(frozen=True)
class RamContext:
    """The RAM credentials used to sign one request."""

    signature_region_id: str = ""
    access_key: str = ""
    secret_key: str = ""
    security_token: str = ""
    ephemeral_access_key_id: bool = False


def try_signature_with_v4(ram_context: RamContext, params: MutableMapping[str, str]) -> str:
    """Return the key to sign with, switching to a v4 key when a region is set."""
    if not ram_context.signature_region_id:
        return ram_context.secret_key
    key = final_signing_key_string_with_default_info(
        ram_context.secret_key, ram_context.signature_region_id
    )
    params[SIGNATURE_VERSION_HEADER] = SIGNATURE_VERSION_V4
    return key


def _inject_credentials(
    ak_field: str, ram_context: RamContext, params: MutableMapping[str, str]
) -> str:
    params[ak_field] = ram_context.access_key
    if ram_context.ephemeral_access_key_id:
        params[SECURITY_TOKEN_HEADER] = ram_context.security_token
    return try_signature_with_v4(ram_context, params)


class NamingResourceInjector:
    """Signs naming requests."""

    def inject(
        self,
        resource: RequestResource,
        ram_context: RamContext,
        params: MutableMapping[str, str],
    ) -> None:
        """Add the access key, token and signature of the request to params."""
        secret_key = _inject_credentials(NAMING_AK_FIELD, ram_context, params)
        params.update(self._calculate_signature(resource, secret_key))

    def _calculate_signature(self, resource: RequestResource, secret_key: str) -> dict[str, str]:
        sign_data = self._sign_data(self.grouped_service_name(resource))
        return {"signature": sign(sign_data, secret_key), "data": sign_data}

    def grouped_service_name(self, resource: RequestResource) -> str:
        """Return the service name prefixed by its group unless already grouped."""
        if SERVICE_INFO_SPLITER in resource.resource or not resource.group:
            return resource.resource
        return resource.group + SERVICE_INFO_SPLITER + resource.resource

    @staticmethod
    def _sign_data(service_name: str) -> str:
        millis = current_millis()
        if service_name:
            return f"{millis}{SERVICE_INFO_SPLITER}{service_name}"
        return str(millis)


class ConfigResourceInjector:
    """Signs configuration requests."""

    def inject(
        self,
        resource: RequestResource,
        ram_context: RamContext,
        params: MutableMapping[str, str],
    ) -> None:
        """Add the access key, token, timestamp and signature of the request to params."""
        secret_key = _inject_credentials(CONFIG_AK_FIELD, ram_context, params)
        params.update(self.sign_headers(self.resource_name(resource), secret_key))

    def resource_name(self, resource: RequestResource) -> str:
        """Return "namespace+group", or just the group without a namespace."""
        if resource.namespace:
            return resource.namespace + "+" + resource.group
        return resource.group

    def sign_headers(self, resource: str, secret_key: str) -> dict[str, str]:
        """Return the timestamp header and, given a key, the signature header."""
        timestamp = str(current_millis())
        headers = {TIMESTAMP_HEADER: timestamp}
        if secret_key:
            if not resource.strip():
                signature = sign_with_hmac_sha1(timestamp, secret_key)
            else:
                signature = sign_with_hmac_sha1(resource + "+" + timestamp, secret_key)
            headers[SIGNATURE_HEADER] = signature
        return headers