"""Client TLS settings for connections to the server."""

from __future__ import annotations

import ssl
from dataclasses import dataclass
from pathlib import Path


@dataclass
class TLSClientConfig:
    """An SSL context together with the server name to verify against."""

    context: ssl.SSLContext
    server_name: str = ""
    insecure_skip_verify: bool = False


def _load_root_certs(context: ssl.SSLContext, ca_file: str) -> None:
    pem = Path(ca_file).read_bytes().decode("latin-1")
    try:
        context.load_verify_locations(cadata=pem)
    except (ssl.SSLError, ValueError) as exc:
        raise ValueError("credentials: failed to append certificates") from exc


def new_tls(
    cert_file: str = "",
    key_file: str = "",
    ca_file: str = "",
    server_name_override: str = "",
) -> TLSClientConfig:
    """Build client TLS settings.

    A client certificate is loaded when both cert_file and key_file are given.
    Without a CA file the server certificate is not verified.
    """
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    if cert_file and key_file:
        context.load_cert_chain(cert_file, key_file)
    if not ca_file:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return TLSClientConfig(context=context, insecure_skip_verify=True)
    _load_root_certs(context, ca_file)
    return TLSClientConfig(context=context, server_name=server_name_override)