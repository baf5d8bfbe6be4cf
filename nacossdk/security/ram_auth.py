"""Authentication with RAM credentials taken from the first matching provider."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

from nacossdk.security.injector import (
    ConfigResourceInjector,
    NamingResourceInjector,
    RamContext,
)
from nacossdk.security.resources import RequestResource, RequestType


class RamCredentialProvider(Protocol):
    """A source of RAM credentials."""

    def match_provider(self) -> bool:
        """Return whether this provider can supply credentials."""
        ...

    def init(self) -> None:
        """Prepare the provider; raise if that fails."""
        ...

    def get_credentials_for_nacos_client(self) -> RamContext:
        """Return the current credentials."""
        ...


class RamAuthClient:
    """Signs requests with credentials from the first provider that matches."""

    def __init__(
        self,
        providers: Iterable[RamCredentialProvider] = (),
        client_config: Any = None,
    ) -> None:
        self.client_config = client_config
        self.server_list: list[Any] = []
        self._providers = list(providers)
        self._injectors = {
            RequestType.NAMING: NamingResourceInjector(),
            RequestType.CONFIG: ConfigResourceInjector(),
        }
        self._matched: Optional[RamCredentialProvider] = None

    def login(self) -> bool:
        """Pick a matching provider and initialise it.

        Returns False when no provider matches; errors from initialisation propagate.
        """
        for provider in self._providers:
            if provider.match_provider():
                self._matched = provider
                break
        if self._matched is None:
            return False
        self._matched.init()
        return True

    def get_security_info(self, resource: RequestResource) -> dict[str, str]:
        """Return the signing parameters for the resource, empty before a login."""
        info: dict[str, str] = {}
        if self._matched is None:
            return info
        ram_context = self._matched.get_credentials_for_nacos_client()
        self._injectors[resource.request_type].inject(resource, ram_context, info)
        return info

    def update_server_list(self, server_list: Any) -> None:
        """Record the server list; signing does not depend on it."""
        self.server_list = list(server_list or ())