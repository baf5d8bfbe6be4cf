"""Combining several authentication clients behind one interface."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol

from nacossdk.security.resources import RequestResource

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 5.0


class AuthClient(Protocol):
    """A client that can log in and supply signing parameters."""

    def login(self) -> bool:
        """Log in; raise on failure."""
        ...

    def get_security_info(self, resource: RequestResource) -> Optional[Mapping[str, str]]:
        """Return the parameters to add to a request for the resource."""
        ...

    def update_server_list(self, server_list: Any) -> None:
        """Take note of a new server list."""
        ...


@dataclass
class SecurityProxy:
    """Logs in with every client and merges their signing parameters."""

    clients: list[AuthClient] = field(default_factory=list)

    def login(self) -> None:
        """Log in with every client, logging failures instead of raising them."""
        for client in self.clients:
            try:
                client.login()
            except Exception as exc:
                logger.error("login in err:%r", exc)

    def get_security_info(self, resource: RequestResource) -> dict[str, str]:
        """Return the merged parameters of all clients; later clients win."""
        info: dict[str, str] = {}
        for client in self.clients:
            client_info = client.get_security_info(resource)
            if client_info:
                info.update(client_info)
        return info

    def update_server_list(self, server_list: Any) -> None:
        """Pass a new server list to every client."""
        for client in self.clients:
            client.update_server_list(server_list)

    def auto_refresh(
        self, stop_event: threading.Event, interval: float = DEFAULT_REFRESH_INTERVAL
    ) -> threading.Thread:
        """Log in again every interval seconds until stop_event is set."""

        def run() -> None:
            while not stop_event.wait(interval):
                self.login()

        thread = threading.Thread(target=run, name="security-proxy-refresh", daemon=True)
        thread.start()
        return thread