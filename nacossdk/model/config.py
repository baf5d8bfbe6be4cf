"""Configuration records exchanged with the configuration service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _number(value: str) -> int | float:
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return float(value)


@dataclass
class ConfigItem:
    """One configuration entry as listed by the server."""

    id: str = ""
    data_id: str = ""
    group: str = ""
    content: str = ""
    md5: str = ""
    tenant: str = ""
    appname: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConfigItem:
        """Build an item from its JSON object."""
        raw_id = data.get("id")
        return cls(
            id="" if raw_id is None else str(raw_id),
            data_id=data.get("dataId") or "",
            group=data.get("group") or "",
            content=data.get("content") or "",
            md5=data.get("md5") or "",
            tenant=data.get("tenant") or "",
            appname=data.get("appname") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the item."""
        return {
            "id": _number(self.id),
            "dataId": self.data_id,
            "group": self.group,
            "content": self.content,
            "md5": self.md5,
            "tenant": self.tenant,
            "appname": self.appname,
        }


@dataclass
class ConfigPage:
    """One page of a configuration search."""

    total_count: int = 0
    page_number: int = 0
    pages_available: int = 0
    page_items: list[ConfigItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConfigPage:
        """Build a page from its JSON object."""
        return cls(
            total_count=int(data.get("totalCount") or 0),
            page_number=int(data.get("pageNumber") or 0),
            pages_available=int(data.get("pagesAvailable") or 0),
            page_items=[ConfigItem.from_dict(item) for item in data.get("pageItems") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the page."""
        return {
            "totalCount": self.total_count,
            "pageNumber": self.page_number,
            "pagesAvailable": self.pages_available,
            "pageItems": [item.to_dict() for item in self.page_items],
        }


@dataclass
class ConfigListenContext:
    """A configuration key together with the MD5 the client holds."""

    group: str = ""
    md5: str = ""
    data_id: str = ""
    tenant: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object of the context."""
        return {
            "group": self.group,
            "md5": self.md5,
            "dataId": self.data_id,
            "tenant": self.tenant,
        }


@dataclass
class ConfigContext:
    """A configuration key."""

    group: str = ""
    data_id: str = ""
    tenant: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object of the context."""
        return {"group": self.group, "dataId": self.data_id, "tenant": self.tenant}


@dataclass
class ConfigPageResult:
    """A server reply carrying one page of configurations."""

    code: int = 0
    message: str = ""
    data: ConfigPage = field(default_factory=ConfigPage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConfigPageResult:
        """Build a result from its JSON object."""
        return cls(
            code=int(data.get("code") or 0),
            message=data.get("message") or "",
            data=ConfigPage.from_dict(data.get("data") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object of the result."""
        return {"code": self.code, "message": self.message, "data": self.data.to_dict()}