"""Parameters of configuration requests."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Callable, Optional

from nacossdk.util.params import param_field

Listener = Callable[[str, str, str, str], None]


class UsageType(str, enum.Enum):
    """Whether a configuration is used for requests or responses."""

    REQUEST_TYPE = "RequestType"
    RESPONSE_TYPE = "ResponseType"


@dataclass
class ConfigParam:
    """A configuration key, its content and an optional change listener."""

    data_id: str = param_field("dataId", default="")
    group: str = param_field("group", default="")
    content: str = param_field("content", default="")
    tag: str = param_field("tag", default="")
    config_tags: str = param_field("configTags", default="")
    app_name: str = param_field("appName", default="")
    beta_ips: str = param_field("betaIps", default="")
    cas_md5: str = param_field("casMd5", default="")
    type: str = param_field("type", default="")
    src_user: str = param_field("srcUser", default="")
    encrypted_data_key: str = param_field("encryptedDataKey", default="")
    kms_key_id: str = param_field("kmsKeyId", default="")
    usage_type: Optional[UsageType] = param_field("usageType", default=None)
    on_change: Optional[Listener] = dataclasses.field(default=None, compare=False, repr=False)

    def deep_copy(self) -> ConfigParam:
        """Return a new parameter object with the same values."""
        return dataclasses.replace(self)


@dataclass
class SearchConfigParam:
    """A paged configuration search."""

    search: str = param_field("search", default="")
    data_id: str = param_field("dataId", default="")
    group: str = param_field("group", default="")
    tag: str = param_field("tag", default="")
    app_name: str = param_field("appName", default="")
    page_no: int = param_field("pageNo", default=0)
    page_size: int = param_field("pageSize", default=0)