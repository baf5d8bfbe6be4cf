"""Turning request dataclasses into flat string parameter maps."""

from __future__ import annotations

import dataclasses
import enum
import json
import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

logger = logging.getLogger(__name__)

_PARAM_KEY = "param"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def param_field(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field that is sent under the given parameter name."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_PARAM_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _marshal_map(value: Mapping) -> str:
    text = json.dumps(dict(value), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _format_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        text = value.value if isinstance(value, enum.Enum) else value
        return text or None
    if isinstance(value, Mapping):
        try:
            return _marshal_map(value)
        except (TypeError, ValueError) as exc:
            logger.error("[transform_object_to_param] json marshal err:%r", exc)
            return None
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        joined = ",".join(value)
        return joined or None
    return None


def transform_object_to_param(obj: Any) -> dict[str, str]:
    """Return the parameter map of a dataclass instance.

    Only fields declared with param_field are taken. Empty strings, None,
    empty string lists and values of other kinds are left out.
    """
    params: dict[str, str] = {}
    if obj is None:
        return params
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    for f in dataclasses.fields(obj):
        name = f.metadata.get(_PARAM_KEY)
        if not name or name == "-":
            continue
        text = _format_value(getattr(obj, f.name))
        if text is not None:
            params[name] = text
    return params