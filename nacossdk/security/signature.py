"""HMAC signatures and derived v4 signing keys for RAM authentication."""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import datetime, timezone

PREFIX = "aliyun_v4"
CONSTANT = "aliyun_v4_request"
V4_SIGN_DATE_FORMAT = "%Y%m%d"
SIGNATURE_V4_PRODUCE = "mse"


def _hmac(key: bytes, message: bytes, digest) -> bytes:
    return hmac.new(key, message, digest).digest()


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def sign_with_hmac_sha1(text: str, key: str) -> str:
    """Return the base64 HMAC-SHA1 of the text under the key."""
    return _b64(_hmac(key.encode("utf-8"), text.encode("utf-8"), hashlib.sha1))


def sign(data: str, key: str) -> str:
    """Return the base64 HMAC-SHA1 request signature of the data."""
    return sign_with_hmac_sha1(data, key)


def final_signing_key_string(
    secret: str, date: str, region: str, product_code: str
) -> str:
    """Return the base64 v4 signing key derived from secret, date, region and product."""
    key = _hmac((PREFIX + secret).encode("utf-8"), date.encode("utf-8"), hashlib.sha256)
    key = _hmac(key, region.encode("utf-8"), hashlib.sha256)
    key = _hmac(key, product_code.encode("utf-8"), hashlib.sha256)
    key = _hmac(key, CONSTANT.encode("utf-8"), hashlib.sha256)
    return _b64(key)


def final_signing_key_string_with_default_info(secret: str, region: str) -> str:
    """Return the v4 signing key for today's UTC date and the default product."""
    sign_date = datetime.now(timezone.utc).strftime(V4_SIGN_DATE_FORMAT)
    return final_signing_key_string(secret, sign_date, region, SIGNATURE_V4_PRODUCE)