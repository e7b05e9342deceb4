"""
Webhook signature verification.

Crypto Pay signs every webhook request with::

    hex(HMAC-SHA256(key=SHA256(api_token), msg=request_body))

and sends the result in the ``X-Crypto-Pay-Signature`` header. The HMAC
covers the exact bytes of the body, so verification should run over the raw
request body whenever it is available. When only a parsed body is at hand it
is re-encoded with ``canonical_json``, which reproduces the signer's
``JSON.stringify`` output byte for byte.
"""
from __future__ import annotations

import hashlib
import hmac
import json
import math
import re
from decimal import Decimal
from typing import Any, Mapping, Union

SIGNATURE_HEADER = "X-Crypto-Pay-Signature"

Key = Union[str, bytes]
Body = Union[bytes, bytearray, str, Mapping[str, Any]]

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def derive_secret(key: Key) -> bytes:
    """Turn an API token into the HMAC key used by the webhook signer.

    A ``str`` token is hashed once with SHA-256. ``bytes`` are taken to be an
    already derived secret and returned unchanged.
    """
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    return hashlib.sha256(key.encode("utf-8")).digest()


def _format_float(value: float) -> str:
    # ECMAScript Number::toString over Python's shortest round-trip digits
    if math.isnan(value) or math.isinf(value):
        return "null"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exp += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exp + k

    if k <= n <= 21:
        out = digits + "0" * (n - k)
    elif 0 < n <= 21:
        out = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        out = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        out = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + out


def _quote(value: str) -> str:
    # Join surrogate pairs, then escape unpaired surrogates as \udxxx
    value = value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    quoted = json.dumps(value, ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", quoted)


def _encode(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Mapping):
        items = (
            f"{_quote(str(k))}:{_encode(v)}"
            for k, v in value.items()
        )
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode(v) for v in value) + "]"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def canonical_json(body: Any) -> bytes:
    """Encode a parsed JSON value exactly like JavaScript's ``JSON.stringify``.

    No whitespace, keys in insertion order, non-ASCII characters kept as is,
    and numbers formatted the ECMAScript way (``1.0`` -> ``1``, ``1e-7``).
    """
    return _encode(body).encode("utf-8")


def _message_bytes(body: Body) -> bytes:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8", "surrogatepass")
    return canonical_json(body)


def compute_signature(key: Key, body: Body) -> str:
    """Compute the lowercase hex signature Crypto Pay would send for ``body``.

    Args:
        key: API token, or a secret already derived with ``derive_secret``
        body: Raw body (``bytes``/``str``, signed as is) or a parsed mapping

    Returns:
        Hex encoded HMAC-SHA256 digest
    """
    return hmac.new(derive_secret(key), _message_bytes(body), hashlib.sha256).hexdigest()


def check_signature(key: Key, signature: Any, body: Body) -> bool:
    """Verify a webhook signature.

    Args:
        key: API token, or a secret already derived with ``derive_secret``
        signature: Value of the ``X-Crypto-Pay-Signature`` header
        body: Raw request body, or the parsed JSON body

    Returns:
        True if the signature matches, False otherwise (never raises on mismatch)
    """
    if not isinstance(signature, str) or not signature:
        return False
    expected = compute_signature(key, body)
    # Compare (timing-safe)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))
