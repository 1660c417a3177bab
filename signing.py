"""
nhnotifier - NiceHash request signing.

Every private API call carries an X-Auth header of the form
``<api key>:<hex HMAC-SHA256>``. The server rebuilds the same NUL-separated
message from the request and compares digests, so the byte layout built
here must not change.
"""

import base64
import hashlib
import hmac
import json
import secrets
import time
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import quote, urlencode

NUL = b"\x00"

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_QUERY_SAFE = "!'()*"


@dataclass(frozen=True)
class Credentials:
    """API key pair and organization id. Loaded once, never logged."""

    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)
    org_id: str


@dataclass(frozen=True)
class SigningRequest:
    """Everything the signature covers for one outbound call."""

    method: str
    endpoint: str
    timestamp: int
    nonce: str
    query: str | Mapping[str, Any] | None = None
    body: Any = None

    @classmethod
    def now(cls, method: str, endpoint: str, query=None, body=None) -> "SigningRequest":
        """Stamp a request with the current time and a fresh nonce."""
        return cls(
            method=method,
            endpoint=endpoint,
            timestamp=current_timestamp_ms(),
            nonce=make_nonce(),
            query=query,
            body=body,
        )


def current_timestamp_ms() -> int:
    """Milliseconds since the epoch, as sent in X-Time."""
    return int(time.time() * 1000)


def make_nonce() -> str:
    """16 random bytes, base64 encoded. Used as X-Nonce and X-Request-Id."""
    return base64.b64encode(secrets.token_bytes(16)).decode("ascii")


def _query_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_query(query: str | Mapping[str, Any]) -> str:
    """Return the query string exactly as it is signed and sent.

    Strings pass through untouched. Mappings keep their key order; list
    values repeat the key.
    """
    if isinstance(query, str):
        return query
    pairs = []
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(v)) for v in value)
        else:
            pairs.append((key, _query_value(value)))
    return urlencode(pairs, quote_via=quote, safe=_QUERY_SAFE)


def serialize_body(body: Any) -> str:
    """Strings pass through; anything else becomes compact JSON."""
    if isinstance(body, str):
        return body
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def canonical_message(
    credentials: Credentials,
    method: str,
    endpoint: str,
    timestamp: int,
    nonce: str,
    query: str | Mapping[str, Any] | None = None,
    body: Any = None,
) -> bytes:
    """Build the exact bytes fed to the HMAC.

    The two empty fields after the nonce and after the org id are reserved
    by the provider and must stay empty.
    """
    head = [
        credentials.api_key,
        str(int(timestamp)),
        nonce,
        "",
        credentials.org_id,
        "",
        method.upper(),
        endpoint,
    ]
    message = NUL.join(part.encode("utf-8") for part in head) + NUL

    # None skips a step entirely; an empty string still feeds it
    if query is not None:
        message += serialize_query(query).encode("utf-8")
    if body is not None:
        message += NUL + serialize_body(body).encode("utf-8")
    return message


def sign(
    credentials: Credentials,
    method: str,
    endpoint: str,
    timestamp: int,
    nonce: str,
    query: str | Mapping[str, Any] | None = None,
    body: Any = None,
) -> str:
    """Return the X-Auth token ``<api key>:<hex digest>``.

    Deterministic for identical inputs; the caller supplies timestamp and
    nonce.
    """
    message = canonical_message(credentials, method, endpoint, timestamp, nonce, query, body)
    digest = hmac.new(
        credentials.api_secret.encode("utf-8"), message, hashlib.sha256
    ).hexdigest()
    return f"{credentials.api_key}:{digest}"


def sign_request(credentials: Credentials, request: SigningRequest) -> str:
    """Sign a prepared :class:`SigningRequest`."""
    return sign(
        credentials,
        request.method,
        request.endpoint,
        request.timestamp,
        request.nonce,
        query=request.query,
        body=request.body,
    )
