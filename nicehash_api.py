"""
nhnotifier - NiceHash private API client.

Single attempt per call: any transport, status or decoding failure is
raised to the caller.
"""

import logging

import requests

from config import (
    HTTP_TIMEOUT_SECONDS,
    NICEHASH_API_HOST,
    RIGS_ENDPOINT,
    USER_AGENT,
    USER_LANG,
)
from errors import NetworkError
from models import RigSnapshot
from signing import Credentials, SigningRequest, serialize_body, serialize_query, sign_request

logger = logging.getLogger("nhnotifier.api")


def build_auth_headers(credentials: Credentials, request: SigningRequest) -> dict[str, str]:
    """Headers identifying and authenticating one signed request."""
    return {
        "X-Time": str(request.timestamp),
        "X-Nonce": request.nonce,
        "X-Organization-Id": credentials.org_id,
        "X-Request-Id": request.nonce,
        "X-User-Agent": USER_AGENT,
        "X-User-Lang": USER_LANG,
        "X-Auth": sign_request(credentials, request),
    }


def signed_request(
    credentials: Credentials,
    method: str,
    endpoint: str,
    query=None,
    body=None,
) -> dict:
    """Send a signed request to the NiceHash API and return the decoded JSON.

    The query string and body go on the wire exactly as they were signed.
    Raises NetworkError on transport failure, timeout, non-2xx status or
    a body that is not JSON.
    """
    request = SigningRequest.now(method, endpoint, query=query, body=body)
    headers = build_auth_headers(credentials, request)

    url = f"{NICEHASH_API_HOST}{endpoint}"
    if query is not None:
        url = f"{url}?{serialize_query(query)}"
    data = None
    if body is not None:
        data = serialize_body(body).encode("utf-8")
        headers["Content-Type"] = "application/json"

    logger.debug("%s %s (request id %s)", request.method.upper(), endpoint, request.nonce)
    try:
        resp = requests.request(
            request.method.upper(),
            url,
            headers=headers,
            data=data,
            timeout=HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        return resp.json()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        logger.error("API request failed (%s %s): HTTP %s", method, endpoint, status)
        raise NetworkError(f"{method} {endpoint} returned HTTP {status}") from e
    except (requests.RequestException, ValueError) as e:
        logger.error("API request failed (%s %s): %s", method, endpoint, e)
        raise NetworkError(f"{method} {endpoint} failed: {e}") from e


def fetch_rig_snapshot(credentials: Credentials) -> RigSnapshot:
    """Fetch rig and device telemetry for the organization."""
    data = signed_request(credentials, "GET", RIGS_ENDPOINT)
    snapshot = RigSnapshot.from_dict(data)
    logger.info(
        "Fetched %d rig(s), %d device(s)",
        len(snapshot.mining_rigs),
        sum(len(r.devices) for r in snapshot.mining_rigs),
    )
    return snapshot
