"""
nhnotifier - Discord webhook delivery.
"""

import logging

import requests

from config import HTTP_TIMEOUT_SECONDS, WEBHOOK_CONTENT_LIMIT
from errors import NetworkError

logger = logging.getLogger("nhnotifier.webhook")


def split_message(content: str, limit: int = WEBHOOK_CONTENT_LIMIT) -> list[str]:
    """Split *content* into chunks of at most *limit* characters.

    Breaks on line boundaries; a single line longer than the limit is cut.
    """
    if len(content) <= limit:
        return [content]

    chunks: list[str] = []
    current = ""
    for line in content.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def post_webhook(webhook_url: str, username: str, content: str) -> None:
    """POST one message to the webhook. Raises NetworkError on failure."""
    try:
        resp = requests.post(
            webhook_url,
            json={"username": username, "content": content},
            headers={
                "Accept": "application/json",
                "Content-type": "application/json",
            },
            timeout=HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        # The webhook URL embeds its token, so it is never logged
        logger.error("Webhook delivery failed: HTTP %s", status)
        raise NetworkError(f"Webhook returned HTTP {status}") from e
    except requests.RequestException as e:
        logger.error("Webhook delivery failed: %s", type(e).__name__)
        raise NetworkError(f"Webhook delivery failed: {type(e).__name__}") from e


def deliver_report(webhook_url: str, username: str, report: str) -> int:
    """Post *report*, split as needed, in order. Returns the number of posts."""
    chunks = split_message(report)
    for chunk in chunks:
        post_webhook(webhook_url, username, chunk)
    logger.info("Report delivered in %d message(s)", len(chunks))
    return len(chunks)
