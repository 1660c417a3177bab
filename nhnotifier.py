#!/usr/bin/env python3
"""
nhnotifier - NiceHash rig report for Discord.
Fetches rig and device telemetry from the NiceHash API and posts a
summary to a Discord webhook. Designed to run periodically via cron.
"""

import logging
import os
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv

from config import DISCORD_WEBHOOK_USERNAME, LOG_LEVEL
from errors import ConfigError, NotifierError
from nicehash_api import fetch_rig_snapshot
from report import build_report
from signing import Credentials
from webhook import deliver_report

# Paths
SCRIPT_DIR = Path(__file__).parent
LOGS_DIR = SCRIPT_DIR / "Logs"
LOG_FILE = LOGS_DIR / "nhnotifier.log"

REQUIRED_SETTINGS = (
    "NICEHASH_API_KEY",
    "NICEHASH_API_SECRET",
    "NICEHASH_ORG_ID",
    "DISCORD_WEBHOOK_URL",
)

logger = logging.getLogger("nhnotifier")


@dataclass(frozen=True)
class Settings:
    credentials: Credentials
    webhook_url: str = field(repr=False)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def setup_logging() -> None:
    """Attach the rotating file handler to the ``nhnotifier`` logger once."""
    if logger.handlers:
        return
    LOGS_DIR.mkdir(exist_ok=True)
    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.WARNING))

    handler = RotatingFileHandler(
        str(LOG_FILE), maxBytes=1_000_000, backupCount=2, encoding="utf-8"
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
def load_settings(environ=None) -> Settings:
    """Read the four required settings. Raises ConfigError naming the first gap."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    for name in REQUIRED_SETTINGS:
        if not environ.get(name):
            raise ConfigError(f"{name} is not set")

    return Settings(
        credentials=Credentials(
            api_key=environ["NICEHASH_API_KEY"],
            api_secret=environ["NICEHASH_API_SECRET"],
            org_id=environ["NICEHASH_ORG_ID"],
        ),
        webhook_url=environ["DISCORD_WEBHOOK_URL"],
    )


# ===========================================================================
# Main
# ===========================================================================

def run(settings: Settings) -> None:
    """Fetch, format and deliver one report."""
    snapshot = fetch_rig_snapshot(settings.credentials)
    report = build_report(snapshot)
    deliver_report(settings.webhook_url, DISCORD_WEBHOOK_USERNAME, report)


def main() -> None:
    """Main entry point. Any failure is logged and re-raised."""
    setup_logging()
    try:
        settings = load_settings()
        run(settings)
    except NotifierError as e:
        logger.error("Run failed: %s: %s", type(e).__name__, e)
        raise


if __name__ == "__main__":
    main()
