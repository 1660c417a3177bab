"""
nhnotifier Configuration.
Edit these values according to your setup.

Note: NICEHASH_API_KEY, NICEHASH_API_SECRET, NICEHASH_ORG_ID and
DISCORD_WEBHOOK_URL are stored in the .env file, not here.
See .env.example for the template.
"""

# ===========================================================================
# APPLICATION
# ===========================================================================

APP_NAME = "nhnotifier"
APP_VERSION = "1.0.1"

# ===========================================================================
# NICEHASH API
# ===========================================================================

# NiceHash API base URL (production). Use https://api-test.nicehash.com for
# the test environment; keys are not shared between the two.
NICEHASH_API_HOST = "https://api2.nicehash.com"

# Rig and device telemetry for the organization
RIGS_ENDPOINT = "/main/api/v2/mining/rigs2"

# Sent as X-User-Agent on every signed request
USER_AGENT = f"{APP_NAME}/{APP_VERSION} (+https://github.com/iamtakagi/nhnotifier)"

# Sent as X-User-Lang. Affects the language of enum descriptions returned
# by the API (device status, intensity, ...).
USER_LANG = "ja"

# Seconds before an API or webhook request is abandoned
HTTP_TIMEOUT_SECONDS = 15

# ===========================================================================
# WEBHOOK
# ===========================================================================

# Name shown as the author of the posted message
DISCORD_WEBHOOK_USERNAME = "NiceHash QuickMiner"

# Discord rejects messages whose content is longer than 2000 characters.
# Longer reports are split on line boundaries and posted in order.
WEBHOOK_CONTENT_LIMIT = 2000

# ===========================================================================
# REPORT
# ===========================================================================

# Payout timestamps are shown in this fixed UTC offset (9 = JST).
REPORT_UTC_OFFSET_HOURS = 9

# ===========================================================================
# LOGGING
# ===========================================================================

# Log level for the notifier. Valid values: "DEBUG", "INFO", "WARNING", "ERROR".
# - DEBUG:   Everything, including request shapes (never credentials)
# - INFO:    Normal operations + warnings + errors
# - WARNING: Only important events and errors (default, recommended)
# - ERROR:   Only errors
LOG_LEVEL = "WARNING"
