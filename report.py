"""
nhnotifier - Report builder.
Turns a RigSnapshot into Discord-flavoured markdown text.
"""

from datetime import datetime, timedelta, timezone

from config import REPORT_UTC_OFFSET_HOURS
from models import Device, MiningRig, RigSnapshot

REPORT_TZ = timezone(timedelta(hours=REPORT_UTC_OFFSET_HOURS))


# ===========================================================================
# Display helpers
# ===========================================================================

def format_payout_time(timestamp: str, tz: timezone = REPORT_TZ) -> str:
    """Render an ISO payout timestamp in the report timezone."""
    if not timestamp:
        return "N/A"
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    local = dt.astimezone(tz)
    return local.strftime("%Y/%m/%d %H:%M:%S") + f" ({local.strftime('UTC%z')})"


def format_speed(device: Device) -> str:
    """First speed reading, e.g. ``12.34 MH/s``; ``0`` when none is reported."""
    if not device.speeds:
        return "0"
    first = device.speeds[0]
    return f"{first.speed} {first.display_suffix}/s"


def _yes_no(flag: bool) -> str:
    return "true" if flag else "false"


# ===========================================================================
# Sections
# ===========================================================================

def build_header(snapshot: RigSnapshot) -> list[str]:
    return [
        "__**Mining Information**__",
        f"Last payout: {format_payout_time(snapshot.last_payout_timestamp)}",
        f"Next payout: {format_payout_time(snapshot.next_payout_timestamp)}",
        f"Active rigs: {snapshot.total_rigs}",
        f"Active devices: {snapshot.total_devices}",
        f"Unpaid amount: {snapshot.unpaid_amount} BTC",
        f"BTC Address: {snapshot.btc_address}",
    ]


def build_device_section(device: Device) -> list[str]:
    lines = [
        f"**_ID: {device.id}_**",
        f"Type: {device.device_type.description}",
    ]
    if device.is_disabled:
        lines.append(":x: This device is disabled.")
        return lines
    lines += [
        ":white_check_mark: This device is active.",
        f"Status: {device.status.description}",
        f"Temperature: {device.temperature:g}°C",
        f"Speed (hashrate): {format_speed(device)}",
        f"Power: {device.power_usage:g}W",
        f"Mode: {device.intensity.description}",
    ]
    return lines


def build_rig_section(rig: MiningRig) -> list[str]:
    algorithm = rig.stats[0].algorithm.description if rig.stats else ""
    lines = [
        f"**{rig.name} ({rig.rig_id})**",
        f"Miner Status: {rig.miner_status}",
        f"CPU Exists: {_yes_no(rig.cpu_exists)}",
        f"CPU Mining Enabled: {_yes_no(rig.cpu_mining_enabled)}",
        f"Software Versions: {rig.software_versions}",
        f"Unpaid mining reward: {rig.unpaid_amount} BTC",
        f"Algorithm: {algorithm}",
    ]
    for device in rig.devices:
        lines.append("")
        lines += build_device_section(device)
    return lines


def build_report(snapshot: RigSnapshot) -> str:
    """Build the full report: aggregate header, then one section per rig."""
    lines = build_header(snapshot)
    for rig in snapshot.mining_rigs:
        lines.append("")
        lines += build_rig_section(rig)
    return "\n".join(lines)
