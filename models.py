"""
nhnotifier - Data records for the /mining/rigs2 response.

Each record is immutable and built through ``from_dict``, which checks the
structure (objects where objects are expected, lists where lists are
expected) and coerces scalar telemetry leniently.
"""

from dataclasses import dataclass

from errors import DeserializationError


# ===========================================================================
# Parsing helpers
# ===========================================================================

def _safe_float(value, default: float = 0.0) -> float:
    """Safely convert a value to float, returning default on failure."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def _safe_int(value, default: int = 0) -> int:
    return int(_safe_float(value, default))


def _safe_str(value, default: str = "") -> str:
    """Return *value* if it is a string, otherwise *default*."""
    return value if isinstance(value, str) else default


def _safe_bool(value) -> bool:
    return value if isinstance(value, bool) else False


def _require_object(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise DeserializationError(
            f"{what}: expected a JSON object, got {type(value).__name__}"
        )
    return value


def _object_list(data: dict, key: str, what: str) -> list:
    """Return ``data[key]`` as a list of objects. Absent or null is empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DeserializationError(
            f"{what}.{key}: expected a list, got {type(value).__name__}"
        )
    return [_require_object(item, f"{what}.{key}[{i}]") for i, item in enumerate(value)]


def _count_map(value) -> dict[str, int]:
    if not isinstance(value, dict):
        return {}
    return {str(k): _safe_int(v) for k, v in value.items()}


# ===========================================================================
# Records
# ===========================================================================

@dataclass(frozen=True)
class EnumValue:
    """An ``{enumName, description}`` pair as returned by the API."""

    enum_name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data) -> "EnumValue":
        if data is None:
            return cls()
        data = _require_object(data, "enum value")
        return cls(
            enum_name=_safe_str(data.get("enumName")),
            description=_safe_str(data.get("description")),
        )


@dataclass(frozen=True)
class Speed:
    algorithm: str
    title: str
    speed: str
    display_suffix: str

    @classmethod
    def from_dict(cls, data: dict) -> "Speed":
        speed = data.get("speed")
        return cls(
            algorithm=_safe_str(data.get("algorithm")),
            title=_safe_str(data.get("title")),
            # The API sends the reading as a decimal string
            speed=speed if isinstance(speed, str) else str(_safe_float(speed)),
            display_suffix=_safe_str(data.get("displaySuffix")),
        )


@dataclass(frozen=True)
class Device:
    id: str
    name: str
    device_type: EnumValue
    status: EnumValue
    temperature: float
    load: float
    revolutions_per_minute: float
    revolutions_per_minute_percentage: float
    power_mode: EnumValue
    power_usage: float
    speeds: tuple[Speed, ...]
    intensity: EnumValue
    nhqm: str

    @property
    def is_disabled(self) -> bool:
        return self.status.enum_name == "DISABLED"

    @classmethod
    def from_dict(cls, data: dict) -> "Device":
        return cls(
            id=_safe_str(data.get("id")),
            name=_safe_str(data.get("name")),
            device_type=EnumValue.from_dict(data.get("deviceType")),
            status=EnumValue.from_dict(data.get("status")),
            temperature=_safe_float(data.get("temperature")),
            load=_safe_float(data.get("load")),
            revolutions_per_minute=_safe_float(data.get("revolutionsPerMinute")),
            revolutions_per_minute_percentage=_safe_float(
                data.get("revolutionsPerMinutePercentage")
            ),
            power_mode=EnumValue.from_dict(data.get("powerMode")),
            power_usage=_safe_float(data.get("powerUsage")),
            speeds=tuple(Speed.from_dict(s) for s in _object_list(data, "speeds", "device")),
            intensity=EnumValue.from_dict(data.get("intensity")),
            nhqm=_safe_str(data.get("nhqm")),
        )


@dataclass(frozen=True)
class MiningStat:
    stats_time: int
    market: str
    algorithm: EnumValue
    unpaid_amount: str
    difficulty: float
    profitability: float
    speed_accepted: float
    speed_rejected_total: float

    @classmethod
    def from_dict(cls, data: dict) -> "MiningStat":
        return cls(
            stats_time=_safe_int(data.get("statsTime")),
            market=_safe_str(data.get("market")),
            algorithm=EnumValue.from_dict(data.get("algorithm")),
            unpaid_amount=_safe_str(data.get("unpaidAmount"), "0"),
            difficulty=_safe_float(data.get("difficulty")),
            profitability=_safe_float(data.get("profitability")),
            speed_accepted=_safe_float(data.get("speedAccepted")),
            speed_rejected_total=_safe_float(data.get("speedRejectedTotal")),
        )


@dataclass(frozen=True)
class MiningRig:
    rig_id: str
    type: str
    name: str
    status_time: int
    join_time: int
    miner_status: str
    group_name: str
    unpaid_amount: str
    software_versions: str
    devices: tuple[Device, ...]
    cpu_mining_enabled: bool
    cpu_exists: bool
    stats: tuple[MiningStat, ...]
    profitability: float
    local_profitability: float
    rig_power_mode: str

    @classmethod
    def from_dict(cls, data: dict) -> "MiningRig":
        return cls(
            rig_id=_safe_str(data.get("rigId")),
            type=_safe_str(data.get("type")),
            name=_safe_str(data.get("name")),
            status_time=_safe_int(data.get("statusTime")),
            join_time=_safe_int(data.get("joinTime")),
            miner_status=_safe_str(data.get("minerStatus")),
            group_name=_safe_str(data.get("groupName")),
            unpaid_amount=_safe_str(data.get("unpaidAmount"), "0"),
            software_versions=_safe_str(data.get("softwareVersions")),
            devices=tuple(Device.from_dict(d) for d in _object_list(data, "devices", "rig")),
            cpu_mining_enabled=_safe_bool(data.get("cpuMiningEnabled")),
            cpu_exists=_safe_bool(data.get("cpuExists")),
            stats=tuple(MiningStat.from_dict(s) for s in _object_list(data, "stats", "rig")),
            profitability=_safe_float(data.get("profitability")),
            local_profitability=_safe_float(data.get("localProfitability")),
            rig_power_mode=_safe_str(data.get("rigPowerMode")),
        )


@dataclass(frozen=True)
class MiningRigGroup:
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> "MiningRigGroup":
        return cls(id=_safe_str(data.get("id")), name=_safe_str(data.get("name")))


@dataclass(frozen=True)
class Pagination:
    size: int
    page: int
    total_page_count: int

    @classmethod
    def from_dict(cls, data) -> "Pagination | None":
        if data is None:
            return None
        data = _require_object(data, "pagination")
        return cls(
            size=_safe_int(data.get("size")),
            page=_safe_int(data.get("page")),
            total_page_count=_safe_int(data.get("totalPageCount")),
        )


@dataclass(frozen=True)
class RigSnapshot:
    """Aggregate counts plus every rig and its devices, in API order."""

    total_rigs: int
    total_devices: int
    total_profitability: float
    total_profitability_local: float
    unpaid_amount: str
    btc_address: str
    next_payout_timestamp: str
    last_payout_timestamp: str
    mining_rig_groups: tuple[MiningRigGroup, ...]
    mining_rigs: tuple[MiningRig, ...]
    rig_nhm_versions: tuple[str, ...]
    miner_statuses: dict[str, int]
    devices_statuses: dict[str, int]
    pagination: Pagination | None

    @classmethod
    def from_dict(cls, data) -> "RigSnapshot":
        data = _require_object(data, "rigs response")
        versions = data.get("rigNhmVersions") or []
        if not isinstance(versions, list):
            raise DeserializationError("rigs response.rigNhmVersions: expected a list")
        return cls(
            total_rigs=_safe_int(data.get("totalRigs")),
            total_devices=_safe_int(data.get("totalDevices")),
            total_profitability=_safe_float(data.get("totalProfitability")),
            total_profitability_local=_safe_float(data.get("totalProfitabilityLocal")),
            unpaid_amount=_safe_str(data.get("unpaidAmount"), "0"),
            btc_address=_safe_str(data.get("btcAddress")),
            next_payout_timestamp=_safe_str(data.get("nextPayoutTimestamp")),
            last_payout_timestamp=_safe_str(data.get("lastPayoutTimestamp")),
            mining_rig_groups=tuple(
                MiningRigGroup.from_dict(g)
                for g in _object_list(data, "miningRigGroups", "rigs response")
            ),
            mining_rigs=tuple(
                MiningRig.from_dict(r)
                for r in _object_list(data, "miningRigs", "rigs response")
            ),
            rig_nhm_versions=tuple(str(v) for v in versions),
            miner_statuses=_count_map(data.get("minerStatuses")),
            devices_statuses=_count_map(data.get("devicesStatuses")),
            pagination=Pagination.from_dict(data.get("pagination")),
        )
