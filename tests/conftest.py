import pytest


@pytest.fixture
def rigs_payload():
    """A trimmed /main/api/v2/mining/rigs2 response with one rig, two devices."""
    return {
        "minerStatuses": {"MINING": 1},
        "rigTypes": {"MANAGED": 1},
        "totalRigs": 1,
        "totalProfitability": 0.00001234,
        "groupPowerMode": "MIXED",
        "totalDevices": 2,
        "devicesStatuses": {"MINING": 1, "DISABLED": 1},
        "unpaidAmount": "0.00004321",
        "path": "",
        "btcAddress": "3Abc",
        "nextPayoutTimestamp": "2023-11-15T00:00:00Z",
        "lastPayoutTimestamp": "2023-11-14T20:00:00Z",
        "miningRigGroups": [],
        "miningRigs": [
            {
                "rigId": "0-abc",
                "type": "MANAGED",
                "name": "worker1",
                "statusTime": 1700000000000,
                "joinTime": 1690000000,
                "minerStatus": "MINING",
                "groupName": "",
                "unpaidAmount": "0.00004321",
                "softwareVersions": "NHQM_v0.6.2.0",
                "devices": [
                    {
                        "id": "gpu-0",
                        "name": "GeForce RTX 3070",
                        "deviceType": {"enumName": "NVIDIA", "description": "Nvidia"},
                        "status": {"enumName": "MINING", "description": "Mining"},
                        "temperature": 61,
                        "load": 100,
                        "revolutionsPerMinute": 1800,
                        "revolutionsPerMinutePercentage": 55,
                        "powerMode": {"enumName": "MEDIUM", "description": "Medium"},
                        "powerUsage": 120.5,
                        "speeds": [
                            {
                                "algorithm": "DAGGERHASHIMOTO",
                                "title": "DaggerHashimoto",
                                "speed": "61.23",
                                "displaySuffix": "MH",
                            }
                        ],
                        "intensity": {"enumName": "LOW", "description": "Low power mode"},
                        "nhqm": "",
                    },
                    {
                        "id": "cpu-0",
                        "name": "Ryzen",
                        "deviceType": {"enumName": "CPU", "description": "CPU"},
                        "status": {"enumName": "DISABLED", "description": "Disabled"},
                        "temperature": 44,
                        "load": 0,
                        "revolutionsPerMinute": 0,
                        "revolutionsPerMinutePercentage": 0,
                        "powerMode": {"enumName": "UNKNOWN", "description": "Unknown"},
                        "powerUsage": 15,
                        "speeds": [],
                        "intensity": {"enumName": "LOW", "description": "Low power mode"},
                        "nhqm": "",
                    },
                ],
                "cpuMiningEnabled": False,
                "cpuExists": True,
                "stats": [
                    {
                        "statsTime": 1700000000000,
                        "market": "EU",
                        "algorithm": {"enumName": "DAGGERHASHIMOTO", "description": "DaggerHashimoto"},
                        "unpaidAmount": "0.00004321",
                        "difficulty": 4.0,
                        "proxyId": 0,
                        "timeConnected": 1700000000000,
                        "xnsub": False,
                        "speedAccepted": 61.2,
                        "speedRejectedTotal": 0,
                        "profitability": 0.00001234,
                    }
                ],
                "profitability": 0.00001234,
                "localProfitability": 0,
                "rigPowerMode": "LOW",
            }
        ],
        "rigNhmVersions": ["NHQM_v0.6.2.0"],
        "externalAddress": False,
        "totalProfitabilityLocal": 0,
        "pagination": {"size": 25, "page": 0, "totalPageCount": 1},
    }


@pytest.fixture
def empty_payload(rigs_payload):
    payload = dict(rigs_payload)
    payload.update(totalRigs=0, totalDevices=0, miningRigs=[])
    return payload
