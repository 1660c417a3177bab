import pytest

import nhnotifier
from errors import ConfigError, NetworkError
from models import RigSnapshot

ENV = {
    "NICEHASH_API_KEY": "key",
    "NICEHASH_API_SECRET": "secret",
    "NICEHASH_ORG_ID": "org",
    "DISCORD_WEBHOOK_URL": "https://discord.test/hook",
}


def test_load_settings_reads_all_four():
    settings = nhnotifier.load_settings(ENV)

    assert settings.credentials.api_key == "key"
    assert settings.credentials.api_secret == "secret"
    assert settings.credentials.org_id == "org"
    assert settings.webhook_url == "https://discord.test/hook"


@pytest.mark.parametrize("missing", sorted(ENV))
def test_load_settings_missing_value_is_fatal(missing):
    env = {k: v for k, v in ENV.items() if k != missing}

    with pytest.raises(ConfigError, match=missing):
        nhnotifier.load_settings(env)


def test_load_settings_empty_value_is_fatal():
    with pytest.raises(ConfigError):
        nhnotifier.load_settings({**ENV, "NICEHASH_ORG_ID": ""})


def test_settings_repr_hides_secrets():
    text = repr(nhnotifier.load_settings(ENV))
    assert "secret" not in text
    assert "discord.test" not in text


def test_run_fetches_then_delivers(monkeypatch, rigs_payload):
    order = []
    snapshot = RigSnapshot.from_dict(rigs_payload)

    def fake_fetch(credentials):
        order.append("fetch")
        return snapshot

    def fake_deliver(url, username, report):
        order.append("deliver")
        assert url == "https://discord.test/hook"
        assert username == "NiceHash QuickMiner"
        assert "worker1" in report
        return 1

    monkeypatch.setattr(nhnotifier, "fetch_rig_snapshot", fake_fetch)
    monkeypatch.setattr(nhnotifier, "deliver_report", fake_deliver)

    nhnotifier.run(nhnotifier.load_settings(ENV))

    assert order == ["fetch", "deliver"]


def test_run_fetch_failure_skips_delivery(monkeypatch):
    delivered = []

    def failing_fetch(credentials):
        raise NetworkError("GET /main/api/v2/mining/rigs2 returned HTTP 500")

    monkeypatch.setattr(nhnotifier, "fetch_rig_snapshot", failing_fetch)
    monkeypatch.setattr(nhnotifier, "deliver_report", lambda *a: delivered.append(a))

    with pytest.raises(NetworkError):
        nhnotifier.run(nhnotifier.load_settings(ENV))
    assert delivered == []


def test_main_reraises_config_error(monkeypatch):
    monkeypatch.setattr(nhnotifier, "setup_logging", lambda: None)
    monkeypatch.setattr(nhnotifier, "load_dotenv", lambda: False)
    for name in ENV:
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ConfigError):
        nhnotifier.main()
