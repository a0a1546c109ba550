import pytest

from caspersdk.public_key import PublicKey
from caspersdk.records import (
    DeployHeader,
    Endpoint,
    LogConfig,
    NetworkType,
    NextUpgrade,
    Severity,
    Sink,
    VestingSchedule,
)

ACCOUNT_HEX = "01027c04a0210afdf4a83328d57e8c2a12247a86d872fb53367f22a84b1b53d2a9"


def _header():
    return DeployHeader(
        account=PublicKey.from_hex_string(ACCOUNT_HEX),
        timestamp="2021-01-01T00:00:00.000Z",
        ttl="30m",
        gas_price=1,
        body_hash="aa" * 32,
        dependencies=["bb" * 32],
        chain_name="casper-test",
    )


def test_log_config_severity_follows_declaration_order():
    config = LogConfig("trace-log", Severity(0), Sink.CONSOLE)
    assert config.severity is Severity.TRACE
    assert config.severity < Severity.OFF
    assert int(Severity.OFF) == 6


def test_log_config_and_endpoint_fields():
    config = LogConfig("node", Severity.INFO, Sink.FILE_ROTATING)
    assert config.severity is Severity.INFO
    assert config.sink is Sink.FILE_ROTATING
    endpoint = Endpoint("localhost", "7777")
    assert endpoint == Endpoint("localhost", "7777")
    assert NetworkType.MAINNET != NetworkType.TESTNET


def test_deploy_header_to_json_keys_and_values():
    data = _header().to_json()
    assert list(data) == [
        "account",
        "timestamp",
        "ttl",
        "gas_price",
        "body_hash",
        "dependencies",
        "chain_name",
    ]
    assert data["account"].lower() == ACCOUNT_HEX
    assert data["gas_price"] == 1
    assert data["chain_name"] == "casper-test"


def test_deploy_header_round_trip():
    header = _header()
    assert DeployHeader.from_json(header.to_json()) == header


def test_deploy_header_missing_key():
    data = _header().to_json()
    del data["ttl"]
    with pytest.raises(KeyError):
        DeployHeader.from_json(data)


def test_deploy_header_negative_gas_price():
    data = _header().to_json()
    data["gas_price"] = -1
    with pytest.raises(ValueError):
        DeployHeader.from_json(data)


def test_next_upgrade_round_trip():
    upgrade = NextUpgrade(activation_point=100, protocol_version="1.5.0")
    data = upgrade.to_json()
    assert data == {"activation_point": 100, "protocol_version": "1.5.0"}
    assert NextUpgrade.from_json(data) == upgrade


def test_next_upgrade_wrong_type():
    with pytest.raises(TypeError):
        NextUpgrade.from_json({"activation_point": "soon", "protocol_version": "1.5.0"})


def test_vesting_schedule_amounts_are_decimal_strings():
    amounts = [10, 2**500]
    schedule = VestingSchedule(1600000000000, amounts)
    data = schedule.to_json()
    assert data["locked_amounts"] == [str(amount) for amount in amounts]
    assert data["initial_release_timestamp_millis"] == 1600000000000
    assert VestingSchedule.from_json(data) == schedule


def test_vesting_schedule_accepts_integers():
    schedule = VestingSchedule.from_json(
        {"initial_release_timestamp_millis": 5, "locked_amounts": [7, "8"]}
    )
    assert schedule.locked_amounts == [7, 8]


def test_vesting_schedule_rejects_oversized_amount():
    with pytest.raises(ValueError):
        VestingSchedule.from_json(
            {"initial_release_timestamp_millis": 5, "locked_amounts": [str(2**512)]}
        )


def test_vesting_schedule_rejects_bad_decimal():
    with pytest.raises(ValueError):
        VestingSchedule.from_json(
            {"initial_release_timestamp_millis": 5, "locked_amounts": ["12x"]}
        )