"""Plain records: logging configuration, endpoints, deploy headers and more."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from caspersdk.public_key import PublicKey

_U64_BITS = 64
_U512_BITS = 512


def _unsigned(value: Any, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} does not fit in {bits} unsigned bits")
    return value


def _u512(value: Any) -> int:
    if isinstance(value, str):
        try:
            value = int(value, 10)
        except ValueError as exc:
            raise ValueError(f"invalid decimal amount: {value!r}") from exc
    return _unsigned(value, _U512_BITS, "amount")


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string")
    return value


class Severity(enum.IntEnum):
    """Logging severity levels."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERR = 4
    CRITICAL = 5
    OFF = 6
    N_LEVELS = 7


class Sink(enum.Enum):
    """Where log output goes."""

    CONSOLE = 0
    FILE_ROTATING = 1


@dataclass
class LogConfig:
    log_name: str
    severity: Severity
    sink: Sink


@dataclass(frozen=True)
class Endpoint:
    host: str
    port: str


class NetworkType(enum.Enum):
    MAINNET = 0
    TESTNET = 1


@dataclass
class DeployHeader:
    """Header information of a deploy."""

    account: PublicKey
    timestamp: str
    ttl: str
    gas_price: int
    body_hash: str
    dependencies: list[str] = field(default_factory=list)
    chain_name: str = ""

    def to_json(self) -> dict[str, Any]:
        return {
            "account": self.account.to_json(),
            "timestamp": self.timestamp,
            "ttl": self.ttl,
            "gas_price": self.gas_price,
            "body_hash": self.body_hash,
            "dependencies": list(self.dependencies),
            "chain_name": self.chain_name,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> DeployHeader:
        dependencies = data["dependencies"]
        if not isinstance(dependencies, list):
            raise TypeError("dependencies must be a list")
        return cls(
            account=PublicKey.from_json(data["account"]),
            timestamp=_string(data["timestamp"], "timestamp"),
            ttl=_string(data["ttl"], "ttl"),
            gas_price=_unsigned(data["gas_price"], _U64_BITS, "gas_price"),
            body_hash=_string(data["body_hash"], "body_hash"),
            dependencies=[_string(item, "dependency") for item in dependencies],
            chain_name=_string(data["chain_name"], "chain_name"),
        )


@dataclass
class NextUpgrade:
    """Information about the next protocol upgrade."""

    activation_point: int
    protocol_version: str

    def to_json(self) -> dict[str, Any]:
        return {
            "activation_point": self.activation_point,
            "protocol_version": self.protocol_version,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> NextUpgrade:
        return cls(
            activation_point=_unsigned(data["activation_point"], _U64_BITS, "activation_point"),
            protocol_version=_string(data["protocol_version"], "protocol_version"),
        )


@dataclass
class VestingSchedule:
    """Vesting schedule of a genesis validator."""

    initial_release_timestamp_millis: int
    locked_amounts: list[int] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {
            "initial_release_timestamp_millis": self.initial_release_timestamp_millis,
            "locked_amounts": [str(amount) for amount in self.locked_amounts],
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> VestingSchedule:
        amounts = data["locked_amounts"]
        if not isinstance(amounts, list):
            raise TypeError("locked_amounts must be a list")
        return cls(
            initial_release_timestamp_millis=_unsigned(
                data["initial_release_timestamp_millis"],
                _U64_BITS,
                "initial_release_timestamp_millis",
            ),
            locked_amounts=[_u512(amount) for amount in amounts],
        )