"""Configuration management for fractional-estate."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fractional_estate.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class LedgerConfig:
    """Behavioral switches for the ledger core."""

    # Require MANAGER or ADMIN to register properties
    restrict_registration: bool = False
    # Drop a listing whose seller can no longer cover it when a purchase fails
    purge_stale_listings: bool = False
    event_source: str = "fractional-estate"
    # Keep only this many events in the journal history; None keeps all
    history_limit: int | None = None


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Event export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False
    topic_prefix: str = "dev.estate"


@dataclass
class SimulationConfig:
    """Configuration for a market-activity simulation run."""

    num_properties: int = 5
    num_investors: int = 20
    num_rounds: int = 200
    locale: str = "en_US"


@dataclass
class FractionalEstateConfig:
    """Main configuration for fractional-estate."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FractionalEstateConfig":
        """Create config from environment variables."""
        history_limit = os.getenv("LEDGER_HISTORY_LIMIT")
        ledger = LedgerConfig(
            restrict_registration=_env_bool("LEDGER_RESTRICT_REGISTRATION", False),
            purge_stale_listings=_env_bool("LEDGER_PURGE_STALE_LISTINGS", False),
            event_source=os.getenv("LEDGER_EVENT_SOURCE", "fractional-estate"),
            history_limit=_parse_int("LEDGER_HISTORY_LIMIT", history_limit) if history_limit else None,
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_bool("PRETTY_JSON", False),
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.estate"),
        )

        simulation = SimulationConfig(
            num_properties=_env_int("SIM_PROPERTIES", 5),
            num_investors=_env_int("SIM_INVESTORS", 20),
            num_rounds=_env_int("SIM_ROUNDS", 200),
            locale=os.getenv("SIM_LOCALE", "en_US"),
        )

        seed = os.getenv("SEED")

        return cls(
            ledger=ledger,
            kafka=kafka,
            output=output,
            simulation=simulation,
            seed=_parse_int("SEED", seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    return _parse_int(name, raw)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
