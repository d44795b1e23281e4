"""Configuration management for ledgerkit."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from ledgerkit.exceptions import ConfigurationError
from ledgerkit.logging import LOG_FORMATS

DEFAULT_MIN_BALANCE = Decimal("100000")


@dataclass
class LedgerConfig:
    """Ledger policy configuration.

    ``min_balance`` is stamped on every account the ledger opens. It only
    acts as the withdrawal floor when ``enforce_min_balance`` is set;
    otherwise the floor is zero.
    """

    min_balance: Decimal = DEFAULT_MIN_BALANCE
    enforce_min_balance: bool = False


@dataclass
class RegistryConfig:
    """Registry behaviour and report layout."""

    reject_duplicate_ids: bool = False
    top_n: int = 3
    report_title: str = "Registry Report"

    def __post_init__(self) -> None:
        if self.top_n < 1:
            raise ConfigurationError(f"top_n must be >= 1, got {self.top_n}")


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class LedgerKitConfig:
    """Main configuration for ledgerkit."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

    @classmethod
    def from_env(cls) -> "LedgerKitConfig":
        """Create config from environment variables."""
        import os

        try:
            ledger = LedgerConfig(
                min_balance=Decimal(os.getenv("LEDGER_MIN_BALANCE", str(DEFAULT_MIN_BALANCE))),
                enforce_min_balance=_env_flag(os.getenv("LEDGER_ENFORCE_MIN_BALANCE", "false")),
            )
            registry = RegistryConfig(
                reject_duplicate_ids=_env_flag(os.getenv("REGISTRY_REJECT_DUPLICATES", "false")),
                top_n=int(os.getenv("REGISTRY_TOP_N", "3")),
                report_title=os.getenv("REPORT_TITLE", "Registry Report"),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except (InvalidOperation, ValueError) as exc:
            raise ConfigurationError(f"Invalid environment configuration: {exc}") from exc

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_flag(os.getenv("PRETTY_JSON", "false")),
        )

        return cls(
            ledger=ledger,
            registry=registry,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )


def _env_flag(value: str) -> bool:
    return value.lower() == "true"
