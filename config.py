"""Configuration management for Budgetbook.

Reads configuration from ~/.config/budgetbook.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional
import tomllib
import tomli_w

# 1 USD = rate units of the target currency
DEFAULT_CURRENCY_RATES = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.81"),
    "INR": Decimal("82.5"),
    "JPY": Decimal("150.0"),
}


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    identity_provider: str = "config"
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    default_currency: str = "USD"
    currency_rates: Dict[str, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_CURRENCY_RATES)
    )
    refresh_interval: float = 5.0
    report_group_by: str = "name"
    enable_reset: bool = False

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "budgetbook"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="budgetbook.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "budgetbook.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return _parse_config(data)


def _parse_config(data: dict) -> Config:
    """Build a Config from parsed TOML, with defaults for any missing values.

    Args:
        data: Dictionary loaded from the TOML file.

    Returns:
        Config object.
    """
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "budgetbook"))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "budgetbook.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    identity_config = data.get("identity", {})
    # Empty strings in TOML mean "signed out"
    user_email = identity_config.get("email") or None
    user_name = identity_config.get("name") or None

    currency_config = data.get("currency", {})
    rates = currency_config.get("rates")
    if rates:
        currency_rates = {
            code.upper(): Decimal(str(rate)) for code, rate in rates.items()
        }
    else:
        currency_rates = dict(DEFAULT_CURRENCY_RATES)

    dashboard_config = data.get("dashboard", {})
    report_config = data.get("report", {})

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        identity_provider=identity_config.get("provider", "config"),
        user_email=user_email,
        user_name=user_name,
        default_currency=currency_config.get("default", "USD").upper(),
        currency_rates=currency_rates,
        refresh_interval=float(dashboard_config.get("refresh_interval", 5.0)),
        report_group_by=report_config.get("group_by", "name"),
        enable_reset=data.get("enable_reset", False),
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no decimal type, rates are written as strings
    data = {
        "base_dir": str(config.base_dir),
        "enable_reset": config.enable_reset,
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "identity": {
            "provider": config.identity_provider,
            "email": config.user_email or "",
            "name": config.user_name or "",
        },
        "currency": {
            "default": config.default_currency,
            "rates": {code: str(rate) for code, rate in config.currency_rates.items()},
        },
        "dashboard": {
            "refresh_interval": config.refresh_interval,
        },
        "report": {
            "group_by": config.report_group_by,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
