"""
Configuration management for FlightDesk.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


def _parse_timeout(value: str) -> Optional[float]:
    """Parse a finite positive number of seconds, or None if empty/invalid."""
    if not value:
        return None
    try:
        seconds = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(seconds) or seconds <= 0:
        return None
    return seconds


@dataclass(frozen=True)
class DatabaseConfig:
    """Database configuration."""
    url: str = os.getenv(
        'DATABASE_URL',
        'postgresql+psycopg2://postgres@localhost:5432/demo',
    )
    # Table qualifier for the bookings demo database; empty means unqualified
    schema: Optional[str] = os.getenv('DATABASE_SCHEMA', 'bookings') or None

    # Pool limits are the only backpressure on fan-out queries
    pool_size: int = int(os.getenv('DB_POOL_SIZE', '5'))
    max_overflow: int = int(os.getenv('DB_MAX_OVERFLOW', '10'))
    pool_timeout: int = int(os.getenv('DB_POOL_TIMEOUT', '30'))

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith('sqlite')


@dataclass(frozen=True)
class CalculationConfig:
    """Seat calculation fan-out settings."""
    # None = wait for every aircraft task, however long it takes
    timeout_seconds: Optional[float] = _parse_timeout(os.getenv('FANOUT_TIMEOUT_SECONDS', ''))


@dataclass(frozen=True)
class ServerConfig:
    """HTTP listener settings."""
    host: str = os.getenv('HOST', '0.0.0.0')
    port: int = int(os.getenv('PORT', '8080'))


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    calculation: CalculationConfig = field(default_factory=CalculationConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    templates_dir: str = os.getenv('TEMPLATES_DIR', str(PACKAGE_DIR / 'templates'))

    # Flask settings
    secret_key: str = os.getenv('SECRET_KEY', 'dev-key-change-in-prod')
    debug: bool = os.getenv('FLASK_DEBUG', '0') == '1'


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        database=DatabaseConfig(),
        calculation=CalculationConfig(),
        server=ServerConfig(),
    )


# Singleton instance
config = load_config()
