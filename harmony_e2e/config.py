"""
E2E Configuration

Settings for the browser suite, read from environment variables with an
optional YAML file underneath them.

Precedence (lowest to highest):
    1. Built-in defaults
    2. YAML file named by HARMONY_CONFIG_FILE
    3. HARMONY_* environment variables

Usage:
    from harmony_e2e.config import E2EConfig

    settings = E2EConfig.load()
    page.goto(settings.base_url)
"""
import logging
import os
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent

URL_PATTERN = r"^https?://[^\s/]+"


@dataclass
class EnvVar:
    """Environment variable definition with validation."""

    name: str
    key: str  # Settings attribute / YAML key
    default: Any = None
    var_type: str = "str"  # str, int, bool, path
    min_value: Optional[int] = None
    pattern: Optional[str] = None

    def parse(self, value: Any) -> Any:
        """Parse a raw env or YAML value to the target type."""
        if value is None:
            return None

        if self.var_type == "int":
            if isinstance(value, bool):
                raise ConfigError(f"{self.name}: '{value}' is not a valid integer")
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ConfigError(f"{self.name}: '{value}' is not a valid integer")
        elif self.var_type == "bool":
            if isinstance(value, bool):
                return value
            return str(value).lower() in ("true", "1", "yes", "on")
        elif self.var_type == "path":
            path = Path(str(value))
            if not path.is_absolute():
                path = BASE_DIR / path
            return path
        return str(value)

    def validate(self, value: Any) -> None:
        """Raise ConfigError if the parsed value is out of bounds."""
        if self.min_value is not None and value < self.min_value:
            raise ConfigError(f"{self.name}: value {value} is below minimum {self.min_value}")
        if self.pattern and not re.match(self.pattern, value):
            raise ConfigError(f"{self.name}: '{value}' does not match required pattern")


ENV_VARS = [
    EnvVar("HARMONY_BASE_URL", "base_url", "http://localhost:8080", pattern=URL_PATTERN),
    EnvVar("HARMONY_TZ", "timezone", "UTC"),
    EnvVar("HARMONY_DEFAULT_TIMEOUT", "default_timeout", 10000, "int", min_value=1),
    EnvVar("HARMONY_NAVIGATION_TIMEOUT", "navigation_timeout", 30000, "int", min_value=1),
    EnvVar("HARMONY_HEADLESS", "headless", True, "bool"),
    EnvVar("HARMONY_SLOW_MO", "slow_mo", 0, "int", min_value=0),
    EnvVar("HARMONY_RECORD_VIDEO", "record_video", False, "bool"),
    EnvVar("HARMONY_SCREENSHOT_ON_FAILURE", "screenshot_on_failure", True, "bool"),
    EnvVar("HARMONY_ARTIFACTS_DIR", "artifacts_dir", BASE_DIR / "artifacts", "path"),
]


@dataclass(frozen=True)
class E2EConfig:
    """Resolved suite settings. Timeouts are in milliseconds."""

    base_url: str = "http://localhost:8080"
    timezone: str = "UTC"
    default_timeout: int = 10000
    navigation_timeout: int = 30000
    headless: bool = True
    slow_mo: int = 0
    record_video: bool = False
    screenshot_on_failure: bool = True
    artifacts_dir: Path = field(default_factory=lambda: BASE_DIR / "artifacts")

    # Viewport is fixed; the app's layout breakpoints assume desktop width
    viewport_width: int = 1280
    viewport_height: int = 720

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> "E2EConfig":
        """Build settings from defaults, optional YAML, then environment."""
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        config_file = env.get("HARMONY_CONFIG_FILE")
        file_values = _load_yaml(Path(config_file)) if config_file else {}

        for var in ENV_VARS:
            if var.name in env:
                raw = env[var.name]
            elif var.key in file_values:
                raw = file_values[var.key]
            else:
                values[var.key] = var.default
                continue
            parsed = var.parse(raw)
            var.validate(parsed)
            values[var.key] = parsed

        values["base_url"] = values["base_url"].rstrip("/")
        _validate_timezone(values["timezone"])

        config = cls(**values)
        logger.debug("Loaded E2E config: %s", config.to_dict())
        return config

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def url(self, path: str = "") -> str:
        """Absolute URL for an app path."""
        return f"{self.base_url}{path}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["artifacts_dir"] = str(self.artifacts_dir)
        return data


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    # Allow an optional top-level "e2e:" section
    section = data.get("e2e", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Config file {path}: 'e2e' must be a mapping")
    return section


def _validate_timezone(name: str) -> None:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigError(f"HARMONY_TZ: unknown timezone '{name}'")
