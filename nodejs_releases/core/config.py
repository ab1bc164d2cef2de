"""Typed configuration loading and access.

The config file is optional. When present it is a TOML document such as:

    [index]
    url = "https://nodejs.org/download/release/index.json"
    timeout = 10.0
    user_agent = "my-tool/1.0"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from nodejs_releases import __version__

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "IndexConfig",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "RELEASE_INDEX_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

RELEASE_INDEX_URL = "https://nodejs.org/download/release/index.json"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"nodejs-releases/{__version__}"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Where and how the release index is fetched."""

    url: str = RELEASE_INDEX_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    index: IndexConfig = field(default_factory=IndexConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        index: StrDict = get_table(data, "index") or {}

        timeout = get_float(index, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"index.timeout must be positive, got {timeout}")

        return cls(
            index=IndexConfig(
                url=get_str(index, "url") or RELEASE_INDEX_URL,
                timeout=timeout or DEFAULT_TIMEOUT,
                user_agent=get_str(index, "user_agent") or DEFAULT_USER_AGENT,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path | None) -> Config:
    """Load config from file, or return the defaults when it can't be read."""
    if path is None:
        return Config()
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
