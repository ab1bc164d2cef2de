"""Core types shared by every layer: results, error codes, config."""

from .config import Config, ConfigError, IndexConfig, load_config, load_config_or_default
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "IndexConfig",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
