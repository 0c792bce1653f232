"""
Environment-aware configuration builder combining TypedDict + python-decouple
for type-safe configuration management.
"""

from functools import lru_cache
from typing import Optional, Any
from pathlib import Path
from decouple import Config as DecoupleConfig, RepositoryEnv
from decouple import config as env_config

from lazyseq.config.types import LazyseqConfig, LogConfig, ChainConfig
from lazyseq.core.errors import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_FORMAT = "{name} | {message}"


def get_decouple_config(env_file: str = ".env") -> Any:
    """Get decouple config with proper fallbacks"""
    try:
        return DecoupleConfig(RepositoryEnv(env_file))
    except FileNotFoundError:
        # Environment variables only
        return env_config


def build_config(
    config_overrides: Optional[dict[str, Any]] = None,
    env_file: str = ".env"
) -> LazyseqConfig:
    """
    Build type-safe configuration from environment variables and overrides.

    Args:
        config_overrides: Nested values merged over the environment settings
        env_file: Optional .env file read before the process environment

    Returns:
        Complete configuration

    Raises:
        ConfigurationError: If the resulting log level is unknown
    """
    decouple_config = get_decouple_config(env_file)

    log_file = decouple_config("LAZYSEQ_LOG_FILE", default="")

    log_config: LogConfig = {
        "level": decouple_config("LAZYSEQ_LOG_LEVEL", default="WARNING", cast=str.upper),
        "format": decouple_config("LAZYSEQ_LOG_FORMAT", default=DEFAULT_LOG_FORMAT),
        "file": Path(log_file) if log_file else None
    }

    chain_config: ChainConfig = {
        "trace": _read_trace_flag(decouple_config)
    }

    config: LazyseqConfig = {
        "log": log_config,
        "chain": chain_config
    }

    if config_overrides:
        config = _deep_merge_config(config, config_overrides)

    if config["log"]["level"] not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {config['log']['level']!r}, expected one of {', '.join(LOG_LEVELS)}"
        )

    return config


@lru_cache(maxsize=1)
def get_config() -> LazyseqConfig:
    """Configuration built once from the environment and reused"""
    return build_config()


@lru_cache(maxsize=1)
def trace_enabled() -> bool:
    """
    Default for Chain call tracing, read from LAZYSEQ_TRACE_CHAIN alone.

    Kept apart from get_config() so a bad logging setting never stops a
    chain from being built or run.
    """
    return _read_trace_flag(get_decouple_config())


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads it"""
    get_config.cache_clear()
    trace_enabled.cache_clear()


def _read_trace_flag(decouple_config: Any) -> bool:
    return decouple_config("LAZYSEQ_TRACE_CHAIN", default=False, cast=bool)


def _deep_merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge configuration dictionaries"""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge_config(result[key], value)
        else:
            result[key] = value
    return result
