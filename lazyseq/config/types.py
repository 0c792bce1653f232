"""
Configuration type definitions using TypedDict for type safety
with python-decouple integration for environment variables.
"""

from typing import TypedDict, Optional, Literal
from pathlib import Path

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

class LogConfig(TypedDict):
    """Logging configuration"""
    level: LogLevel
    format: str
    file: Optional[Path]

class ChainConfig(TypedDict):
    """Chain wrapper configuration"""
    trace: bool                      # Log every chained call at DEBUG

class LazyseqConfig(TypedDict):
    """Main library configuration"""
    log: LogConfig
    chain: ChainConfig
