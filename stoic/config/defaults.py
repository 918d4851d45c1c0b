"""Default configuration parameters for the sanitizer."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SanitizerParams:
    """Sanitizer behaviour parameters."""
    failure_name_prefix: str = "Stoic"               # Marks sanitized failure names
    max_depth: Optional[int] = None                  # None = interpreter recursion limit
    log_cycles: bool = True                          # Warn on omitted references
    include_trace: bool = True                       # Copy formatted tracebacks


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    sanitizer: SanitizerParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        sanitizer=SanitizerParams(),
        logging=LoggingParams(),
    )
