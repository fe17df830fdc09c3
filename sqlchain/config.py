"""Configuration objects for sqlchain."""

import logging
from dataclasses import dataclass
from typing import Optional

__all__ = ("LoggingConfig",)

FORMAT_STYLES = frozenset({"structured", "simple"})


@dataclass(slots=True)
class LoggingConfig:
    """Controls how the ``sqlchain`` logger emits records."""

    level: str = "INFO"
    format_style: str = "structured"
    log_to_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        if not isinstance(logging.getLevelName(self.level), int):
            msg = f"Unknown logging level: {self.level}"
            raise ValueError(msg)
        if self.format_style not in FORMAT_STYLES:
            msg = f"Unsupported format style: {self.format_style}"
            raise ValueError(msg)

    def copy(self) -> "LoggingConfig":
        """Return a copy to avoid sharing mutable state."""

        return LoggingConfig(level=self.level, format_style=self.format_style, log_to_file=self.log_to_file)
