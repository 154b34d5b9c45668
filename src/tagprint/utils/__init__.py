"""tagprint utility modules.

- logging: Human/JSON log formatters and structured records
"""

from tagprint.utils.logging import configure_logging, setup_logging, structured

__all__ = [
    "configure_logging",
    "setup_logging",
    "structured",
]
