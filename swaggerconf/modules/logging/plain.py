import json
import sys
from typing import Any, Dict
from .base import BaseLogger


class PlainLogger(BaseLogger):
    """Logger that outputs plain text, suitable for CI/file output."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for plain output
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "format": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
                "colorize": False,
                "level": log_level
            }]
        )
    
    def log_section(self, title: str):
        self.logger.info(f"== {title}")

    def log_descriptor(self, name: str, payload: Dict[str, Any]):
        self.logger.debug(f"{name}:")
        for key, value in payload.items():
            rendered = value if isinstance(value, str) else json.dumps(value, default=str)
            self.logger.debug(f"  {key}: {rendered}")

    def log_error(self, message: str):
        self.logger.error(message)

    def log_warning(self, message: str):
        self.logger.warning(message)

    def log_info(self, message: str):
        self.logger.info(message)

    def log_debug(self, message: str):
        self.logger.debug(message)
