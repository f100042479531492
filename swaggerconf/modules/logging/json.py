import sys
from typing import Any, Dict
from .base import BaseLogger


class JsonLogger(BaseLogger):
    """Logger that outputs JSON for machine parsing."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for JSON output
        self.logger.configure(
            handlers=[{
                "sink": sys.stderr,
                "serialize": True,  # JSON output
                "format": "{time} | {level} | {message}",
                "level": log_level
            }]
        )
    
    def log_section(self, title: str):
        self.logger.info("", extra={
            "type": "section",
            "title": title
        })

    def log_descriptor(self, name: str, payload: Dict[str, Any]):
        self.logger.debug("", extra={
            "type": "descriptor",
            "name": name,
            "payload": payload
        })

    def log_error(self, message: str):
        self.logger.error("", extra={
            "type": "error",
            "message": message
        })

    def log_warning(self, message: str):
        self.logger.warning("", extra={
            "type": "warning",
            "message": message
        })

    def log_info(self, message: str):
        self.logger.info("", extra={
            "type": "info",
            "message": message
        })

    def log_debug(self, message: str):
        self.logger.debug("", extra={
            "type": "debug",
            "message": message
        })
