from typing import Any, Dict, List
from swaggerconf.modules.logging.base import BaseLogger


class _TestLogger(BaseLogger):
    """Test logger that captures all logs."""
    def __init__(self):
        self.logs: List[str] = []
    
    def log_section(self, title: str) -> None:
        self.logs.append(f"SECTION: {title}")
    
    def log_descriptor(self, name: str, payload: Dict[str, Any]) -> None:
        self.logs.append(f"DESCRIPTOR {name}: {payload}")
    
    def log_error(self, message: str) -> None:
        self.logs.append(f"ERROR: {message}")
    
    def log_warning(self, message: str) -> None:
        self.logs.append(f"WARNING: {message}")
    
    def log_info(self, message: str) -> None:
        self.logs.append(f"INFO: {message}")
    
    def log_debug(self, message: str) -> None:
        self.logs.append(f"DEBUG: {message}")
    
    def get_logs(self) -> List[str]:
        """Get all captured logs."""
        return self.logs


def create_test_logger() -> _TestLogger:
    """Create a test logger instance."""
    return _TestLogger()
