from typing import Optional


class CrossCloudConfigException(Exception):
    """Raised for configuration that must be rejected before any resource is declared"""

    def __init__(self, key: str, reason: Optional[str] = None):
        self.key = key
        self.reason = reason or "missing required configuration variable"
        super().__init__(f"Invalid configuration variable '{key}': {self.reason}")
