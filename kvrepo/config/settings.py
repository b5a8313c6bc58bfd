"""
KV-Repo Configuration Settings

Runtime settings read from the environment at import time. The seeded
version key and value are constants of the repository module and are
not configurable here.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Logging and runtime settings."""

    # Logging settings
    DEBUG: bool = os.environ.get("KVREPO_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KVREPO_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# Global settings instance
settings = Settings()
