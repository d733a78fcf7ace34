"""
Configuration management for archhint.

Loads settings from environment variables and provides configuration objects.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from archhint.schema.loader import BUNDLED_SCHEMA

WORKSPACE_SCHEMA_NAME = "metadata.yaml"


@dataclass
class Config:
    """archhint configuration."""

    schema_path: Path = BUNDLED_SCHEMA
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    log_json: bool = False
    enable_logging: bool = False

    def __init__(self, workspace: Optional[str] = None):
        """
        Initialize config from environment variables.

        Args:
            workspace: Optional workspace root; a metadata.yaml found there is
                preferred over the bundled schema when no explicit path is set
        """
        self.schema_path = resolve_schema_path(os.getenv("ARCHHINT_SCHEMA_PATH"), workspace)
        self.log_level = os.getenv("ARCHHINT_LOG_LEVEL", "INFO")
        self.log_dir = os.getenv("ARCHHINT_LOG_DIR")
        self.log_json = os.getenv("ARCHHINT_LOG_JSON", "false").lower() == "true"
        self.enable_logging = os.getenv("ARCHHINT_LOGGING", "false").lower() == "true"

    def configure_logging(self):
        from archhint.utils.logger import logger

        logger.configure(
            level=self.log_level,
            log_dir=self.log_dir,
            json_mode=self.log_json,
            enable_logging=self.enable_logging,
        )


def resolve_schema_path(explicit: Optional[str], workspace: Optional[str] = None) -> Path:
    """Pick the schema file: explicit path, then workspace metadata.yaml, then bundled."""
    if explicit:
        return Path(explicit)
    if workspace:
        candidate = Path(workspace) / WORKSPACE_SCHEMA_NAME
        if candidate.is_file():
            return candidate
    return BUNDLED_SCHEMA
