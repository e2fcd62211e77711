"""
Todd directory structure management.

This module provides centralized path management for runtime directories.
"""

import os
from pathlib import Path


class ToddPaths:
    """Manage Todd's runtime directory structure."""

    @staticmethod
    def get_base_dir() -> Path:
        """Get base Todd directory."""
        base = os.getenv("TODD_DATA_DIR")
        if base:
            return Path(base)
        return Path.home() / ".todd"

    @staticmethod
    def get_logs_dir() -> Path:
        """Get logs directory for workflow logs."""
        return ToddPaths.get_base_dir() / "logs"

    @staticmethod
    def get_workspaces_dir() -> Path:
        """Get parent directory for ephemeral repository clones."""
        return ToddPaths.get_base_dir() / "workspaces"

