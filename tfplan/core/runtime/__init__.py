"""
Runtime: configuración y logging.
"""

from tfplan.core.runtime.settings import Settings, load_settings, resolve_config_path
from tfplan.core.runtime.logger import setup_logger

__all__ = ["Settings", "load_settings", "resolve_config_path", "setup_logger"]
