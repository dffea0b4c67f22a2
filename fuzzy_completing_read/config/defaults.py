"""Default configuration settings for fuzzy-completing-read.

This module provides default settings and paths used throughout the package.
"""

import os
from ..utils.constants import DEFAULT_MAX_ITEMS, DEFAULT_FALLBACK_NAME, DEFAULT_CONFIG_FILE, DEFAULT_CONFIG_DIR

def default_config() -> dict:
    """Get default configuration settings.

    Returns:
        dict: Default configuration dictionary
    """

    return {
        "maxItems": DEFAULT_MAX_ITEMS,  # None means unlimited
        "fallback": DEFAULT_FALLBACK_NAME,
        "debug": False
    }

def get_config_path(config_name: str = "default", config_dir: str = DEFAULT_CONFIG_DIR) -> str:
    """Get the path to a specific configuration file.

    Args:
        config_name: Name of the configuration (default: "default")
        config_dir: Directory holding configuration files

    Returns:
        str: Path to the configuration file
    """
    # Sanitize the config name
    config_name = ''.join(c for c in config_name if c.isalnum() or c in ['-', '_']).lower() or "default"

    if config_name == "default":
        return os.path.join(config_dir, DEFAULT_CONFIG_FILE)
    else:
        return os.path.join(config_dir, f"{config_name}.json")
