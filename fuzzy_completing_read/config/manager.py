"""Configuration management for fuzzy-completing-read.

This module handles loading, saving, and validating configuration settings,
the candidate limit, the fallback routine and debug output.
"""

import json
import os
from typing import Dict, Any, Optional
from rich.console import Console
from rich.panel import Panel
from ..utils.constants import DEFAULT_CONFIG_DIR
from .defaults import default_config, get_config_path
from .settings import AdapterSettings, FALLBACK_NAMES, settings_from_config

class ConfigManager:
    """Manages configuration for fuzzy-completing-read.

    This class handles loading, saving, and validating configuration files and
    turning them into adapter settings.
    """

    def __init__(self, console: Optional[Console] = None, config_dir: str = DEFAULT_CONFIG_DIR):
        """Initialize the ConfigManager.

        Args:
            console: Rich console for output (optional)
            config_dir: Directory holding configuration files
        """
        self.console = console or Console()
        self.config_dir = config_dir

    def config_exists(self, config_name: Optional[str] = None) -> bool:
        """Check if a configuration file exists without printing messages.

        Args:
            config_name: Optional name of the config to check (defaults to 'default')

        Returns:
            bool: True if the configuration file exists, False otherwise
        """
        return os.path.exists(self._get_config_path(config_name or "default"))

    def load_configuration(self, config_name: Optional[str] = None) -> Dict[str, Any]:
        """Load settings from a configuration file.

        Args:
            config_name: Optional name of the config to load (defaults to 'default')

        Returns:
            Dict containing the configuration settings
        """
        config_path = self._get_config_path(config_name or "default")

        if not os.path.exists(config_path):
            self.console.print(Panel(
                f"[yellow]Configuration file not found:[/yellow]\n"
                f"[blue]{config_path}[/blue]",
                title="Config Not Found", border_style="yellow", expand=False
            ))
            return default_config()

        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)

            # Validate loaded configuration and provide defaults for missing fields
            validated_config = self._validate_config(config_data)

            if validated_config["debug"]:
                self.console.print(f"[dim]Configuration loaded from {config_path}[/dim]")
            return validated_config

        except (OSError, ValueError) as e:
            self.console.print(Panel(
                f"[red]Error loading configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return default_config()

    def load_settings(self, config_name: Optional[str] = None) -> AdapterSettings:
        """Load a configuration file and turn it into adapter settings.

        Args:
            config_name: Optional name of the config to load (defaults to 'default')

        Returns:
            AdapterSettings: Settings built from the configuration
        """
        return settings_from_config(self.load_configuration(config_name))

    def save_configuration(self, config_data: Dict[str, Any], config_name: Optional[str] = None) -> bool:
        """Save settings to a configuration file.

        Args:
            config_data: Dictionary containing the configuration to save
            config_name: Optional name for the config (defaults to 'default')

        Returns:
            bool: True if saved successfully, False otherwise
        """
        config_path = self._get_config_path(config_name or "default")

        try:
            os.makedirs(self.config_dir, exist_ok=True)
            with open(config_path, 'w') as f:
                json.dump(self._validate_config(config_data), f, indent=2)

            self.console.print(Panel(
                f"[green]Configuration saved successfully to:[/green]\n"
                f"[blue]{config_path}[/blue]",
                title="Config Saved", border_style="green", expand=False
            ))
            return True

        except OSError as e:
            self.console.print(Panel(
                f"[red]Error saving configuration:[/red]\n"
                f"{str(e)}",
                title="Error", border_style="red", expand=False
            ))
            return False

    def reset_configuration(self) -> Dict[str, Any]:
        """Reset configuration to defaults.

        Returns:
            Dict containing the default configuration
        """
        config = default_config()

        self.console.print(Panel(
            "[green]Configuration reset to defaults![/green]\n"
            f"• Candidate limit: {config['maxItems']}\n"
            f"• Fallback: {config['fallback']}\n"
            "• Debug output disabled",
            title="Config Reset", border_style="green", expand=False
        ))

        return config

    def _get_config_path(self, config_name: str) -> str:
        """Get the full path to a configuration file.

        Args:
            config_name: Name of the configuration

        Returns:
            str: Full path to the configuration file
        """
        return get_config_path(config_name, self.config_dir)

    def _validate_config(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate configuration data and provide defaults for missing fields.

        Args:
            config_data: Configuration data to validate

        Returns:
            Dict: Validated configuration with defaults applied where needed
        """
        # Start with default configuration
        validated = default_config()

        if not isinstance(config_data, dict):
            return validated

        if "maxItems" in config_data:
            max_items = config_data["maxItems"]
            if max_items is None:
                validated["maxItems"] = None
            elif isinstance(max_items, int) and not isinstance(max_items, bool) and max_items > 0:
                validated["maxItems"] = max_items
            else:
                self.console.print(f"[yellow]Ignoring invalid maxItems value: {max_items!r}[/yellow]")

        if "fallback" in config_data:
            if config_data["fallback"] in FALLBACK_NAMES:
                validated["fallback"] = config_data["fallback"]
            else:
                self.console.print(
                    f"[yellow]Unknown fallback {config_data['fallback']!r}, "
                    f"using {validated['fallback']!r}[/yellow]"
                )

        if "debug" in config_data:
            validated["debug"] = bool(config_data["debug"])

        return validated
