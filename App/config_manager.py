"""Configuration persistence manager for the sinusoid shading tools.

This module handles loading and saving of shading configuration to/from JSON files.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, ShadingConfig


class ConfigManager:
    """Handles loading and saving of shading configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.sinusoid_shading_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> ShadingConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            ShadingConfig with loaded or default values
        """
        config = ShadingConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update config with loaded values (fallback to defaults)
                config = ShadingConfig(
                    **{
                        fld.name: type(getattr(config, fld.name))(
                            data.get(fld.name, getattr(config, fld.name))
                        )
                        for fld in fields(ShadingConfig)
                    }
                )
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            config = ShadingConfig()

        return config

    def save(self, config: ShadingConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: ShadingConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
