"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

CONFIG_ENV = "CLUSTERREVIEW_CONFIG"


def default_config_path() -> Path:
    """Config path from the environment, else ~/.config/clusterreview/config.yaml."""
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "clusterreview" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, or defaults if there is no config file."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    def get_case_path(self, case_path: Optional[Path] = None) -> Path:
        """Resolve the case file from an explicit path or the config."""
        if case_path is not None:
            return case_path
        if not self.config.case_path:
            raise ValueError("No case file given and no case_path configured")
        return Path(self.config.case_path).expanduser()

    @property
    def report_dir(self) -> Optional[Path]:
        """Get report directory path, if configured."""
        if not self.config.report_dir:
            return None
        path = Path(self.config.report_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
