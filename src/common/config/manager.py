from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pathlib import Path
from typing import List, Optional

from .models import AppConfig
from ..exceptions import ConfigurationError

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "conf"

class ConfigManager:
    """Centralizes configuration loading and validation"""

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    @staticmethod
    def with_defaults(cfg: DictConfig) -> DictConfig:
        """
        Merges a raw config (e.g. the one handed over by hydra) onto the
        structured defaults, so missing sections get typed default values.
        """
        try:
            return OmegaConf.merge(OmegaConf.structured(AppConfig), cfg)
        except OmegaConfBaseException as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def load_app_config(self, overrides: Optional[List[str]] = None) -> DictConfig:
        """Loads conf/config.yaml, applying optional dotlist overrides"""
        config_path = self.config_dir / "config.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Config not found: {config_path}")

        cfg = self.with_defaults(OmegaConf.load(config_path))
        if overrides:
            try:
                cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(overrides))
            except OmegaConfBaseException as e:
                raise ConfigurationError(f"Invalid override {overrides}: {e}") from e
        return cfg

    def load_deployment(self, name: str) -> DictConfig:
        """Loads a camera deployment (seed cameras and sample alerts)"""
        config_path = self.config_dir / "deployment" / f"{name}.yaml"

        if not config_path.exists():
            raise ConfigurationError(f"Deployment not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        if 'cameras' not in cfg:
            raise ConfigurationError(f"Missing required deployment key: cameras ({config_path})")
        if 'alerts' not in cfg:
            cfg.alerts = []

        return cfg
