"""Configuration loader for bibterm"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, PositiveInt, StrictBool, StrictStr, ValidationError, field_validator

from .errors import ConfigError

# Load environment variables
load_dotenv()

DEFAULTS: Dict[str, Any] = {
    'dataset': {
        'path': 'kjv.json',
    },
    'logging': {
        'level': 'WARNING',
        'console': True,
        'file': False,
        'path': 'logs/bibterm.log',
        'max_size_mb': 10,
        'backup_count': 3,
    },
}


class DatasetSettings(BaseModel):
    path: StrictStr


class LoggingSettings(BaseModel):
    level: StrictStr
    console: StrictBool
    file: StrictBool
    path: StrictStr
    max_size_mb: PositiveInt
    backup_count: PositiveInt

    @field_validator('level')
    @classmethod
    def known_level(cls, value: str) -> str:
        try:
            logger.level(value)
        except ValueError:
            raise ValueError(f"unknown log level {value!r}")
        return value


class Settings(BaseModel):
    """Shape of a merged configuration"""
    dataset: DatasetSettings
    logging: LoggingSettings


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration manager that loads settings from config.yaml and .env"""

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = os.getenv("BIBTERM_CONFIG", "config.yaml")
        self.config_path = Path(config_path)

        # Load environment variables
        self.dataset_override = os.getenv("BIBTERM_DATASET")
        self.log_level_override = os.getenv("BIBTERM_LOG_LEVEL")

        self.data = self._load_config()

    @classmethod
    def defaults(cls) -> "Config":
        """Built-in settings only, ignoring files and environment"""
        instance = cls.__new__(cls)
        instance.config_path = None
        instance.dataset_override = None
        instance.log_level_override = None
        instance.data = copy.deepcopy(DEFAULTS)
        return instance

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file over the defaults, then validate"""
        loaded: Any = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Could not read configuration file {self.config_path}: {e}") from e

            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigError(f"Configuration file {self.config_path} must contain a mapping")

        data = _merge(DEFAULTS, loaded)
        if isinstance(data.get('logging'), dict):
            if self.log_level_override:
                data['logging']['level'] = self.log_level_override
            if isinstance(data['logging'].get('level'), str):
                data['logging']['level'] = data['logging']['level'].upper()

        try:
            Settings.model_validate(data)
        except ValidationError as e:
            detail = e.errors()[0]
            where = ".".join(str(part) for part in detail['loc'])
            raise ConfigError(f"Invalid configuration {where}: {detail['msg']}") from e

        return data

    def __getattr__(self, name: str) -> Any:
        """Allow dot notation access to config values"""
        if name in self.__dict__.get('data', {}):
            return self.data[name]
        raise AttributeError(f"Config has no attribute: {name}")

    @property
    def dataset_path(self) -> Path:
        """Effective dataset path: environment first, then config file"""
        if self.dataset_override:
            return Path(self.dataset_override)
        return Path(self.dataset['path'])
