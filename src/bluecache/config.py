import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator, ConfigDict

from . import constants
from .utils import setup_logger
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
)


logger = logging.getLogger(__name__)


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model describing the logging setup of bluecache
    """
    debug: bool = False
    log_file: Optional[str] = None
    log_levels: Dict[str, str] = Field(default_factory=dict)
    model_config = ConfigDict(extra="forbid")

    @field_validator('log_levels')
    @classmethod
    def check_log_levels(cls, value: Dict[str, str]) -> Dict[str, str]:
        """Normalize level names and reject unknown ones"""
        normalized = {}
        for name, level in value.items():
            if level.upper() not in constants.VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid log level '{level}' for '{name}', must be one of {sorted(constants.VALID_LOG_LEVELS)}."
                )
            normalized[name] = level.upper()
        return normalized


class Config:
    """
    Loads and validates a bluecache.yml file using Pydantic models.
    """
    def __init__(self, config_path: Union[str, Path] = constants.DEFAULT_CONFIG_FILENAME):
        self.path = Path(config_path)
        logger.info(f"Loading configuration from '{self.path}'...")
        raw_data = self._load_raw_config()

        try:
            self.model = ConfigModel.model_validate(raw_data)
            logger.debug(f"Configuration model validated successfully: \n{self.model.model_dump_json(indent=2)}")
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}") from e

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = self.path.read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}") from e
        try:
            config_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}") from e
        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    @property
    def debug(self) -> bool:
        return self.model.debug

    @property
    def log_file(self) -> Optional[str]:
        return self.model.log_file

    @property
    def log_levels(self) -> Dict[str, str]:
        return dict(self.model.log_levels)

    def apply(self) -> None:
        """Configure logging from the loaded settings."""
        setup_logger(
            debug=self.debug,
            module_levels=self.log_levels or None,
            log_file=self.log_file,
        )
