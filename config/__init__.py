"""Config package facade."""

from config.loader import config_from_dict, load_config
from config.models import Config, LoggerConfig, OutputConfig

__all__ = [
    "Config",
    "LoggerConfig",
    "OutputConfig",
    "config_from_dict",
    "load_config",
]
