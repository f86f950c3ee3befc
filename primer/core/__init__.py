"""
Primer Core Module

Contains core systems including configuration, constants, exceptions, and logging.
"""

from .config import (
    PrimerConfig,
    DemoConfig,
    GameConfig,
    ApiConfig,
    load_config,
    save_config,
    get_default_config,
    get_config,
    set_config,
)
from .constants import *
from .exceptions import *
from .logging_config import setup_logging, get_logger, LogLevel

__all__ = [
    'PrimerConfig',
    'DemoConfig',
    'GameConfig',
    'ApiConfig',
    'load_config',
    'save_config',
    'get_default_config',
    'get_config',
    'set_config',
    'setup_logging',
    'get_logger',
    'LogLevel',
]
